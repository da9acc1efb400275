# algokit

Classic algorithms and data structures in plain Python, with no third-party
dependencies. It is a library only: everything is used by importing it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.structures` | `DisjointSet`, `FenwickTree`, `SegmentTree`, `LRUCache` |
| `algokit.graphs` | `bfs`, `dfs`, `dijkstra`, `topological_order`, `kruskal_mst`, `floyd_warshall`, `count_provinces`, `flood_fill`, plus `CycleError` and `NegativeCycleError` |
| `algokit.text` | `length_of_last_word`, `length_of_longest_substring`, `postfix_to_infix` |
| `algokit.arrays` | `max_subarray_sum`, `sorted_squares`, `three_sum`, `max_profit`, `median_of_sorted_arrays`, `longest_increasing_subsequence`, `longest_mountain`, `minimum_abs_difference`, `rotate_right` |
| `algokit.arith` | `factorial`, `n_choose_r`, `is_prime`, `next_prime` |
| `algokit.puzzles` | `n_queens`, `knapsack` |
| `algokit.trees` | `TreeNode`, `inorder`, `preorder`, `postorder`, `level_order`, `vertical_traversal` |
| `algokit.linked_lists` | `ListNode`, `DoublyLinkedList`, `build_list`, `to_list`, `has_cycle`, `reverse_list` |

## Examples

### Data structures

```python
from algokit.structures import DisjointSet, FenwickTree, SegmentTree, LRUCache

sets = DisjointSet(5)
sets.union(0, 1)
sets.union(3, 4)
sets.find(1) == sets.find(0)       # True
sets.find(2) == sets.find(3)       # False

tree = FenwickTree(5)              # positions 1..5
tree.add(1, 5)
tree.add(3, 2)
tree.add(5, 7)
tree.range_sum(1, 3)               # 7

seg = SegmentTree([1, 3, 5, 7, 9, 11])   # positions 0..5
seg.query(1, 3)                    # 15
seg.update(2, 6)
seg.query(1, 3)                    # 16

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                       # 1
cache.put(3, 3)                    # evicts key 2
cache.get(2)                       # None
```

### Graphs

```python
from algokit.graphs import dijkstra, kruskal_mst, topological_order

adjacency = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], [(4, 3)], []]
dijkstra(adjacency, 0)             # [0, 3, 1, 4, 7]

kruskal_mst(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])
# (19, [(2, 3, 4), (0, 3, 5), (0, 1, 10)])

topological_order([[], [2, 3], [4], [4], [5], []])   # [0, 1, 2, 3, 4, 5]
```

`dijkstra` gives `math.inf` for unreachable vertices. `topological_order`
raises `CycleError` when the graph has a cycle, and `floyd_warshall` raises
`NegativeCycleError` when it finds a negative-weight cycle; both are
subclasses of `ValueError`. `flood_fill` returns a recoloured copy and leaves
the input image untouched.

### Arrays, text and arithmetic

```python
from algokit.arrays import max_subarray_sum, rotate_right
from algokit.text import length_of_longest_substring, postfix_to_infix
from algokit.arith import n_choose_r, next_prime
from algokit.puzzles import n_queens

max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])   # 7
rotate_right([1, 2, 3, 4, 5, 6, 7], 3)            # [5, 6, 7, 1, 2, 3, 4]
length_of_longest_substring("abcabcbb")           # 3
postfix_to_infix("ab+c*")                         # "((a+b)*c)"
n_choose_r(5, 2)                                  # 10
next_prime(14)                                    # 17
len(n_queens(4))                                  # 2
```

### Trees and linked lists

```python
from algokit.trees import TreeNode, inorder, level_order
from algokit.linked_lists import build_list, reverse_list, to_list

root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
inorder(root)                      # [4, 2, 5, 1, 3]
level_order(root)                  # [1, 2, 3, 4, 5]

to_list(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
```

## What it does not do

There is no command-line tool; the package is used from Python code only.
It also has no sorting routines and no binary-search or substring-search
helpers; use Python's built-in `sorted`, the `bisect` module and `str.find`
for those.