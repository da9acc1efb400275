import random

import pytest

from algokit.structures import DisjointSet, FenwickTree, LRUCache, SegmentTree


def test_disjoint_set_example():
    d = DisjointSet(5)
    assert d.union(0, 1)
    assert d.union(3, 4)
    assert d.find(1) == d.find(0)
    assert d.find(2) != d.find(3)


def test_disjoint_set_repeated_union_reports_false():
    d = DisjointSet(4)
    assert d.union(0, 1)
    assert d.union(1, 2)
    assert not d.union(2, 0)
    assert d.find(0) == d.find(2)


def test_disjoint_set_components_match_transitive_closure():
    rng = random.Random(7)
    size = 40
    d = DisjointSet(size)
    pairs = [(rng.randrange(size), rng.randrange(size)) for _ in range(25)]
    groups = [{i} for i in range(size)]
    for a, b in pairs:
        d.union(a, b)
        ga = next(g for g in groups if a in g)
        gb = next(g for g in groups if b in g)
        if ga is not gb:
            ga |= gb
            groups.remove(gb)
    for group in groups:
        roots = {d.find(x) for x in group}
        assert len(roots) == 1
    assert len({d.find(x) for x in range(size)}) == len(groups)


def test_disjoint_set_out_of_range():
    with pytest.raises(IndexError):
        DisjointSet(3).find(3)


def test_fenwick_example():
    ft = FenwickTree(5)
    ft.add(1, 5)
    ft.add(3, 2)
    ft.add(5, 7)
    assert ft.range_sum(1, 3) == 7


def test_fenwick_matches_plain_sums():
    rng = random.Random(3)
    size = 30
    values = [0] * (size + 1)
    ft = FenwickTree(size)
    for _ in range(100):
        i = rng.randint(1, size)
        v = rng.randint(-50, 50)
        values[i] += v
        ft.add(i, v)
    for left in range(1, size + 1):
        for right in range(left, size + 1):
            assert ft.range_sum(left, right) == sum(values[left : right + 1])


def test_fenwick_prefix_of_zero_is_empty():
    ft = FenwickTree(3)
    ft.add(2, 9)
    assert ft.prefix_sum(0) == 0
    assert ft.prefix_sum(3) == 9


@pytest.mark.parametrize("index", [0, 6])
def test_fenwick_add_out_of_range(index):
    with pytest.raises(IndexError):
        FenwickTree(5).add(index, 1)


def test_fenwick_prefix_beyond_size():
    with pytest.raises(IndexError):
        FenwickTree(5).prefix_sum(6)


def test_segment_tree_example():
    st = SegmentTree([1, 3, 5, 7, 9, 11])
    assert st.query(1, 3) == 15
    st.update(2, 6)
    assert st.query(1, 3) == 16


def test_segment_tree_matches_slices_after_updates():
    rng = random.Random(11)
    values = [rng.randint(-100, 100) for _ in range(23)]
    st = SegmentTree(values)
    for _ in range(40):
        i = rng.randrange(len(values))
        values[i] = rng.randint(-100, 100)
        st.update(i, values[i])
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        assert st.query(left, right) == sum(values[left : right + 1])


def test_segment_tree_empty_range_is_zero():
    values = [4, 8, 15]
    st = SegmentTree(values)
    assert st.query(2, 1) == 0
    assert st.query(0, 2) == sum(values)


def test_segment_tree_rejects_empty_and_bad_update():
    with pytest.raises(ValueError):
        SegmentTree([])
    with pytest.raises(IndexError):
        SegmentTree([1, 2]).update(2, 5)


def test_lru_example():
    c = LRUCache(2)
    c.put(1, 1)
    c.put(2, 2)
    assert c.get(1) == 1
    c.put(3, 3)
    assert c.get(2) is None
    assert c.get(3) == 3
    assert c.get(1) == 1


def test_lru_update_refreshes_key():
    c = LRUCache(2)
    c.put("a", 1)
    c.put("b", 2)
    c.put("a", 10)
    c.put("c", 3)
    assert "b" not in c
    assert c.get("a") == 10
    assert len(c) == 2


def test_lru_rejects_zero_capacity():
    with pytest.raises(ValueError):
        LRUCache(0)