import pytest

from algokit.linked_lists import (
    DoublyLinkedList,
    ListNode,
    build_list,
    has_cycle,
    reverse_list,
    to_list,
)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5], ["a", "b", "a"]])
def test_build_to_list_round_trip(values):
    assert to_list(build_list(values)) == values


def test_build_empty_gives_none():
    assert build_list([]) is None


@pytest.mark.parametrize("values", [[], [7], [1, 2], [10, 20, 30, 40]])
def test_reverse_list(values):
    assert to_list(reverse_list(build_list(values))) == values[::-1]


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [3, 1, 4, 1, 5]])
def test_reverse_twice_restores(values):
    assert to_list(reverse_list(reverse_list(build_list(values)))) == values


def test_reverse_returns_old_tail():
    head = build_list([1, 2, 3])
    tail = head.next.next
    assert reverse_list(head) is tail
    assert head.next is None


@pytest.mark.parametrize("values", [[], [1], [10, 20, 30]])
def test_no_cycle_in_built_list(values):
    assert has_cycle(build_list(values)) is False


def test_cycle_detected():
    head = build_list([1, 2, 3, 4, 5])
    second = head.next
    node = head
    while node.next is not None:
        node = node.next
    node.next = second
    assert has_cycle(head) is True


def test_self_loop_detected():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


def test_to_list_rejects_cycle():
    head = build_list([1, 2])
    head.next.next = head
    with pytest.raises(ValueError):
        to_list(head)


def test_push_back_keeps_order():
    items = DoublyLinkedList()
    for value in [1, 2, 3]:
        items.push_back(value)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_push_front_reverses_order():
    items = DoublyLinkedList()
    for value in [1, 2, 3]:
        items.push_front(value)
    assert list(items) == [3, 2, 1]
    assert len(items) == 3


def test_mixed_pushes_and_backward_links():
    items = DoublyLinkedList()
    items.push_back(2)
    items.push_front(1)
    items.push_back(3)
    assert list(items) == [1, 2, 3]
    assert list(reversed(items)) == [3, 2, 1]


def test_empty_doubly_linked_list():
    items = DoublyLinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert list(reversed(items)) == []


def test_construct_from_values():
    values = ["x", "y", "z"]
    items = DoublyLinkedList(values)
    assert list(items) == values
    assert list(reversed(items)) == values[::-1]