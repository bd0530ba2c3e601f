import pytest

from linkedkit.clist import CircularList
from linkedkit.linkedlist import ListError


def ring(*items, destroy=None):
    lst = CircularList(destroy)
    node = None
    for item in items:
        node = lst.insert_next(node, item)
    return lst


def test_single_node_points_to_itself():
    lst = CircularList()
    node = lst.insert_next(None, 1)
    assert node.next is node
    assert lst.head is node
    assert len(lst) == 1


def test_iteration_visits_each_once():
    lst = ring(1, 2, 3)
    assert list(lst) == [1, 2, 3]
    assert lst.head.next.next.next is lst.head


def test_insert_without_anchor_on_nonempty_raises():
    with pytest.raises(ListError):
        ring(1).insert_next(None, 2)


def test_remove_sole_node_leaves_ring_empty():
    lst = ring(9)
    assert lst.remove_next(lst.head) == 9
    assert (lst.head, len(lst)) == (None, 0)


def test_remove_next_on_empty_ring_raises():
    with pytest.raises(ListError):
        CircularList().remove_next(None)


def test_destroy_passes_all_items():
    seen = []
    lst = ring(1, 2, 3, destroy=seen.append)
    lst.destroy()
    assert sorted(seen) == [1, 2, 3]
    assert len(lst) == 0 and lst.head is None