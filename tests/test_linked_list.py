import pytest

from libft.linked_list import LinkedList, Node


def test_empty_list_has_no_elements():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.head is None


def test_constructor_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]
    assert lst.last() == 1


def test_push_back_appends():
    lst = LinkedList([1])
    lst.push_back(2)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last() == 3


def test_mixed_pushes():
    lst = LinkedList()
    lst.push_back("mid")
    lst.push_front("first")
    lst.push_back("end")
    assert list(lst) == ["first", "mid", "end"]
    assert len(lst) == 3


def test_head_is_node_chain():
    lst = LinkedList(["x", "y"])
    assert isinstance(lst.head, Node)
    assert lst.head.content == "x"
    assert lst.head.next.content == "y"
    assert lst.head.next.next is None


def test_last_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    lst = LinkedList([10, 20, 30])
    lst.clear(deleted.append)
    assert deleted == [10, 20, 30]
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.last()


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []
    lst.push_back(5)
    assert list(lst) == [5]


def test_iterate_visits_every_content():
    seen = []
    LinkedList(["a", "b"]).iterate(seen.append)
    assert seen == ["a", "b"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped is not original


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0