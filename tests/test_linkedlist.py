import pytest

from sigtalk.linkedlist import LinkedList, Node


def test_append_keeps_order():
    lst = LinkedList()
    lst.append("a")
    lst.append("b")
    lst.append("c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_init_from_items():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]


def test_prepend_puts_first():
    lst = LinkedList([2, 3])
    node = lst.prepend(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_prepend_on_empty_sets_last():
    lst = LinkedList()
    node = lst.prepend("only")
    assert lst.last() is node
    assert len(lst) == 1


def test_last_node():
    lst = LinkedList(["x", "y"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "y"
    assert last.next is None


def test_last_of_empty_is_none():
    assert LinkedList().last() is None
    assert len(LinkedList()) == 0


def test_pop_front_releases_content():
    released = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(released.append) == "a"
    assert released == ["a"]
    assert list(lst) == ["b"]


def test_pop_front_last_element_empties_list():
    lst = LinkedList([5])
    assert lst.pop_front() == 5
    assert lst.last() is None
    assert lst.head is None
    lst.append(6)
    assert list(lst) == [6]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_releases_in_order():
    released = []
    lst = LinkedList([1, 2, 3])
    lst.clear(released.append)
    assert released == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []


def test_for_each_visits_all():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]


def test_map_failure_releases_partial_results():
    released = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return -x

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, released.append)
    assert released == [-1, -2]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0