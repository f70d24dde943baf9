import pytest

from minilex.linkedlist import LinkedList, Node


def test_construct_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0
    assert lst.last() is None
    assert lst.head is None


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.next.content == 2


def test_push_back_appends_and_updates_last():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() is node
    assert lst.last().next is None


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("only")
    assert lst.last() is node
    assert lst.head is node
    assert len(lst) == 1


def test_last_content():
    lst = LinkedList([1, 2, 3])
    assert lst.last().content == 3


def test_clear_calls_deleter_in_order_and_empties():
    seen = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(seen.append)
    assert seen == ["a", "b", "c"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_deleter():
    lst = LinkedList([1, 2])
    lst.clear()
    assert len(lst) == 0
    lst.push_back(5)
    assert list(lst) == [5]


def test_for_each_visits_every_content():
    seen = []
    LinkedList([4, 5, 6]).for_each(seen.append)
    assert seen == [4, 5, 6]


def test_map_builds_new_list_leaving_original():
    original = LinkedList(["a", "bb"])
    mapped = original.map(len)
    assert list(mapped) == [1, 2]
    assert list(original) == ["a", "bb"]
    assert mapped is not original
    assert len(mapped) == len(original)


def test_map_propagates_errors():
    def boom(value):
        raise RuntimeError("bad")

    with pytest.raises(RuntimeError):
        LinkedList([1]).map(boom)


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []


def test_node_links():
    tail = Node("b")
    head = Node("a", tail)
    assert head.next is tail
    assert tail.next is None
    assert head.content == "a"


def test_length_matches_iteration():
    lst = LinkedList(range(10))
    lst.push_front(-1)
    lst.push_back(10)
    assert len(lst) == len(list(lst))