from ftformat.linkedlist import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.add_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_add_back_appends():
    lst = LinkedList([1, 2])
    node = lst.add_back(3)
    assert lst.last() is node
    assert list(lst) == [1, 2, 3]


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.add_back("x")
    assert lst.head is node
    assert node.next is None


def test_last_node():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    assert len(lst) == 5
    lst.add_front(-1)
    assert len(lst) == 6


def test_each_visits_in_order():
    seen = []
    LinkedList(["x", "y", "z"]).each(seen.append)
    assert seen == ["x", "y", "z"]


def test_clear_calls_delete_and_empties():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []