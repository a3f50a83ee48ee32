import pytest

from dsakit.sequential import Queue, SequentialCollection, Stack


def test_queue_ints():
    q = Queue()
    for x in (7, 3, 7, 25):
        q.push(x)
    assert q.peek() == 7
    q.push(8)
    assert len(q) == 5
    assert q.peek() == 7
    assert q.pop() == 7
    assert len(q) == 4
    assert q.peek() == 3


def test_queue_strings():
    q = Queue()
    for x in ("cat", "Doug", "cat", "groceries"):
        q.push(x)
    assert q.peek() == "cat"
    q.push("dishes")
    assert len(q) == 5
    assert q.peek() == "cat"
    assert q.pop() == "cat"
    assert len(q) == 4
    assert q.peek() == "Doug"


def test_stack_ints():
    s = Stack()
    for x in (1, 8, 3):
        s.push(x)
    assert s.peek() == 3
    s.push(8)
    assert len(s) == 4
    assert s.peek() == 8
    assert s.pop() == 8
    assert len(s) == 3
    assert s.peek() == 3


def test_stack_strings():
    s = Stack()
    for x in ("cat", "dog", "mouse"):
        s.push(x)
    assert s.peek() == "mouse"
    s.push("dog")
    assert len(s) == 4
    assert s.peek() == "dog"
    assert s.pop() == "dog"
    assert len(s) == 3
    assert s.peek() == "mouse"


@pytest.mark.parametrize("cls", [Stack, Queue])
def test_empty_pop_and_peek_raise(cls):
    collection = cls()
    with pytest.raises(IndexError):
        collection.pop()
    with pytest.raises(IndexError):
        collection.peek()


def test_queue_order_round_trip():
    q = Queue()
    items = list(range(10))
    for x in items:
        q.push(x)
    assert [q.pop() for _ in items] == items
    assert len(q) == 0


def test_stack_order_round_trip():
    s = Stack()
    items = list(range(10))
    for x in items:
        s.push(x)
    assert [s.pop() for _ in items] == items[::-1]


@pytest.mark.parametrize("cls", [Stack, Queue])
def test_remove_all_occurrences(cls):
    collection = cls()
    for x in (7, 3, 7, 25, 7):
        collection.push(x)
    collection.remove(7)
    assert len(collection) == 2
    assert 7 not in list(collection)
    assert sorted(collection) == [3, 25]


def test_str_and_iteration_order():
    s = Stack()
    for x in (1, 2):
        s.push(x)
    assert list(s) == [1, 2]
    assert str(s) == " -> (1) -> (2)"
    q = Queue()
    for x in (1, 2):
        q.push(x)
    assert list(q) == [2, 1]


def test_base_is_abstract():
    with pytest.raises(TypeError):
        SequentialCollection()