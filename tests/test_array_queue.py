import pytest

from pqbench.array_queue import ArrayPriorityQueue, Entry


def test_empty_queue_has_length_zero():
    assert len(ArrayPriorityQueue()) == 0


def test_find_max_on_empty_raises():
    with pytest.raises(IndexError):
        ArrayPriorityQueue().find_max()


def test_extract_max_on_empty_raises():
    with pytest.raises(IndexError):
        ArrayPriorityQueue().extract_max()


def test_find_max_does_not_remove():
    q = ArrayPriorityQueue()
    q.insert(7, 3)
    q.insert(8, 9)
    assert q.find_max() == 8
    assert len(q) == 2


def test_extract_in_priority_order():
    q = ArrayPriorityQueue()
    items = [(10, 5), (20, 1), (30, 9), (40, 3)]
    for v, p in items:
        q.insert(v, p)
    expected = [v for v, _ in sorted(items, key=lambda it: -it[1])]
    assert [q.extract_max() for _ in items] == expected
    assert len(q) == 0


def test_equal_priorities_are_fifo():
    q = ArrayPriorityQueue()
    for v in (4, 2, 6, 1):
        q.insert(v, 5)
    assert [q.extract_max() for _ in range(4)] == [4, 2, 6, 1]


def test_modify_key_changes_order():
    q = ArrayPriorityQueue()
    q.insert(1, 10)
    q.insert(2, 20)
    q.modify_key(1, 30)
    assert q.extract_max() == 1
    assert q.extract_max() == 2


def test_modify_key_keeps_insertion_stamp_for_ties():
    q = ArrayPriorityQueue()
    q.insert(1, 10)
    q.insert(2, 5)
    q.modify_key(2, 10)
    assert q.find_max() == 1


def test_modify_key_missing_value_is_ignored():
    q = ArrayPriorityQueue()
    q.insert(1, 10)
    q.modify_key(99, 50)
    assert q.find_max() == 1
    assert len(q) == 1


def test_many_inserts_and_extracts_keep_length():
    q = ArrayPriorityQueue()
    for v in range(100):
        q.insert(v, v % 7)
    for _ in range(60):
        q.extract_max()
    assert len(q) == 40


def test_entry_fields():
    e = Entry(3, 4, 5)
    assert (e.value, e.priority, e.inserted_at) == (3, 4, 5)