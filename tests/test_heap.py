import random

import pytest

from pqbench.heap import MaxHeap


def test_new_heap_is_empty():
    assert len(MaxHeap()) == 0


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().peek()


def test_extract_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().extract_max()


def test_change_priority_missing_raises():
    h = MaxHeap()
    h.insert(1, 1)
    with pytest.raises(ValueError):
        h.change_priority(2, 5)


def test_peek_returns_highest_without_removing():
    h = MaxHeap()
    h.insert(5, 1)
    h.insert(6, 8)
    h.insert(7, 4)
    assert h.peek() == 6
    assert len(h) == 3


def test_extract_yields_descending_priorities():
    rng = random.Random(42)
    priorities = {v: rng.randrange(1000) for v in range(200)}
    h = MaxHeap()
    for v, p in priorities.items():
        h.insert(v, p)
    out = [priorities[h.extract_max()] for _ in range(len(priorities))]
    assert out == sorted(priorities.values(), reverse=True)
    assert len(h) == 0


def test_extract_returns_every_value_once():
    h = MaxHeap()
    values = list(range(50))
    for v in values:
        h.insert(v, v % 5)
    assert sorted(h.extract_max() for _ in values) == values


def test_change_priority_raise_moves_to_top():
    h = MaxHeap()
    h.insert(1, 10)
    h.insert(2, 20)
    h.insert(3, 30)
    h.change_priority(1, 100)
    assert h.peek() == 1


def test_change_priority_lower_moves_down():
    h = MaxHeap()
    h.insert(1, 10)
    h.insert(2, 20)
    h.insert(3, 30)
    h.change_priority(3, 0)
    assert [h.extract_max() for _ in range(3)] == [2, 1, 3]


def test_random_changes_keep_heap_order():
    rng = random.Random(7)
    priorities = {v: rng.randrange(100) for v in range(100)}
    h = MaxHeap()
    for v, p in priorities.items():
        h.insert(v, p)
    for _ in range(300):
        v = rng.randrange(100)
        p = rng.randrange(100)
        h.change_priority(v, p)
        priorities[v] = p
    out = [priorities[h.extract_max()] for _ in range(100)]
    assert out == sorted(priorities.values(), reverse=True)