"""Timing of priority-queue operations on a heap and on an unsorted list."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pqbench.array_queue import ArrayPriorityQueue
from pqbench.data import unique_values
from pqbench.heap import MaxHeap


class Operation(Enum):
    """Queue operation that can be benchmarked."""

    INSERT = "insert"
    EXTRACT_MAX = "extract_max"
    FIND_MAX = "find_max"
    MODIFY_KEY = "modify_key"
    RETURN_SIZE = "return_size"


@dataclass(frozen=True)
class BenchmarkResult:
    """Average time of one operation, in nanoseconds, for each structure."""

    heap_ns: float
    array_ns: float


def random_priority(size: int, rng: random.Random | None = None) -> int:
    """Return a priority drawn from a range ten times the structure size."""
    if size <= 0:
        raise ValueError("size must be positive")
    return (rng if rng is not None else random.Random()).randrange(size * 10)


def _timed(action: Callable[..., object], *args: int) -> int:
    start = time.perf_counter_ns()
    action(*args)
    return time.perf_counter_ns() - start


def _run_sample(
    operation: Operation, size: int, operations: int, rng: random.Random
) -> tuple[int, int]:
    heap = MaxHeap()
    array = ArrayPriorityQueue()

    grows = operation in (Operation.INSERT, Operation.EXTRACT_MAX)
    values = unique_values(size + operations if grows else size, rng)
    preload = values if operation is Operation.EXTRACT_MAX else values[:size]
    for value in preload:
        priority = random_priority(size, rng)
        heap.insert(value, priority)
        array.insert(value, priority)

    heap_total = 0
    array_total = 0
    for i in range(operations):
        if operation is Operation.INSERT:
            args: tuple[int, ...] = (values[size + i], random_priority(size, rng))
            heap_action, array_action = heap.insert, array.insert
        elif operation is Operation.EXTRACT_MAX:
            args = ()
            heap_action, array_action = heap.extract_max, array.extract_max
        elif operation is Operation.FIND_MAX:
            args = ()
            heap_action, array_action = heap.peek, array.find_max
        elif operation is Operation.MODIFY_KEY:
            value = values[rng.randrange(len(values))]
            args = (value, random_priority(size, rng))
            heap_action, array_action = heap.change_priority, array.modify_key
        else:
            args = ()
            heap_action, array_action = heap.__len__, array.__len__
        heap_total += _timed(heap_action, *args)
        array_total += _timed(array_action, *args)
    return heap_total, array_total


def run_benchmark(
    operation: Operation,
    size: int,
    samples: int,
    operations: int,
    rng: random.Random | None = None,
) -> BenchmarkResult:
    """Time an operation on fresh structures of the given size, averaged over all runs."""
    if size <= 0:
        raise ValueError("size must be positive")
    if samples <= 0:
        raise ValueError("samples must be positive")
    if operations <= 0:
        raise ValueError("operations must be positive")
    rng = rng if rng is not None else random.Random()

    heap_sum = 0
    array_sum = 0
    for _ in range(samples):
        heap_ns, array_ns = _run_sample(operation, size, operations, rng)
        heap_sum += heap_ns
        array_sum += array_ns

    runs = samples * operations
    return BenchmarkResult(heap_sum / runs, array_sum / runs)


def format_result(operation: Operation, result: BenchmarkResult) -> str:
    """Render a result as the two report lines, heap first."""
    name = operation.value
    return (
        f"Sredni czas {name} (MaxHeap): {result.heap_ns:g} ns\n"
        f"Sredni czas {name} (TablicaPriorytetowa): {result.array_ns:g} ns"
    )