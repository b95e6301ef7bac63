# pqbench

pqbench times priority-queue operations on two structures and prints the
average time of one operation on each:

- `MaxHeap` (`pqbench.heap`) is a binary max-heap ordered by priority.
- `ArrayPriorityQueue` (`pqbench.array_queue`) is an unsorted list. It is
  scanned for the maximum on every lookup. When priorities are equal, the
  element inserted first wins.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Interactive use

```
pqbench
```

You can also run it as `python -m pqbench.cli`. Pass `--seed N` to make the
random data repeatable.

The program first reads three whole numbers from standard input:

1. the structure size,
2. the number of samples,
3. the number of operations per sample.

Numbers may be separated by any whitespace. If input ends before all three
are read, the program exits with status 1. It does the same if one of them
is not a number.

It then shows a menu:

| Choice | Operation measured |
|--------|--------------------|
| 1 | `insert(e, p)` |
| 2 | `extract_max()` |
| 3 | `find_max()` |
| 4 | `modify_key(e, p)` |
| 5 | `return_size()` |
| 0 | quit |

Any other choice prints a message and shows the menu again. The program also
ends when input runs out at the menu. If the size, the sample count or the
operation count is not positive, an error is printed to standard error and
the menu is shown again.

### What one run does

For each sample, the program builds a new heap and a new list queue. It fills
both with the same unique values and the same priorities. Each priority is
drawn at random from `0` to `size * 10 - 1`.

How the structures are filled depends on the operation:

- For `insert`, both are filled with `size` values. The program then times
  inserting `operations` more values.
- For `extract_max`, both are filled with `size + operations` values. The
  program then times `operations` extractions.
- For `find_max`, `modify_key` and `return_size`, both are filled with `size`
  values. For `modify_key`, each timed call gives a random stored value a new
  random priority.

Each call is timed on its own with `time.perf_counter_ns`. The report gives
the mean over all samples and operations, in nanoseconds, for example:

```
Sredni czas insert (MaxHeap): 812.4 ns
Sredni czas insert (TablicaPriorytetowa): 301.7 ns
```

## Library use

```python
import random

from pqbench.heap import MaxHeap
from pqbench.array_queue import ArrayPriorityQueue
from pqbench.benchmark import Operation, run_benchmark, format_result

heap = MaxHeap()
heap.insert(7, priority=3)
heap.insert(8, priority=5)
assert heap.peek() == 8
assert heap.extract_max() == 8
assert len(heap) == 1

queue = ArrayPriorityQueue()
queue.insert(1, 2)
queue.insert(2, 2)
assert queue.find_max() == 1  # equal priorities: first in, first out

rng = random.Random(0)
result = run_benchmark(Operation.INSERT, 1000, 5, 100, rng)
print(result.heap_ns, result.array_ns)
print(format_result(Operation.INSERT, result))
```

### Errors and edge cases

- `peek`, `find_max` and `extract_max` on an empty structure raise
  `IndexError`.
- `MaxHeap.change_priority` raises `ValueError` if the value is not present.
- `ArrayPriorityQueue.modify_key` ignores values that are not present.
- If a value is stored more than once, `change_priority` and `modify_key`
  change only the first match.

### Helper functions

- `pqbench.data.unique_values(n, rng=None)` returns the numbers `0` to `n - 1`
  in shuffled order. It raises `ValueError` for a negative `n`.
- `pqbench.benchmark.random_priority(size, rng=None)` returns a random integer
  from `0` to `size * 10 - 1`. It raises `ValueError` if `size` is not
  positive.
- `pqbench.benchmark.run_benchmark(operation, size, samples, operations, rng=None)`
  returns a `BenchmarkResult` with `heap_ns` and `array_ns`. It raises
  `ValueError` if any of the counts is not positive.

If `rng` is omitted, a new unseeded `random.Random` is used.

## Running the tests

```
pytest
```