"""Priority queue kept as an unsorted list, scanned on every lookup."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count


@dataclass
class Entry:
    """A stored value with its priority and insertion stamp."""

    value: int
    priority: int
    inserted_at: int

    def _rank(self) -> tuple[int, int]:
        # Higher priority wins; among equal priorities the earliest insertion wins.
        return (self.priority, -self.inserted_at)


class ArrayPriorityQueue:
    """Max-priority queue on an unsorted list with FIFO tie-breaking."""

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self._clock = count()

    def insert(self, value: int, priority: int) -> None:
        """Append a value with the given priority."""
        self._entries.append(Entry(value, priority, next(self._clock)))

    def _best_index(self) -> int:
        if not self._entries:
            raise IndexError("empty")
        return max(range(len(self._entries)), key=lambda i: self._entries[i]._rank())

    def find_max(self) -> int:
        """Return the value with the highest priority without removing it."""
        return self._entries[self._best_index()].value

    def extract_max(self) -> int:
        """Remove and return the value with the highest priority."""
        return self._entries.pop(self._best_index()).value

    def modify_key(self, value: int, new_priority: int) -> None:
        """Set the priority of the first entry holding value; do nothing if absent."""
        entry = next((e for e in self._entries if e.value == value), None)
        if entry is not None:
            entry.priority = new_priority

    def __len__(self) -> int:
        return len(self._entries)