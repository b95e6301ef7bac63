"""Binary max-heap keyed on priority."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    priority: int


def _parent(i: int) -> int:
    return (i - 1) // 2


class MaxHeap:
    """Max-heap of values ordered by priority."""

    def __init__(self) -> None:
        self._nodes: list[_Node] = []

    def _swap(self, i: int, j: int) -> None:
        self._nodes[i], self._nodes[j] = self._nodes[j], self._nodes[i]

    def _sift_up(self, index: int) -> None:
        nodes = self._nodes
        while index > 0 and nodes[index].priority > nodes[_parent(index)].priority:
            self._swap(index, _parent(index))
            index = _parent(index)

    def _sift_down(self, index: int) -> None:
        nodes = self._nodes
        size = len(nodes)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and nodes[child].priority > nodes[largest].priority:
                    largest = child
            if largest == index:
                return
            self._swap(index, largest)
            index = largest

    def insert(self, value: int, priority: int) -> None:
        """Add a value with the given priority."""
        self._nodes.append(_Node(value, priority))
        self._sift_up(len(self._nodes) - 1)

    def peek(self) -> int:
        """Return the value with the highest priority without removing it."""
        if not self._nodes:
            raise IndexError("Heap is empty")
        return self._nodes[0].value

    def extract_max(self) -> int:
        """Remove and return the value with the highest priority."""
        if not self._nodes:
            raise IndexError("Heap is empty")
        top = self._nodes[0].value
        last = self._nodes.pop()
        if self._nodes:
            self._nodes[0] = last
            self._sift_down(0)
        return top

    def change_priority(self, value: int, new_priority: int) -> None:
        """Change the priority of the first node holding value."""
        for index, node in enumerate(self._nodes):
            if node.value == value:
                old = node.priority
                node.priority = new_priority
                if new_priority > old:
                    self._sift_up(index)
                else:
                    self._sift_down(index)
                return
        raise ValueError("Value not found")

    def __len__(self) -> int:
        return len(self._nodes)