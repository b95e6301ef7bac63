"""Timing comparison of a binary max-heap and a list-backed priority queue."""

__version__ = "0.1.0"
__all__ = ["array_queue", "heap", "data", "benchmark", "cli"]