"""Classic algorithms on arrays, heaps, linked lists, binary trees, greedy choices and recursion."""

__version__ = "0.1.0"