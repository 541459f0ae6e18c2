"""Breadth-first, bidirectional and greedy best-first graph search, plus a palindrome check and a client error type."""

__version__ = "0.1.0"
__all__ = ["bfs", "bidirectional", "cli", "errors", "gbfs", "palindrome"]