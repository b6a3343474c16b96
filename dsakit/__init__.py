"""Linked lists, stacks, queues, trees, shortest paths and assorted algorithm puzzles."""

__version__ = "0.1.0"