"""Classic data structures and algorithms: dynamic programming, sorting, heaps,
spanning trees, linked lists and a background counter."""

__version__ = "0.1.0"