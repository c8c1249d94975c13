"""Classic data structures and algorithms: sorting, linked lists, stacks and queues, trees, heaps, hash tables, shortest paths and locality-sensitive hashing."""

__version__ = "0.1.0"