"""Classic data structures and algorithms: stacks, queues, lists, trees, heaps, graphs and sorting."""

__version__ = "0.1.0"