"""Classic data-structure and algorithm routines: arrays, matrices, searching,
bits, trees, graphs, heaps, linked lists, stacks, queues and strings."""

__version__ = "0.1.0"