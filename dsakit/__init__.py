"""Classic data structures and algorithms: hash table, stack, queue, graphs, BST and heap."""

__version__ = "0.1.0"