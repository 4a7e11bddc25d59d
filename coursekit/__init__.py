"""Teaching exercises: Euclidean vectors, word ladders, stacks, a fixed array and a bookstore tally."""

__version__ = "0.1.0"