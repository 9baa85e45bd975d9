"""Classic data structures and algorithms with small interactive programs."""

__version__ = "0.1.0"