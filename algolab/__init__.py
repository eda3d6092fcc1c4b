"""Classic data structures and algorithms, each with a small file-driven command."""

__version__ = "0.1.0"