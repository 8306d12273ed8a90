"""Small everyday helpers for hashing, copying, money, collections, text, paths and time."""

__version__ = "0.1.0"