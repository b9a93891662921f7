"""Pyright results as self-maintaining pull request comments."""

__version__ = "0.1.0"
