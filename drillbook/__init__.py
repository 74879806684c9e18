"""Solutions to classic practice problems as plain Python functions."""

__version__ = "0.1.0"