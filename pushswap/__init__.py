"""Two-stack integer sorting with a restricted set of operations, plus small text, memory and list helpers."""

__version__ = "1.0.0"