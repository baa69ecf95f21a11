"""Classic algorithm solutions with linked-list, binary-tree and formatting helpers."""

__version__ = "0.1.0"