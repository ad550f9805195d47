"""Lenient pull-style JSON reader yielding raw token slices, with a re-printer and demos."""

__version__ = "0.1.0"
__all__ = ["reader", "printer", "demos"]