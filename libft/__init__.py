"""Helpers for ASCII characters, byte buffers, strings, decimal conversion,
descriptor output and singly linked lists."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "convert", "output", "linked"]