"""Singly, doubly and circular linked lists, with a stack and a queue built on them."""

__version__ = "0.1.0"