"""Stack built on the singly linked list."""

from __future__ import annotations

from typing import Any

from .linkedlist import LinkedList


class Stack(LinkedList):
    """Last-in, first-out stack whose top is the head of the list."""

    def push(self, data: Any) -> None:
        self.insert_next(None, data)

    def pop(self) -> Any:
        """Remove and return the top item; raises ListError when empty."""
        return self.remove_next(None)

    def peek(self) -> Any:
        """Return the top item, or None when the stack is empty."""
        return None if self.head is None else self.head.data