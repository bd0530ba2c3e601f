"""Queue built on the singly linked list."""

from __future__ import annotations

from typing import Any

from .linkedlist import LinkedList


class Queue(LinkedList):
    """Queue over a linked list; items are both added and taken at the head."""

    def enqueue(self, data: Any) -> None:
        self.insert_next(None, data)

    def dequeue(self) -> Any:
        """Remove and return the head item, or return None when empty."""
        if len(self) == 0:
            return None
        return self.remove_next(None)

    def peek(self) -> Any:
        """Return the head item, or None when the queue is empty."""
        return None if self.head is None else self.head.data