"""Doubly linked circular list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .linkedlist import ListError, _DoubleChain


@dataclass(eq=False, repr=False)
class CDListNode:
    """A node of a circular doubly linked list."""

    data: Any
    next: Optional["CDListNode"] = None
    prev: Optional["CDListNode"] = None


class CircularDoublyLinkedList(_DoubleChain):
    """Circular doubly linked list; an optional ``destroy`` callback receives items on teardown."""

    _node_type = CDListNode
    _circular = True

    def __init__(self, destroy: Optional[Callable[[Any], None]] = None) -> None:
        super().__init__(destroy)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def nodes(self) -> Iterator[CDListNode]:
        """Yield each node once, starting at the head."""
        return self._walk()

    @property
    def head(self) -> Optional[CDListNode]:
        return self._head

    def insert_next(self, node: Optional[CDListNode], data: Any) -> CDListNode:
        """Insert ``data`` after ``node``; ``node`` may be None only when empty."""
        return self._splice(node, data, after=True)

    def insert_prev(self, node: Optional[CDListNode], data: Any) -> CDListNode:
        """Insert ``data`` before ``node``; ``node`` may be None only when empty."""
        return self._splice(node, data, after=False)

    def remove(self, node: Optional[CDListNode]) -> Any:
        """Unlink ``node`` and return its data."""
        if node is None or self._size == 0:
            raise ListError("cannot remove: no node or empty list")
        if self._size == 1:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        node.next = node.prev = None
        self._size -= 1
        return node.data

    def destroy(self) -> None:
        """Remove every item from the head, passing each to the destroy callback."""
        self._drain(lambda: self.remove(self._head))