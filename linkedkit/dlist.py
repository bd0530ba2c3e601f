"""Doubly linked list with head and tail references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .linkedlist import ListError, _DoubleChain


@dataclass(eq=False, repr=False)
class DListNode:
    """A node of a doubly linked list."""

    data: Any
    next: Optional["DListNode"] = None
    prev: Optional["DListNode"] = None

    def is_head(self) -> bool:
        return self.prev is None

    def is_tail(self) -> bool:
        return self.next is None


class DoublyLinkedList(_DoubleChain):
    """Doubly linked list; an optional ``destroy`` callback receives each item on teardown."""

    _node_type = DListNode

    def __init__(self, destroy: Optional[Callable[[Any], None]] = None) -> None:
        super().__init__(destroy)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def nodes(self) -> Iterator[DListNode]:
        """Yield each node once, starting at the head."""
        return self._walk()

    @property
    def head(self) -> Optional[DListNode]:
        return self._head

    @property
    def tail(self) -> Optional[DListNode]:
        return self._tail

    def insert_next(self, node: Optional[DListNode], data: Any) -> DListNode:
        """Insert ``data`` after ``node``; ``node`` may be None only when empty."""
        return self._splice(node, data, after=True)

    def insert_prev(self, node: Optional[DListNode], data: Any) -> DListNode:
        """Insert ``data`` before ``node``; ``node`` may be None only when empty."""
        return self._splice(node, data, after=False)

    def remove(self, node: Optional[DListNode]) -> Any:
        """Unlink ``node`` and return its data."""
        if node is None or self._size == 0:
            raise ListError("cannot remove: no node or empty list")
        if node is self._head:
            self._head = node.next
            if self._head is None:
                self._tail = None
            else:
                self._head.prev = None
        else:
            node.prev.next = node.next
            if node.next is None:
                self._tail = node.prev
            else:
                node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        return node.data

    def destroy(self) -> None:
        """Remove every item from the tail, passing each to the destroy callback."""
        self._drain(lambda: self.remove(self._tail))