"""Singly linked circular list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .linkedlist import ListError, _NodeChain


@dataclass(eq=False, repr=False)
class CListNode:
    """A node of a circular list."""

    data: Any
    next: Optional["CListNode"] = None


class CircularList(_NodeChain):
    """Circular singly linked list; an optional ``destroy`` callback receives items on teardown."""

    def __init__(self, destroy: Optional[Callable[[Any], None]] = None) -> None:
        super().__init__(destroy)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def nodes(self) -> Iterator[CListNode]:
        """Yield each node once, starting at the head."""
        return self._walk()

    @property
    def head(self) -> Optional[CListNode]:
        return self._head

    def insert_next(self, node: Optional[CListNode], data: Any) -> CListNode:
        """Insert ``data`` after ``node``; ``node`` may be None only when empty."""
        self._require_anchor(node)
        new_node = CListNode(data)
        if self._size == 0:
            new_node.next = new_node
            self._head = new_node
        else:
            new_node.next = node.next
            node.next = new_node
        self._size += 1
        return new_node

    def remove_next(self, node: Optional[CListNode]) -> Any:
        """Remove the node after ``node`` and return its data.

        When ``node`` is the only node, it is removed itself.
        """
        if self._size == 0 or node is None:
            raise ListError("cannot remove: no node or empty list")
        if node.next is node:
            old = node
            self._head = None
        else:
            old = node.next
            node.next = old.next
            if old is self._head:
                self._head = old.next
        old.next = None
        self._size -= 1
        return old.data

    def destroy(self) -> None:
        """Remove every item, passing each to the destroy callback."""
        self._drain(lambda: self.remove_next(self._head))