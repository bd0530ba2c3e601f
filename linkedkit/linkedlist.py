"""Singly linked list with head and tail references, and the shared list bases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


class ListError(Exception):
    """Raised when a list operation cannot be carried out."""


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: Optional["ListNode"] = None


class _NodeChain:
    """State and helpers shared by every list type."""

    def __init__(self, destroy: Optional[Callable[[Any], None]] = None) -> None:
        self._destroy = destroy
        self._size = 0
        self._head: Any = None

    def _walk(self) -> Iterator[Any]:
        """Yield each node once, starting at the head."""
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def _require_anchor(self, node: Any) -> None:
        if node is None and self._size != 0:
            raise ListError("a node is required when the list is not empty")

    def _drain(self, take: Callable[[], Any]) -> None:
        """Call ``take`` until the list is empty, handing each item to the callback."""
        while self._size > 0:
            data = take()
            if self._destroy is not None:
                self._destroy(data)


class _DoubleChain(_NodeChain):
    """Insertion shared by the doubly linked list types."""

    _node_type: Callable[[Any], Any]
    _circular = False

    def __init__(self, destroy: Optional[Callable[[Any], None]] = None) -> None:
        super().__init__(destroy)
        self._tail: Any = None

    def _splice(self, node: Any, data: Any, after: bool) -> Any:
        self._require_anchor(node)
        new_node = self._node_type(data)
        if self._size == 0:
            if self._circular:
                new_node.next = new_node.prev = new_node
            else:
                self._tail = new_node
            self._head = new_node
        else:
            before, following = (node, node.next) if after else (node.prev, node)
            new_node.prev, new_node.next = before, following
            if before is None:
                self._head = new_node
            else:
                before.next = new_node
            if following is None:
                self._tail = new_node
            else:
                following.prev = new_node
        self._size += 1
        return new_node


class LinkedList(_NodeChain):
    """Singly linked list; an optional ``destroy`` callback receives each item on teardown."""

    def __init__(self, destroy: Optional[Callable[[Any], None]] = None) -> None:
        super().__init__(destroy)
        self._tail: Optional[ListNode] = None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def nodes(self) -> Iterator[ListNode]:
        """Yield each node once, starting at the head."""
        return self._walk()

    @property
    def head(self) -> Optional[ListNode]:
        return self._head

    @property
    def tail(self) -> Optional[ListNode]:
        return self._tail

    def is_head(self, node: ListNode) -> bool:
        return node is self._head

    @staticmethod
    def is_tail(node: ListNode) -> bool:
        return node.next is None

    def insert_next(self, node: Optional[ListNode], data: Any) -> ListNode:
        """Insert ``data`` after ``node``, or at the head when ``node`` is None."""
        new_node = ListNode(data)
        if node is None:
            if self._size == 0:
                self._tail = new_node
            new_node.next = self._head
            self._head = new_node
        else:
            if node.next is None:
                self._tail = new_node
            new_node.next = node.next
            node.next = new_node
        self._size += 1
        return new_node

    def remove_next(self, node: Optional[ListNode] = None) -> Any:
        """Remove the node after ``node`` (the head when None) and return its data."""
        if self._size == 0:
            raise ListError("cannot remove from an empty list")
        if node is None:
            old = self._head
            self._head = old.next
            if self._size == 1:
                self._tail = None
        else:
            if node.next is None:
                raise ListError("no node follows the tail")
            old = node.next
            node.next = old.next
            if node.next is None:
                self._tail = node
        old.next = None
        self._size -= 1
        return old.data

    def destroy(self) -> None:
        """Remove every item from the head, passing each to the destroy callback."""
        self._drain(self.remove_next)