"""Walk through the doubly linked list operations and print each state."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .demo_list import _describe, _nth, _report, _step, _walk
from .dlist import DoublyLinkedList
from .linkedlist import ListError


def format_dlist(lst: DoublyLinkedList) -> str:
    """Render the list size followed by one line per node."""
    return _describe(f"List size is {len(lst)}", "dlist.node", lst.nodes(), "03d", " ")


def _run(lst: DoublyLinkedList) -> None:
    def fill() -> None:
        for value in range(20, 10, -1):
            lst.insert_next(lst.head, value)

    def remove_eighth() -> str:
        node = _nth(lst, 7)
        lst.remove(node)
        return f"\nRemoving the node containing {node.data:03d}"

    _walk(
        [
            fill,
            remove_eighth,
            _step("\nInserting 187 at the tail of the list", lambda: lst.insert_next(lst.tail, 187)),
            _step("\nRemoving the head.", lambda: lst.remove(lst.head)),
            _step("\nRemoving the tail node.", lambda: lst.remove(lst.tail)),
            _step("\nInsert 975 at the next to the head of the list", lambda: lst.insert_next(lst.head, 975)),
            _step("\nIterating and removing the third node", lambda: lst.remove(_nth(lst, 2))),
            _step("\nInserting 607 after the first node", lambda: lst.insert_next(lst.head, 607)),
        ],
        lambda: format_dlist(lst),
    )

    _report(
        [
            ("list_is_head", lst.head.is_head()),
            ("list_is_head", lst.tail.is_head()),
            ("list_is_tail", lst.tail.is_tail()),
            ("list_is_tail", lst.head.is_tail()),
        ]
    )

    print("\nDestroying the list")
    lst.destroy()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the doubly linked list walk-through; returns the exit status."""
    try:
        _run(DoublyLinkedList())
    except ListError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())