"""Walk through the singly linked list operations and print each state."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Any, Callable, Iterable, Optional, Sequence

from .linkedlist import LinkedList, ListError

Step = Callable[[], Optional[str]]


def _address(node: Any) -> str:
    return "(nil)" if node is None else f"0x{id(node):x}"


def _nth(chain: Any, index: int) -> Any:
    return next(islice(chain.nodes(), index, None))


def _describe(title: str, label: str, nodes: Iterable[Any], value_format: str, end: str = "") -> str:
    """Render a title line followed by one line per node with its link."""
    lines = [title]
    lines.extend(
        f"{label}[{i:03d}]={format(node.data, value_format)}, "
        f"{_address(node)} -> {_address(node.next)}{end}"
        for i, node in enumerate(nodes)
    )
    return "\n".join(lines) + "\n"


def _step(message: str, action: Callable[[], Any]) -> Step:
    """Make a step that performs ``action`` and announces it with ``message``."""

    def run() -> str:
        action()
        return message

    return run


def _walk(steps: Iterable[Step], render: Callable[[], str]) -> None:
    """Run each step, print its message if any, then print the rendered state."""
    for step in steps:
        message = step()
        if message is not None:
            print(message)
        print(render(), end="")


def _report(checks: Iterable[tuple[str, bool]]) -> None:
    print()
    for name, result in checks:
        print(f"Testing {name}... value={int(result)} (1=OK)")


def format_list(lst: LinkedList) -> str:
    """Render the list size followed by one line per node."""
    return _describe(f"List size is {len(lst)}", "list.node", lst.nodes(), "03d", " ")


def _run(lst: LinkedList) -> None:
    def fill() -> None:
        for value in range(20, 10, -1):
            lst.insert_next(None, value)

    def remove_after_eighth() -> str:
        node = _nth(lst, 7)
        lst.remove_next(node)
        return f"\nRemoving a node after the one containing {node.data:03d}"

    _walk(
        [
            fill,
            remove_after_eighth,
            _step("\nInserting 187 at the tail of the list", lambda: lst.insert_next(lst.tail, 187)),
            _step("\nRemoving a node after the first node", lambda: lst.remove_next(lst.head)),
            _step("\nRemoving a node at the head of the list", lambda: lst.remove_next(None)),
            _step("\nInsert 975 at the head of the list", lambda: lst.insert_next(None, 975)),
            _step("\nIterating and removing the fourth node", lambda: lst.remove_next(_nth(lst, 2))),
            _step("\nInserting 607 after the first node", lambda: lst.insert_next(lst.head, 607)),
        ],
        lambda: format_list(lst),
    )

    _report(
        [
            ("list_is_head", lst.is_head(lst.head)),
            ("list_is_head", lst.is_head(lst.tail)),
            ("list_is_tail", lst.is_tail(lst.tail)),
            ("list_is_tail", lst.is_tail(lst.head)),
        ]
    )

    print("\nDestroying the list")
    lst.destroy()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the linked list walk-through; returns the exit status."""
    try:
        _run(LinkedList())
    except ListError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())