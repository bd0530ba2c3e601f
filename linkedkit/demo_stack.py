"""Walk through the stack operations with integers and print each state."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .demo_list import _describe, _walk
from .linkedlist import ListError
from .stack import Stack


def format_stack(stack: Stack) -> str:
    """Render the stack size followed by one line per item, top first."""
    return _describe(f"Stack size is {len(stack)}", "stack", stack.nodes(), "03d")


def _peek_message(stack: Stack) -> str:
    top = stack.peek()
    shown = "NULL" if top is None else f"{top:03d}"
    return f"\nPeeking at the top element [value]={shown}"


def _run(stack: Stack) -> None:
    def push_ten() -> str:
        for value in range(1, 11):
            stack.push(value)
        return "\nPushing 10 elements"

    def pop_three() -> str:
        for _ in range(3):
            stack.pop()
        return "\nPopping 3 elements"

    def push_pair() -> str:
        for value in (320, 765):
            stack.push(value)
        return "\nPushing 320 and 765"

    def pop_all() -> str:
        while stack:
            stack.pop()
        return "\nPopping all elements\n" + _peek_message(stack)

    _walk(
        [push_ten, pop_three, push_pair, lambda: _peek_message(stack), pop_all],
        lambda: format_stack(stack),
    )

    print("\nDestroying the stack")
    stack.destroy()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the stack walk-through; returns the exit status."""
    try:
        _run(Stack())
    except ListError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())