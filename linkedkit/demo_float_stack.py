"""Push floating-point arguments onto a stack and print each state."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

from .linkedlist import ListError, ListNode
from .stack import Stack

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:infinity|inf|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


def _atof(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _address(node: Optional[ListNode]) -> str:
    return "(nil)" if node is None else f"0x{id(node):x}"


def format_float_stack(stack: Stack) -> str:
    """Render the stack size followed by one line per item, top first."""
    lines = [f"Stack size is {len(stack)}"]
    lines.extend(
        f"stack[{i:03d}]={node.data:f}, {_address(node)} -> {_address(node.next)}"
        for i, node in enumerate(stack.nodes())
    )
    return "\n".join(lines) + "\n"


def _print_stack(stack: Stack) -> None:
    sys.stdout.write(format_float_stack(stack))


def _print_peek(stack: Stack) -> None:
    top = stack.peek()
    shown = "NULL" if top is None else f"{top:.5f}"
    print(f"\nPeeking at the top element [value]={shown}")


def _run(stack: Stack, args: Sequence[str]) -> None:
    for arg in args:
        stack.push(_atof(arg))
    _print_stack(stack)

    print("\nPopping 2 elements")
    for _ in range(2):
        stack.pop()
    _print_stack(stack)

    print("\nPushing 9.75 and 3.141516")
    stack.push(9.75)
    stack.push(3.141516)
    _print_stack(stack)

    _print_peek(stack)
    _print_stack(stack)

    print("\nPopping all elements")
    while stack:
        stack.pop()
    _print_peek(stack)
    _print_stack(stack)

    print("\nDestroying the stack")
    stack.destroy()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Push each argument as a number and run the walk-through; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        _run(Stack(), args)
    except ListError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())