"""Command line entry point: read numbers, print the operations that sort them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import ParseError, parse_args, validate_args
from pushswap.printf import printf
from pushswap.stack import Machine
from pushswap.turk import sort_three, turk


def format_stack(label: str, values: Iterable[int]) -> str:
    """One line listing a stack from top to bottom, or an empty string for no values."""
    items = list(values)
    if not items:
        return ""
    return f"{label}: " + "".join(f"{value} " for value in items)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on the given arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        validate_args(args)
        values = parse_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1

    machine = Machine(values, on_operation=lambda name: printf(name + "\n"))
    ordered = machine.a.is_cyclically_ordered()
    print(f"is a sorted: {int(machine.a.is_ascending())}")
    print(f"is a ordered: {int(ordered)}")
    print(format_stack("A", machine.a))

    if len(machine.a) == 3 and not ordered:
        sort_three(machine)
    else:
        turk(machine)
    return 0


if __name__ == "__main__":
    sys.exit(main())