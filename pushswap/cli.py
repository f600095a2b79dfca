"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .parsing import ParseError, build_stack, split_words
from .sort import sort_all
from .stack import Machine, Stack

EXIT_OK = 0
EXIT_ERROR = 255


def load_stack(args: Sequence[str]) -> Stack:
    """Build stack a from the arguments; a single argument is split on spaces."""
    if len(args) == 1:
        if not args[0]:
            raise ParseError("empty argument")
        return build_stack(split_words(args[0], " "))
    return build_stack(args)


def run(args: Sequence[str], out: TextIO | None = None) -> int:
    """Sort the numbers in ``args``, writing operations to ``out``; return the exit status."""
    stream = out if out is not None else sys.stdout
    if not args:
        return EXIT_OK
    if len(args) == 1 and not args[0]:
        stream.write("Error\n")
        return EXIT_ERROR
    try:
        stack = load_stack(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return EXIT_ERROR
    if stack.is_sorted():
        return EXIT_OK
    sort_all(Machine(stack, Stack(), stream))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    return run(args, sys.stdout)