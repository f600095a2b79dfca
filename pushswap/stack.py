"""Stacks of ranked integers and the machine that drives push_swap operations."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Iterator, TextIO

from .fmt import format_string


@dataclass
class Element:
    """A value on a stack together with its rank among all values (-1 if unset)."""

    value: int
    index: int = -1


class Stack:
    """A stack whose top is the first element."""

    def __init__(self, elements: Iterable[Element | int] = ()) -> None:
        self._items: deque[Element] = deque(
            e if isinstance(e, Element) else Element(e) for e in elements
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def values(self) -> list[int]:
        """Values from top to bottom."""
        return [e.value for e in self._items]

    def indices(self) -> list[int]:
        """Ranks from top to bottom."""
        return [e.index for e in self._items]

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        self._items.rotate(1)

    def push_from(self, other: Stack) -> None:
        """Take the top element of ``other`` and put it on top of this stack."""
        if other._items:
            self._items.appendleft(other._items.popleft())

    def is_sorted(self) -> bool:
        """True if values never decrease from top to bottom."""
        return all(a.value <= b.value for a, b in pairwise(self._items))

    def distance_to_smallest(self) -> int:
        """Position of the element ranked 0, or the stack length if absent."""
        for position, element in enumerate(self._items):
            if element.index == 0:
                return position
        return len(self._items)

    def shift_indices(self, delta: int) -> None:
        """Add ``delta`` to the rank of every element."""
        for element in self._items:
            element.index += delta

    def describe(self) -> str:
        """A human-readable dump of the stack contents."""
        if not self._items:
            return "liste NULLE\n\n"
        lines = [
            format_string("content: %i ", e.value) + format_string("index: %i\n", e.index)
            for e in self._items
        ]
        return "".join(lines) + "next: NULL\n" + "\n"


class Machine:
    """Two stacks and the named operations on them, each announced on ``out``."""

    def __init__(
        self,
        a: Stack | None = None,
        b: Stack | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.a = a if a is not None else Stack()
        self.b = b if b is not None else Stack()
        self.out = out
        self.operations: list[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        stream = self.out if self.out is not None else sys.stdout
        stream.write(name + "\n")

    def sa(self) -> None:
        self.a.swap()
        self._emit("sa")

    def sb(self) -> None:
        self.b.swap()
        self._emit("sb")

    def ss(self) -> None:
        self.sa()
        self.sb()
        self._emit("ss")

    def pa(self) -> None:
        self.a.push_from(self.b)
        self._emit("pa")

    def pb(self) -> None:
        self.b.push_from(self.a)
        self._emit("pb")

    def ra(self) -> None:
        self.a.rotate()
        self._emit("ra")

    def rb(self) -> None:
        self.b.rotate()
        self._emit("rb")

    def rr(self) -> None:
        self.ra()
        self.rb()
        self._emit("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._emit("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._emit("rrb")

    def rrr(self) -> None:
        self.rra()
        self.rrb()
        self._emit("rrr")