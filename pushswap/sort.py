"""Sorting strategies that drive a Machine until stack a is sorted."""

from __future__ import annotations

from .stack import Machine


def sort_3(machine: Machine) -> None:
    """Sort three elements ranked 0..2 on stack a."""
    first, second = machine.a.indices()[:2]
    if first == 0 and second != 1:
        machine.rra()
        machine.sa()
    elif first == 1:
        if second == 2:
            machine.rra()
        else:
            machine.sa()
    elif first == 2:
        machine.ra()
        if second == 1:
            machine.sa()


def _bring_smallest_up(machine: Machine, moves: dict[int, tuple[str, ...]]) -> None:
    for name in moves.get(machine.a.distance_to_smallest(), ()):
        getattr(machine, name)()


def _sort_by_parking_smallest(machine: Machine, moves: dict[int, tuple[str, ...]], inner) -> None:
    _bring_smallest_up(machine, moves)
    if machine.a.is_sorted():
        return
    machine.pb()
    machine.a.shift_indices(-1)
    inner(machine)
    machine.a.shift_indices(1)
    machine.pa()


_MOVES_4 = {1: ("sa",), 2: ("ra", "sa"), 3: ("rra",)}
_MOVES_5 = {1: ("sa",), 2: ("ra", "sa"), 3: ("rra", "rra"), 4: ("rra",)}


def sort_4(machine: Machine) -> None:
    """Sort four elements ranked 0..3 on stack a."""
    _sort_by_parking_smallest(machine, _MOVES_4, sort_3)


def sort_5(machine: Machine) -> None:
    """Sort five elements ranked 0..4 on stack a."""
    _sort_by_parking_smallest(machine, _MOVES_5, sort_4)


def small_sort(machine: Machine, size: int) -> None:
    """Sort a stack of two to five elements."""
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_3(machine)
    elif size == 4:
        sort_4(machine)
    elif size == 5:
        sort_5(machine)


def radix_sort(machine: Machine, size: int) -> None:
    """Binary radix sort on the ranks, one bit per pass."""
    bit = 0
    while not machine.a.is_sorted():
        for _ in range(size):
            top = next(iter(machine.a))
            if (top.index >> bit) & 1:
                machine.ra()
            else:
                machine.pb()
        while len(machine.b):
            machine.pa()
        bit += 1


def sort_all(machine: Machine) -> None:
    """Sort stack a with the strategy suited to its size."""
    size = len(machine.a)
    if size <= 5:
        small_sort(machine, size)
    else:
        radix_sort(machine, size)