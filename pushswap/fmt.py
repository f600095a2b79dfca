"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_ARG_SPECS = frozenset("cspdiuxX")


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _render(spec: str, arg: Any) -> str:
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise TypeError("%c expects a single character or an int")
            return arg
        return chr(int(arg) & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        address = int(arg) & _UINT64_MASK
        return "(nil)" if address == 0 else "0x" + format(address, "x")
    if spec in ("d", "i"):
        return str(_to_int32(int(arg)))
    if spec == "u":
        return str(int(arg) & _UINT32_MASK)
    # 'x' or 'X'
    return format(int(arg) & _UINT32_MASK, spec)


def _convert(spec: str, arguments: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _ARG_SPECS:
        return ""
    try:
        arg = next(arguments)
    except StopIteration:
        raise TypeError(f"missing argument for %{spec}") from None
    return _render(spec, arg)


def format_string(fmt: str, *args: Any) -> str:
    """Return the text that the format and arguments produce.

    Unknown conversions produce nothing; a trailing lone '%' is dropped.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    pieces: list[str] = []
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def ft_printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = file if file is not None else sys.stdout
    stream.write(text)
    return len(text)