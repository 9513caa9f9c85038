"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from minitalk.numparse import format_int

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return "0x" + format(operator.index(value) & _POINTER_MASK, "x")


def _convert(conversion: str, values: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX":
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        return _pointer(value)
    if conversion in "di":
        return format_int(_to_int32(operator.index(value)))
    number = operator.index(value) & _UINT_MASK
    if conversion == "u":
        return str(number)
    return format(number, conversion)


def format_message(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``.

    Unknown conversions are dropped without consuming an argument. A '%' at
    the very end raises ValueError; too few arguments raise TypeError.
    Integers wrap to 32 bits as the C types would.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format ends with a lone '%'")
        pieces.append(_convert(conversion, values))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered text to ``file`` (stdout by default); return its length."""
    text = format_message(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)