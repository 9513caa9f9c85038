"""Lenient number parsing and formatting in the style of C's atoi family."""

from __future__ import annotations

_INT_BITS = 32
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789abcdef"


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the range of a signed 32-bit int, wrapping around."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _split_sign(text: str) -> tuple[int, str]:
    """Consume one optional leading sign; return the sign and the rest."""
    if text[:1] in ("-", "+"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def _leading_digits(text: str, base: int) -> list[int]:
    """Digit values of the longest prefix of ``text`` valid in ``base``."""
    allowed = _DIGITS[:base]
    values = []
    for char in text:
        position = allowed.find(char.lower())
        if position < 0:
            break
        values.append(position)
    return values


def parse_int(text: str) -> int:
    """Parse a decimal integer the way atoi does.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. An input with no digits yields 0. The result wraps
    to a signed 32-bit value.
    """
    return parse_int_base(text, 10)


def parse_int_base(text: str, base: int) -> int:
    """Parse an integer in ``base`` (2 to 16), stopping at the first invalid digit.

    Letters are accepted in either case. Raises ValueError for a base outside
    2 to 16.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, not {base}")
    rest = text.lstrip("".join(_WHITESPACE))
    sign, rest = _split_sign(rest)
    result = 0
    for digit in _leading_digits(rest, base):
        result = result * base + digit
    return _wrap_int32(result * sign)


def parse_float(text: str) -> float:
    """Parse ``[sign]digits[.digits]`` into a float; trailing text is ignored.

    No leading whitespace is skipped. An input with no digits yields 0.0.
    """
    sign, rest = _split_sign(text)
    result = 0.0
    integer_digits = _leading_digits(rest, 10)
    for digit in integer_digits:
        result = result * 10.0 + digit
    rest = rest[len(integer_digits):]
    if rest.startswith("."):
        fraction = 0.0
        fraction_digits = _leading_digits(rest[1:], 10)
        for digit in fraction_digits:
            fraction = fraction * 10.0 + digit
        for _ in fraction_digits:
            fraction /= 10.0
        result += fraction
    return result * sign


def parse_hex_uint(text: str) -> int:
    """Parse a string made only of hex digits into an unsigned 32-bit value.

    The empty string gives 0. Raises ValueError if any character is not a
    hex digit. Values wider than 32 bits wrap around.
    """
    result = 0
    for char in text:
        position = _DIGITS.find(char.lower())
        if position < 0 or not char.isascii():
            raise ValueError(f"invalid hex digit {char!r} in {text!r}")
        result = (result * 16 + position) & ((1 << _INT_BITS) - 1)
    return result


def int_length(n: int) -> int:
    """Number of characters in the decimal form of ``n``, sign included."""
    return len(format_int(n))


def format_int(n: int) -> str:
    """Decimal text of ``n`` with a leading '-' when negative."""
    return str(n)