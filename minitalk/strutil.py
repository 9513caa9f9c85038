"""String helpers: splitting, trimming, bounded searching and comparison."""

from __future__ import annotations


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int:
    """Index of the first ``needle`` lying wholly in the first ``limit`` characters.

    An empty needle is found at 0. Returns -1 when there is no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    return haystack[:limit].find(needle)


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; negative, zero or positive like strncmp.

    The result is the difference of the first differing code points, with the
    end of a string counting as 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0