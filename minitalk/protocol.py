"""Bit-level framing of text messages: eight bits per byte, MSB first, NUL ends."""

from __future__ import annotations

from collections.abc import Iterator

BITS_PER_BYTE = 8


def _bits_of(data: bytes) -> Iterator[int]:
    for byte in data:
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


def encode_bits(message: str | bytes) -> Iterator[int]:
    """Bits of ``message`` followed by a terminating zero byte.

    Text is encoded as UTF-8. Raises ValueError if the message holds a NUL.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if 0 in data:
        raise ValueError("message must not contain a NUL byte")
    return _bits_of(data + b"\0")


class MessageDecoder:
    """Rebuilds messages from a stream of bits."""

    def __init__(self) -> None:
        self._byte = 0
        self._count = 0
        self._buffer = bytearray()

    def feed(self, bit: int | bool) -> str | None:
        """Take one bit; return the finished message when its NUL arrives."""
        if bit:
            self._byte |= 1 << (BITS_PER_BYTE - 1 - self._count)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte, self._byte, self._count = self._byte, 0, 0
        if byte:
            self._buffer.append(byte)
            return None
        message = self._buffer.decode("utf-8", errors="replace")
        self._buffer.clear()
        return message

    def reset(self) -> None:
        """Drop any partial byte and partial message."""
        self._byte = 0
        self._count = 0
        self._buffer.clear()