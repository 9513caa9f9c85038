"""Send a text message to a listening server process, one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time

from minitalk.numparse import parse_int
from minitalk.protocol import encode_bits

DEFAULT_DELAY = 0.0005


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Signal ``message`` to process ``pid``: SIGUSR1 for a 1 bit, SIGUSR2 for a 0.

    The message is followed by a zero byte that tells the server it is
    complete. ``delay`` seconds pass after each signal. Raises ValueError for
    a pid that does not name a single process and OSError if a signal cannot
    be delivered.
    """
    if pid <= 0:
        raise ValueError(f"invalid process id {pid}")
    for bit in encode_bits(message):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stdout.write("Wrong nb of args\n")
        return 1
    pid_text, message = args
    try:
        send_message(parse_int(pid_text), message)
    except (OSError, ValueError):
        sys.stdout.write("PID error\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())