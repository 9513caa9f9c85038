"""Receive messages sent bit by bit as SIGUSR1 / SIGUSR2 and print them."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import TextIO

from minitalk.printf import print_formatted
from minitalk.protocol import MessageDecoder


class SignalReceiver:
    """Turns incoming user signals into bits and prints each finished message.

    SIGUSR1 carries a 1 bit and any other signal a 0 bit.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self.output = output
        self._decoder = MessageDecoder()

    def handle_signal(self, signum: int, frame: FrameType | None) -> None:
        """Signal handler: record one bit and print a message once it is complete."""
        message = self._decoder.feed(signum == signal.SIGUSR1)
        if message is None:
            return
        stream = sys.stdout if self.output is None else self.output
        # An empty message is printed as "(null)", as the %s conversion does.
        print_formatted("%s\n", message or None, file=stream)
        stream.flush()

    def install(self) -> None:
        """Make this receiver the handler for SIGUSR1 and SIGUSR2."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: print the process id, then wait for messages forever."""
    receiver = SignalReceiver()
    receiver.install()
    print_formatted("PID : %d\n", os.getpid())
    print_formatted("Waiting for signal ...\n")
    sys.stdout.flush()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())