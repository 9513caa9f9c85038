import io
import os
import signal
from unittest import mock

import pytest

from minitalk.client import send_message
from minitalk.protocol import encode_bits
from minitalk.server import SignalReceiver, main

U1 = signal.SIGUSR1
U2 = signal.SIGUSR2


@pytest.fixture
def restore_handlers():
    saved = {sig: signal.getsignal(sig) for sig in (U1, U2)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


def _deliver(receiver, message):
    for bit in encode_bits(message):
        receiver.handle_signal(U1 if bit else U2, None)


def test_decodes_single_message():
    out = io.StringIO()
    receiver = SignalReceiver(output=out)
    _deliver(receiver, "hello")
    assert out.getvalue() == "hello\n"


def test_partial_message_prints_nothing():
    out = io.StringIO()
    receiver = SignalReceiver(output=out)
    bits = list(encode_bits("abc"))
    for bit in bits[:-8]:
        receiver.handle_signal(U1 if bit else U2, None)
    assert out.getvalue() == ""
    for bit in bits[-8:]:
        receiver.handle_signal(U1 if bit else U2, None)
    assert out.getvalue() == "abc\n"


def test_consecutive_messages_each_on_own_line():
    out = io.StringIO()
    receiver = SignalReceiver(output=out)
    _deliver(receiver, "first")
    _deliver(receiver, "second")
    assert out.getvalue().splitlines() == ["first", "second"]


def test_empty_message_prints_null_marker():
    out = io.StringIO()
    receiver = SignalReceiver(output=out)
    for _ in range(8):
        receiver.handle_signal(U2, None)
    assert out.getvalue() == "(null)\n"


def test_unicode_round_trip():
    out = io.StringIO()
    receiver = SignalReceiver(output=out)
    _deliver(receiver, "ça va ✓")
    assert out.getvalue() == "ça va ✓\n"


def test_install_sets_handlers(restore_handlers):
    receiver = SignalReceiver(output=io.StringIO())
    receiver.install()
    assert signal.getsignal(U1) == receiver.handle_signal
    assert signal.getsignal(U2) == receiver.handle_signal


def test_end_to_end_with_real_signals(restore_handlers):
    out = io.StringIO()
    receiver = SignalReceiver(output=out)
    receiver.install()
    send_message(os.getpid(), "hi", delay=0.001)
    assert out.getvalue() == "hi\n"


def test_main_prints_pid_and_stops_on_interrupt(restore_handlers, capsys):
    with mock.patch("signal.pause", side_effect=KeyboardInterrupt):
        assert main([]) == 0
    text = capsys.readouterr().out
    assert f"PID : {os.getpid()}\n" in text
    assert "Waiting for signal ...\n" in text
    assert callable(signal.getsignal(U1))
    assert signal.getsignal(U1) == signal.getsignal(U2)