# minitalk

A small message channel between two processes on the same machine that uses
only two signals: `SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit.
Each byte of the message is sent most significant bit first, and the message
ends with a zero byte. Text is sent as UTF-8.

## Install

```
pip install .
```

POSIX systems only, since it relies on `SIGUSR1` and `SIGUSR2`.

## Usage

Start the server in one terminal. It prints its process id and waits until
interrupted with Ctrl-C:

```
$ minitalk-server
PID : 12345
Waiting for signal ...
```

From another terminal, send it a message:

```
$ minitalk-client 12345 "hello there"
```

The server prints each message on its own line once the terminating zero
byte arrives. An empty message is printed as `(null)`.

The client takes exactly two arguments, the server's PID and the message.
With any other number it prints `Wrong nb of args` and exits with status 1.
If the PID is not a positive number, the message contains a NUL character,
or a signal cannot be delivered, it prints `PID error` and exits with
status 1. The PID is read leniently: leading whitespace and one sign are
accepted and parsing stops at the first non-digit.

## Library

- `minitalk.protocol.encode_bits(message)` yields the bits sent for a message
  (a `str` or `bytes`), ending with the eight zero bits of the terminator. It
  raises `ValueError` if the message holds a NUL byte.
- `minitalk.protocol.MessageDecoder` rebuilds messages from bits fed to it one
  at a time. `feed(bit)` returns the finished message when its terminator
  arrives and `None` otherwise; `reset()` drops any partial byte and message.
- `minitalk.client.send_message(pid, message, delay=0.0005)` signals a
  running server, sleeping `delay` seconds after each signal. It raises
  `ValueError` for a PID that is not positive and `OSError` if a signal
  cannot be delivered.
- `minitalk.server.SignalReceiver(output=None)` prints each received message
  to `output` (stdout by default). `install()` makes it the handler for
  `SIGUSR1` and `SIGUSR2`; `handle_signal(signum, frame)` is the handler.

### Helpers

- `minitalk.numparse`: `parse_int`, `parse_int_base` (bases 2 to 16),
  `parse_float` and `parse_hex_uint` parse numbers leniently in the manner of
  C's `atoi` family, with 32-bit wrap-around for the integer forms;
  `format_int` and `int_length` give the decimal text of an integer and its
  length.
- `minitalk.strutil`: `split` on a single character dropping empty pieces,
  `trim` by a set of characters, `substring`, `find_within` (search limited
  to a prefix, `-1` when absent) and `compare_n` (`strncmp`-style result).
- `minitalk.printf`: `format_message(fmt, *args)` renders the conversions
  `%c %s %p %d %i %u %x %X %%`, and `print_formatted(fmt, *args, file=None)`
  writes the result and returns its length.

## Limitations

The server sends nothing back: there is no acknowledgement, so the client
relies on its fixed pause between signals and a busy or slow server can lose
bits. Only one sender at a time is supported, and messages are not stored;
they are only printed.

## Tests

```
pip install .[test]
pytest
```