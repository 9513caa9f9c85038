import pytest

from minitalk.protocol import MessageDecoder, encode_bits


def _decode_all(bits, decoder=None):
    decoder = decoder or MessageDecoder()
    return [m for m in (decoder.feed(b) for b in bits) if m is not None]


def test_empty_message_is_only_terminator():
    assert list(encode_bits("")) == [0] * 8


def test_length_is_eight_bits_per_byte_plus_terminator():
    assert len(list(encode_bits("abc"))) == 32


def test_terminator_is_last_byte():
    bits = list(encode_bits("hi"))
    assert bits[-8:] == [0] * 8
    assert any(bits[:-8])


def test_most_significant_bit_first():
    assert list(encode_bits("A"))[:8] == [0, 1, 0, 0, 0, 0, 0, 1]


@pytest.mark.parametrize("message", ["", "a", "Hello, world!", "héllo ✓"])
def test_round_trip(message):
    assert _decode_all(encode_bits(message)) == [message]


def test_bytes_input_round_trip():
    assert _decode_all(encode_bits(b"raw bytes")) == ["raw bytes"]


def test_feed_returns_none_until_terminator():
    decoder = MessageDecoder()
    bits = list(encode_bits("ok"))
    results = [decoder.feed(bit) for bit in bits]
    assert results[:-1] == [None] * (len(bits) - 1)
    assert results[-1] == "ok"


def test_consecutive_messages():
    bits = list(encode_bits("first")) + list(encode_bits("second"))
    assert _decode_all(bits) == ["first", "second"]


def test_boolean_bits_accepted():
    bits = [bool(b) for b in encode_bits("yes")]
    assert _decode_all(bits) == ["yes"]


def test_reset_discards_partial_state():
    decoder = MessageDecoder()
    for bit in list(encode_bits("junk"))[:13]:
        decoder.feed(bit)
    decoder.reset()
    assert _decode_all(encode_bits("clean"), decoder) == ["clean"]


def test_nul_in_message_rejected():
    with pytest.raises(ValueError):
        encode_bits("bad\0text")