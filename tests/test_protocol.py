import pytest

from sigtalk.protocol import (
    INT_MAX,
    INT_MIN,
    Bit,
    BitDecoder,
    byte_to_bits,
    frame_message,
    parse_pid,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  +7", 7), ("-3", -3), ("\t12", 12), ("", 0)],
)
def test_parse_pid_accepts(text, expected):
    assert parse_pid(text) == expected


def test_parse_pid_limits():
    assert parse_pid(str(INT_MAX)) == INT_MAX
    assert parse_pid(str(INT_MIN)) == INT_MIN


@pytest.mark.parametrize(
    "text", ["+", "-", "-x", "12a", "1 ", "abc", str(INT_MAX + 1), str(INT_MIN - 1)]
)
def test_parse_pid_rejects(text):
    with pytest.raises(ValueError):
        parse_pid(text)


def test_byte_to_bits_msb_first():
    assert byte_to_bits(0x80) == [Bit.ONE] + [Bit.ZERO] * 7
    assert byte_to_bits(0x01) == [Bit.ZERO] * 7 + [Bit.ONE]


@pytest.mark.parametrize("value", [-1, 256])
def test_byte_to_bits_out_of_range(value):
    with pytest.raises(ValueError):
        byte_to_bits(value)


def test_decoder_round_trip_all_bytes():
    decoder = BitDecoder()
    decoded = []
    for value in range(256):
        results = [decoder.feed(bit) for bit in byte_to_bits(value)]
        assert results[:7] == [None] * 7
        decoded.append(results[7])
    assert decoded == list(range(256))


def test_decoder_reset_discards_partial_byte():
    decoder = BitDecoder()
    for bit in byte_to_bits(0xFF)[:5]:
        decoder.feed(bit)
    decoder.reset()
    results = [decoder.feed(bit) for bit in byte_to_bits(0x41)]
    assert results[-1] == 0x41


def test_decoder_rejects_bad_bit():
    with pytest.raises(ValueError):
        BitDecoder().feed(2)


def test_frame_message_layout():
    assert frame_message("hello") == b"5\x00hello\x00"


def test_frame_message_bytes_and_utf8_length():
    message = "hé"
    framed = frame_message(message)
    length, body, tail = framed.split(b"\0")
    assert int(length) == len(message.encode("utf-8"))
    assert body.decode("utf-8") == message
    assert tail == b""
    assert frame_message(message.encode("utf-8")) == framed


@pytest.mark.parametrize("message", ["", b"", "a\0b"])
def test_frame_message_rejects(message):
    with pytest.raises(ValueError):
        frame_message(message)


def test_frame_round_trip_through_decoder():
    framed = frame_message("signal")
    decoder = BitDecoder()
    out = bytearray()
    for byte in framed:
        for bit in byte_to_bits(byte):
            value = decoder.feed(bit)
            if value is not None:
                out.append(value)
    assert bytes(out) == framed