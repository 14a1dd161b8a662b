"""The wire protocol: one bit per signal, most significant bit first.

A message travels as its decimal length, a NUL byte, its bytes and a
closing NUL byte.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Union

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"


class Bit(IntEnum):
    """A single transmitted bit; ONE travels as SIGUSR1, ZERO as SIGUSR2."""

    ZERO = 0
    ONE = 1


def parse_pid(text: str) -> int:
    """Parse a whole string as a signed 32-bit decimal integer.

    Leading whitespace and one sign are allowed; a sign must be followed by
    a digit, nothing may follow the digits, and the value must fit in a
    32-bit int. Anything else raises ValueError.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
        if not rest[:1].isdigit() or not rest[:1].isascii():
            raise ValueError(f"sign not followed by a digit in {text!r}")
    end = 0
    while end < len(rest) and "0" <= rest[end] <= "9":
        end += 1
    if end != len(rest):
        raise ValueError(f"unexpected characters in {text!r}")
    value = sign * int(rest) if rest else 0
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"{text!r} does not fit in a 32-bit int")
    return value


def byte_to_bits(value: int) -> List[Bit]:
    """Return the eight bits of a byte, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [Bit((value >> shift) & 1) for shift in range(7, -1, -1)]


def frame_message(message: Union[str, bytes]) -> bytes:
    """Return the bytes sent for a message: length, NUL, message, NUL.

    Text is encoded as UTF-8. An empty message or one holding a NUL byte
    raises ValueError.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if not data:
        raise ValueError("message must not be empty")
    if b"\0" in data:
        raise ValueError("message must not contain a NUL byte")
    return str(len(data)).encode("ascii") + b"\0" + data + b"\0"


class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: Union[Bit, int]) -> Optional[int]:
        """Add one bit; return the completed byte after every eighth bit."""
        self._value = ((self._value << 1) | Bit(bit)) & 0xFF
        self._count += 1
        if self._count < 8:
            return None
        value = self._value
        self.reset()
        return value

    def reset(self) -> None:
        """Discard any partially collected byte."""
        self._value = 0
        self._count = 0