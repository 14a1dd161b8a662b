"""A small printf: the c, s, p, d, i, u, x, X and % conversions.

A percent sign followed by any other character prints a single percent
sign, and that character is dropped from the output.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Iterator, List, Optional, TextIO

_HEX_DIGITS = "0123456789abcdef"
_UINT_BITS = 32
_POINTER_BITS = 64


class Conversion(Enum):
    """The conversion a character after a percent sign selects."""

    ERR = "err"
    CHAR = "c"
    STR = "s"
    PTR = "p"
    DEC = "d"
    INT = "i"
    UINT = "u"
    L_HEX = "x"
    U_HEX = "X"
    PERC = "%"

    @classmethod
    def from_spec(cls, spec: Optional[str]) -> "Conversion":
        """Return the conversion for a specifier character, or ERR."""
        if spec is None or spec == cls.ERR.value:
            return cls.ERR
        try:
            return cls(spec)
        except ValueError:
            return cls.ERR


def _wrap_unsigned(value: int, bits: int) -> int:
    return int(value) & ((1 << bits) - 1)


def _wrap_signed(value: int, bits: int) -> int:
    value = _wrap_unsigned(value, bits)
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


def _hex(value: int) -> str:
    digits: List[str] = []
    while True:
        value, rest = divmod(value, 16)
        digits.append(_HEX_DIGITS[rest])
        if value == 0:
            break
    return "".join(reversed(digits))


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _pointer(arg: Any) -> str:
    if arg is None:
        return "(nil)"
    address = _wrap_unsigned(arg, _POINTER_BITS)
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address)


def _convert(conversion: Conversion, arg: Any) -> str:
    if conversion is Conversion.CHAR:
        return _char(arg)
    if conversion is Conversion.STR:
        return _string(arg)
    if conversion is Conversion.PTR:
        return _pointer(arg)
    if conversion in (Conversion.DEC, Conversion.INT):
        return str(_wrap_signed(arg, _UINT_BITS))
    if conversion is Conversion.UINT:
        return str(_wrap_unsigned(arg, _UINT_BITS))
    if conversion is Conversion.L_HEX:
        return _hex(_wrap_unsigned(arg, _UINT_BITS))
    if conversion is Conversion.U_HEX:
        return _hex(_wrap_unsigned(arg, _UINT_BITS)).upper()
    raise ValueError(f"conversion {conversion.name} takes no argument")


def _render(fmt: str, args: tuple) -> Iterator[str]:
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = Conversion.from_spec(next(chars, None))
        if conversion in (Conversion.ERR, Conversion.PERC):
            yield "%"
            continue
        try:
            arg = next(arguments)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format string {fmt!r}"
            ) from None
        yield _convert(conversion, arg)


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)