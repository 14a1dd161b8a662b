"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(data: Readable, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {n} requested")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first n bytes of buffer to value (truncated to a byte)."""
    _check_length(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Optional[Buffer], n: int) -> None:
    """Zero the first n bytes of buffer; a missing buffer is ignored."""
    if buffer is None:
        return
    memset(buffer, 0, n)


def memcpy(dest: Optional[Buffer], src: Readable, n: int) -> Optional[Buffer]:
    """Copy n bytes from src to the start of dest and return dest."""
    if dest is None:
        return None
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy n bytes from src to dest, correct even when the two overlap."""
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data: Readable, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value in the first n bytes."""
    _check_length(data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Readable, second: Readable, n: int) -> int:
    """Compare n bytes; return the difference of the first differing pair, or 0."""
    _check_length(first, n, "first")
    _check_length(second, n, "second")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    A zero count or size yields a one-byte buffer. A total that does not fit
    in a machine size raises MemoryError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    total = count * size
    if total > SIZE_MAX:
        raise MemoryError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(total)