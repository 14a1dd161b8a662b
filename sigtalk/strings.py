"""String helpers: parsing and formatting integers, splitting, trimming and searching."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_count(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus when negative."""
    return str(int(n))


def split(text: str, sep: str) -> List[str]:
    """Split text on the separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character in charset from both ends of text."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end yields an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    start = min(start, len(text))
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the two strings joined end to end."""
    return first + second


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle within the first length characters of haystack.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    _check_count(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in text.

    Searching for the NUL character finds the terminator at len(text).
    """
    ch = _as_char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == "\0" else None


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in text.

    Searching for the NUL character finds the terminator at len(text).
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference between the first pair of differing character
    codes, with the end of a string counting as code 0, or 0 when equal.
    """
    _check_count(n, "n")
    for a, b in islice(zip_longest(first, second, fillvalue="\0"), n):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src, so truncation
    happened when that length is not less than size.
    """
    _check_count(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the result would have had
    without truncation, with dst counted as at most size characters.
    """
    _check_count(size, "size")
    room = max(0, size - 1 - len(dst)) if size > 0 else 0
    return dst + src[:room], min(len(dst), size) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of func(index, char) for every character of text."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every character in chars, in place, with func(index, char)."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)