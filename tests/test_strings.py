import pytest

from sigtalk.strings import (
    atoi,
    itoa,
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42abc", -42),
        ("\t\n+17", 17),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_without_separator_yields_whole():
    assert split("abc", ",") == ["abc"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("hello", "") == "hello"
    assert strtrim("xxxx", "x") == ""


def test_substr_basic_and_clamped():
    text = "Hello, world"
    assert substr(text, 7, 5) == "world"
    assert substr(text, 7, 100) == "world"
    assert substr(text, 100, 3) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "bar") == "bar"


def test_strnstr():
    hay = "Foo Bar Baz"
    assert strnstr(hay, "Bar", len(hay)) == 4
    assert strnstr(hay, "Bar", 6) is None
    assert strnstr(hay, "", 0) == 0
    assert strnstr(hay, "Qux", len(hay)) is None


def test_strchr_and_strrchr():
    text = "banana"
    assert strchr(text, "a") == text.index("a")
    assert strrchr(text, "a") == text.rindex("a")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", 0) == len("abc")


def test_strchr_accepts_code_truncated_to_byte():
    assert strchr("xyz", ord("y") + 256) == 1


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("x", "y", 0) == 0


def test_strlcpy():
    assert strlcpy("hello", 3) == ("he", len("hello"))
    assert strlcpy("hello", 0) == ("", len("hello"))
    assert strlcpy("hi", 10) == ("hi", len("hi"))


def test_strlcat():
    assert strlcat("foo", "bar", 10) == ("foobar", len("foobar"))
    assert strlcat("foo", "bar", 5) == ("foob", len("foobar"))
    assert strlcat("foo", "bar", 2) == ("foo", 2 + len("bar"))


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch) == "AbC"


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i >= 2 else ch)
    assert "".join(chars) == "abCD"