import pytest

from minilex.strutil import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-42abc", -42),
        ("+17", 17),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("-0", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


def test_split_drops_empty_pieces():
    assert split(",,a,,b,c,,", ",") == ["a", "b", "c"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("word", " ") == ["word"]


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_strchr_and_strrchr():
    text = "hello world"
    assert strchr(text, "o") == text.index("o")
    assert strrchr(text, "o") == text.rindex("o")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, "\0") == len(text)


def test_striteri_replaces_and_keeps():
    result = striteri("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert result == "AbCd"
    seen = []
    striteri("xyz", lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_strmapi():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"
    assert strmapi("", lambda i, ch: ch) == ""
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, ch: ch * 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    assert strlcpy(src, 10) == (src, len(src))
    copied, total = strlcpy(src, 3)
    assert copied == src[:2]
    assert total == len(src)
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat():
    dst, src = "ab", "cdef"
    assert strlcat(dst, src, 20) == (dst + src, len(dst) + len(src))
    result, total = strlcat(dst, src, 4)
    assert result == dst + src[:1]
    assert total == len(dst) + len(src)
    assert strlcat(dst, src, 1) == (dst, len(src) + 1)


def test_strncmp():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("x", "y", 0) == 0


def test_strnstr():
    hay = "foo bar baz"
    assert strnstr(hay, "bar", len(hay)) == hay.index("bar")
    assert strnstr(hay, "bar", 6) is None
    assert strnstr(hay, "bar", 7) == hay.index("bar")
    assert strnstr(hay, "", 0) == 0
    assert strnstr(hay, "qux", len(hay)) is None


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"
    assert strtrim("abc", "") == "abc"
    assert strtrim("aaa", "a") == ""


def test_substr():
    text = "hello"
    assert substr(text, 1, 3) == text[1:4]
    assert substr(text, 2, 100) == text[2:]
    assert substr(text, 5, 2) == ""
    assert substr(text, 99, 2) == ""
    with pytest.raises(ValueError):
        substr(text, -1, 2)