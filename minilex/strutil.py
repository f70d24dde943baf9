"""String helpers: numeric conversion, searching, splitting and bounded copies.

Positions are returned as indices into the string, or None where nothing is
found. The bounded copy helpers return the new string together with the
length they would have needed to copy everything.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .charclass import is_digit

_ATOI_SPACES = frozenset(" \t\n\v\f\r")


def _single_char(c: str, what: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")


def _non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. A string with no digits gives 0.
    """
    i = 0
    while i < len(text) and text[i] in _ATOI_SPACES:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < len(text) and is_digit(text[i]):
        result = result * 10 + (ord(text[i]) - ord("0"))
        i += 1
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal form of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an integer")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if text is None:
        raise TypeError("text must be a string")
    _single_char(sep, "separator")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; the terminator ``"\\0"`` maps to the end."""
    _single_char(c, "c")
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == "\0" else None


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; the terminator ``"\\0"`` maps to the end."""
    _single_char(c, "c")
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for each character of ``text``.

    ``func`` may return a replacement character or None to keep the original.
    The resulting string is returned.
    """
    chars = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        if replacement is not None:
            _single_char(replacement, "replacement")
            ch = replacement
        chars.append(ch)
    return "".join(chars)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    chars = []
    for index, ch in enumerate(text):
        mapped = func(index, ch)
        _single_char(mapped, "mapped value")
        chars.append(mapped)
    return "".join(chars)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("both arguments must be strings")
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``. A size of 0
    copies nothing.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a total of ``size`` slots.

    Returns the resulting text and the length the result would have had
    without truncation. When ``size`` does not exceed ``len(dst)`` nothing is
    appended and the length reported is ``len(src) + size``.
    """
    _non_negative(size, "size")
    d_len = len(dst)
    if size <= d_len:
        return dst, len(src) + size
    room = size - 1 - d_len
    return dst + src[:room], len(src) + d_len


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as code 0.

    Returns the difference of the first differing codes, or 0.
    """
    _non_negative(n, "n")
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb:
            return ca - cb
        if ca == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0. Returns None when there is no match.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strtrim(text: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    if text is None or chars is None:
        raise TypeError("both arguments must be strings")
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives the empty string.
    """
    if text is None:
        raise TypeError("text must be a string")
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]