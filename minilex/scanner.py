"""Split a command line into words and shell operators.

Words may be built from unquoted text and quoted blocks. Quotes are removed
while scanning; inside double quotes ``\\"`` stands for a literal double
quote. A quote with no closing partner is kept as a literal character.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .charclass import is_space
from .tokens import Token, TokenType

_OPERATOR_CHARS = frozenset("|&<>")
_QUOTES = ("'", '"')


def is_reserved(c: str) -> bool:
    """True for the characters that start an operator: ``|``, ``&``, ``<`` and ``>``."""
    return c in _OPERATOR_CHARS


def skip_spaces(text: str, i: int) -> int:
    """Return the first index at or after ``i`` that does not hold whitespace."""
    while i < len(text) and is_space(text[i]):
        i += 1
    return i


def _operator_type(op: str) -> TokenType:
    if op == "|":
        return TokenType.PIPE
    if op in ("&&", "||"):
        return TokenType.LOGIC
    if op[0] in "<>":
        return TokenType.FILE_REDIR
    return TokenType.ARG


def read_operator(text: str, i: int) -> Optional[Tuple[str, TokenType, int]]:
    """Read the operator starting at ``i``.

    Returns the operator text, its kind and the index just past it, or None
    when no operator character stands at ``i``. A doubled character forms one
    operator. A lone ``&`` is read but has the kind ``TokenType.ARG``.
    """
    if text is None or i >= len(text) or not is_reserved(text[i]):
        return None
    op = text[i]
    end = i + 1
    if end < len(text) and text[end] == op:
        op += op
        end += 1
    return op, _operator_type(op), end


def _read_quoted(text: str, i: int, out: List[str]) -> int:
    """Read the quoted block opened at ``i`` into ``out``; return the next index."""
    quote = text[i]
    if text.find(quote, i + 1) < 0:
        out.append(quote)
        return i + 1
    i += 1
    n = len(text)
    while i < n and text[i] != quote:
        if quote == '"' and text[i] == "\\" and i + 1 < n and text[i + 1] == '"':
            out.append('"')
            i += 2
            continue
        out.append(text[i])
        i += 1
    if i < n and text[i] == quote:
        i += 1
    return i


def _read_word(text: str, i: int) -> Tuple[str, int]:
    """Read one word starting at ``i``; return its unquoted text and the next index."""
    out: List[str] = []
    n = len(text)
    while i < n:
        ch = text[i]
        if is_reserved(ch) or is_space(ch):
            break
        if ch in _QUOTES:
            i = _read_quoted(text, i, out)
            continue
        out.append(ch)
        i += 1
    return "".join(out), i


def tokenize(text: Optional[str]) -> List[Token]:
    """Split ``text`` into tokens.

    Raises ValueError on an operator that has no meaning, such as a lone ``&``.
    """
    tokens: List[Token] = []
    if not text:
        return tokens
    i = 0
    while True:
        i = skip_spaces(text, i)
        if i >= len(text):
            break
        operator = read_operator(text, i)
        if operator is not None:
            op, kind, end = operator
            if kind is TokenType.ARG:
                raise ValueError(f"unsupported operator {op!r} at position {i}")
            tokens.append(Token(op, kind))
            i = end
            continue
        word, end = _read_word(text, i)
        quoted_by = None
        if word and text[i] in _QUOTES and end - i >= 2 and text[end - 1] == text[i]:
            quoted_by = text[i]
        tokens.append(Token(word, TokenType.ARG, quoted_by))
        i = end
    return tokens