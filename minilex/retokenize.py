"""Split an existing token again on whitespace outside quotes."""

from __future__ import annotations

from typing import List, MutableSequence, Tuple

from .charclass import is_space
from .scanner import skip_spaces
from .tokens import Token, TokenType

_QUOTES = ("'", '"')


def _scan_piece(text: str, i: int) -> Tuple[str, int]:
    out: List[str] = []
    n = len(text)
    while i < n and not is_space(text[i]):
        ch = text[i]
        if ch in _QUOTES:
            i += 1
            while i < n and text[i] != ch:
                out.append(text[i])
                i += 1
            if i < n:
                i += 1
            continue
        out.append(ch)
        i += 1
    return "".join(out), i


def split_outside_quotes(text: str) -> List[str]:
    """Split ``text`` on whitespace that is not inside quotes, dropping the quotes.

    Pieces that come out empty are left out.
    """
    pieces: List[str] = []
    if not text:
        return pieces
    i = 0
    while True:
        i = skip_spaces(text, i)
        if i >= len(text):
            break
        piece, i = _scan_piece(text, i)
        if piece:
            pieces.append(piece)
    return pieces


def retokenize(
    tokens: MutableSequence[Token], index: int, token_type: TokenType, start: int
) -> int:
    """Re-split the token at ``index`` from position ``start`` of its text.

    The token takes the first piece and ``token_type``; the other pieces are
    inserted after it as new tokens of that type. Returns the number of
    pieces, or 0 when there were none and the token was left unchanged.
    """
    index = range(len(tokens))[index]
    token = tokens[index]
    if start < 0 or start > len(token.text):
        raise ValueError(f"start {start} is outside the token text")
    parts = split_outside_quotes(token.text[start:])
    if not parts:
        return 0
    kind = TokenType(token_type)
    token.text = parts[0]
    token.type = kind
    tokens[index + 1:index + 1] = [Token(part, kind) for part in parts[1:]]
    return len(parts)