"""Strip the outer quotes of tokens that are still wrapped in them."""

from __future__ import annotations

from typing import Iterable

from .tokens import Token


def is_wrapped(text: str, quote: str) -> bool:
    """True when ``text`` opens with ``quote`` and its only other ``quote`` ends it."""
    if not text or text[0] != quote:
        return False
    close = text.find(quote, 1)
    return close != -1 and close == len(text) - 1


def remove_quotes(tokens: Iterable[Token]) -> None:
    """Remove the outer quotes of every token wrapped in the quote it was read with.

    Tokens are changed in place; others are left alone.
    """
    for token in tokens:
        if token is None or token.quoted_by is None:
            continue
        if is_wrapped(token.text, token.quoted_by):
            token.text = token.text[1:-1]