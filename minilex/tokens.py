"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

_QUOTES = ("'", '"')


class TokenType(IntEnum):
    """Kind of a lexed token."""

    FILE_REDIR = 0
    PIPE = 1
    LOGIC = 2
    ARG = 3


@dataclass
class Token:
    """A piece of input text, its kind and the quote that wrapped it, if any."""

    text: str
    type: TokenType = TokenType.ARG
    quoted_by: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"token text must be a string, got {type(self.text).__name__}")
        self.type = TokenType(self.type)
        if self.quoted_by is not None and self.quoted_by not in _QUOTES:
            raise ValueError(f"quoted_by must be a quote character, got {self.quoted_by!r}")