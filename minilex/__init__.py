"""Shell-style tokenizer with quote handling, operator recognition and small helpers."""

__version__ = "0.1.0"
__all__ = [
    "charclass",
    "cli",
    "linkedlist",
    "memutil",
    "output",
    "retokenize",
    "scanner",
    "strutil",
    "tokens",
    "unquote",
]