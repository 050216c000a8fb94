from __future__ import annotations
from typing import List, Optional

from .scanner import QUOTE, scan

MAX_ARGS = 100


class Token(str):
    """A word of a command line. `quoted` is set when any part of it was quoted."""

    quoted: bool

    def __new__(cls, value: str, quoted: bool = False) -> "Token":
        tok = super().__new__(cls, value)
        tok.quoted = quoted
        return tok


def tokenize(line: str, max_args: int = MAX_ARGS) -> List[Token]:
    tokens: List[Token] = []
    buf: Optional[List[str]] = None
    quoted = False
    for _, ch, in_quotes in scan(line):
        if ch == QUOTE:
            if buf is None:
                buf = []
            quoted = True
            continue
        if ch.isspace() and not in_quotes:
            if buf is not None:
                tokens.append(Token(''.join(buf), quoted))
                buf, quoted = None, False
            continue
        if buf is None:
            buf = []
        buf.append(ch)
    if buf is not None:
        tokens.append(Token(''.join(buf), quoted))
    # Over-long argument lists are truncated, not rejected
    return tokens[:max_args]
