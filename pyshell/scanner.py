# Quote-aware scanning shared by the tokenizer, the separator splitter and
# the pipe splitter, so that all three agree on what is inside quotes.

from __future__ import annotations
from typing import Iterator, List, Tuple

QUOTE = '"'


def scan(line: str) -> Iterator[Tuple[int, str, bool]]:
    """Yield (index, char, quoted) for every character of line.

    A quote character is reported with the state in effect before it
    toggles, so consumers can tell opening and closing quotes apart.
    """
    quoted = False
    for i, ch in enumerate(line):
        yield i, ch, quoted
        if ch == QUOTE:
            quoted = not quoted


def find_unquoted(line: str, char: str) -> List[int]:
    return [i for i, ch, quoted in scan(line) if ch == char and not quoted]
