from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List

from .scanner import scan


class Operator(Enum):
    SEMI = ';'
    AND = '&&'
    END = ''


@dataclass(frozen=True)
class Segment:
    text: str
    op: Operator = Operator.END


def split_segments(line: str) -> List[Segment]:
    """Split line on `;` and `&&` found outside double quotes.

    Each piece is trimmed and tagged with the operator that follows it. The
    last piece is tagged END. Empty pieces are kept; running them is a no-op.
    """
    line = line.strip()
    segments: List[Segment] = []
    start = 0
    skip = False
    for i, ch, quoted in scan(line):
        if skip:
            skip = False
            continue
        if quoted:
            continue
        if ch == ';':
            segments.append(Segment(line[start:i].strip(), Operator.SEMI))
            start = i + 1
        elif ch == '&' and line[i + 1:i + 2] == '&':
            segments.append(Segment(line[start:i].strip(), Operator.AND))
            start = i + 2
            skip = True
    segments.append(Segment(line[start:].strip(), Operator.END))
    return segments
