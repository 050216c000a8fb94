from __future__ import annotations
from collections import deque
from typing import Deque, List

HISTORY_MAX = 2048


class History:
    """Bounded, append-only record of submitted lines. The oldest entry is evicted first."""

    def __init__(self, maxlen: int = HISTORY_MAX):
        self._lines: Deque[str] = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._lines.maxlen

    def append(self, line: str) -> None:
        if not line:
            return
        self._lines.append(line)

    def query(self, n: int = 0) -> List[str]:
        # Out of range means everything
        if n <= 0 or n > len(self._lines):
            return list(self._lines)
        return list(self._lines)[-n:]

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
