# Line sources: each yields one finished line per iteration and stops at
# end of input.

from __future__ import annotations
import glob as pyglob
from typing import Callable, Iterator, List, Optional, TextIO

try:
    import readline
except ImportError:  # Windows ships without readline
    readline = None


def complete_path(text: str, state: int) -> Optional[str]:
    matches: List[str] = sorted(pyglob.glob(text + '*'))
    if state < len(matches):
        return matches[state]
    return None


def install_completion() -> None:
    if readline is None:
        return
    readline.set_completer_delims(' \t\n;&|<>"')
    readline.set_completer(complete_path)
    readline.parse_and_bind('tab: complete')


def interactive_lines(prompt: Callable[[], str]) -> Iterator[str]:
    install_completion()
    while True:
        try:
            line = input(prompt())
        except (EOFError, KeyboardInterrupt):
            print()
            break
        yield line


def stream_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.rstrip('\n')
