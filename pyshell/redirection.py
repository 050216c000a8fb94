from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .errors import CommandSyntaxError, OpenError
from .globbing import expand_globs
from .tokenizer import MAX_ARGS

REDIRECT_IN = '<'
REDIRECT_OUT = '>'
REDIRECT_APPEND = '>>'
OPERATORS = (REDIRECT_IN, REDIRECT_OUT, REDIRECT_APPEND)

OUT_MODE = 0o644

logger = logging.getLogger(__name__)


def is_operator(token: str) -> bool:
    return token in OPERATORS and not getattr(token, 'quoted', False)


def has_redirection(tokens: Sequence[str]) -> bool:
    return any(is_operator(t) for t in tokens)


@dataclass
class Redirection:
    """Descriptors opened for one segment. Closed on leaving the `with` block."""
    in_fd: Optional[int] = None
    out_fd: Optional[int] = None
    append: bool = False

    def set_input(self, path: str) -> None:
        try:
            fd = os.open(path, os.O_RDONLY)
        except (OSError, ValueError) as e:
            raise OpenError(f"{path!r}: {e}") from e
        # A later '<' replaces an earlier one
        self._close_in()
        self.in_fd = fd

    def set_output(self, path: str, append: bool) -> None:
        flags = os.O_WRONLY | os.O_CREAT
        flags |= os.O_APPEND if append else os.O_TRUNC
        try:
            fd = os.open(path, flags, OUT_MODE)
        except (OSError, ValueError) as e:
            raise OpenError(f"{path!r}: {e}") from e
        self._close_out()
        self.out_fd = fd
        self.append = append

    def _close_in(self) -> None:
        if self.in_fd is not None:
            os.close(self.in_fd)
            self.in_fd = None

    def _close_out(self) -> None:
        if self.out_fd is not None:
            os.close(self.out_fd)
            self.out_fd = None

    def close(self) -> None:
        self._close_in()
        self._close_out()

    def __enter__(self) -> "Redirection":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def parse_redirections(tokens: Sequence[str], max_args: int = MAX_ARGS) -> Tuple[List[str], Redirection]:
    """Strip `<`, `>` and `>>` with their targets out of tokens.

    Opens the targets and returns the remaining, glob-expanded arguments
    with the Redirection owning the descriptors. On error every descriptor
    opened so far is closed before the exception propagates.
    """
    redir = Redirection()
    argv: List[str] = []
    i = 0
    try:
        while i < len(tokens):
            t = tokens[i]
            if not is_operator(t):
                argv.append(t)
                i += 1
                continue
            if i + 1 >= len(tokens):
                raise CommandSyntaxError(f"missing target after {t!r}")
            target = tokens[i + 1]
            if t == REDIRECT_IN:
                redir.set_input(target)
            else:
                redir.set_output(target, append=(t == REDIRECT_APPEND))
            logger.debug("redirect %s %s", t, target)
            i += 2
    except Exception:
        redir.close()
        raise
    return expand_globs(argv, max_args), redir
