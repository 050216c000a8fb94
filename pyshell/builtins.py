from __future__ import annotations
import logging
import os
import sys
from typing import List, Optional

from .errors import InvalidCommand
from .history import History

BUILTINS = ('cd', 'history', 'exit')

logger = logging.getLogger(__name__)


def _write(text: str, out_fd: Optional[int]) -> None:
    if out_fd is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    os.write(out_fd, text.encode())


def run_builtin(argv: List[str], history: History, out_fd: Optional[int] = None) -> int:
    cmd = argv[0]
    if cmd == 'cd':
        if len(argv) < 2:
            raise InvalidCommand("cd: missing directory")
        try:
            os.chdir(argv[1])
        except (OSError, ValueError) as e:
            raise InvalidCommand(f"cd: {e}") from e
        logger.debug("cwd is now %s", os.getcwd())
        return 0
    if cmd == 'history':
        n = 0
        if len(argv) > 1:
            try:
                n = int(argv[1])
            except ValueError:
                n = 0
        lines = history.query(n)
        if lines:
            _write(''.join(f"{line}\n" for line in lines), out_fd)
        return 0
    if cmd == 'exit':
        history.clear()
        sys.exit(0)
    raise InvalidCommand(f"{cmd}: not a builtin")
