from __future__ import annotations
import errno
import logging
import subprocess
import sys
from typing import IO, List, Optional, Union

from .builtins import BUILTINS, run_builtin
from .errors import ExecError, SpawnError
from .history import History
from .redirection import Redirection

# errno values that mean the process could not be created at all
SPAWN_ERRNOS = (errno.EAGAIN, errno.ENOMEM)

Stream = Union[int, IO[bytes], None]

logger = logging.getLogger(__name__)


def spawn(argv: List[str], stdin: Stream = None, stdout: Stream = None) -> subprocess.Popen:
    """Start argv with the given stdin/stdout bindings, searching PATH."""
    # Keep our own buffered output ahead of the child's
    sys.stdout.flush()
    try:
        proc = subprocess.Popen(argv, stdin=stdin, stdout=stdout, shell=False)
    except OSError as e:
        if e.errno in SPAWN_ERRNOS:
            raise SpawnError(f"{argv[0]}: {e.strerror}") from e
        raise ExecError(f"{argv[0]}: {e.strerror or e}") from e
    except ValueError as e:
        # Embedded NUL bytes cannot be passed to exec
        raise ExecError(f"{argv[0]!r}: {e}") from e
    logger.debug("[spawn] pid=%s argv=%s", proc.pid, argv)
    return proc


def wait_status(proc: subprocess.Popen) -> int:
    code = proc.wait()
    logger.debug("[wait] pid=%s returncode=%s", proc.pid, code)
    # Negative return codes are deaths by signal
    if code < 0:
        return 1
    return code


def run_command(argv: List[str], redir: Optional[Redirection], history: History) -> int:
    if not argv:
        return 0
    redir = redir or Redirection()
    if redir.out_fd is not None:
        logger.debug("[redirect] out_fd=%s mode=%s", redir.out_fd, "append" if redir.append else "truncate")
    if argv[0] in BUILTINS:
        return run_builtin(argv, history, redir.out_fd)
    proc = spawn(argv, stdin=redir.in_fd, stdout=redir.out_fd)
    return wait_status(proc)
