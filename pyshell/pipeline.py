from __future__ import annotations
import logging
import subprocess
from typing import List, Optional, Tuple

from .errors import CommandSyntaxError, ExecError, report
from .executor import spawn, wait_status
from .scanner import find_unquoted

logger = logging.getLogger(__name__)


def split_pipe(text: str) -> Tuple[str, Optional[str]]:
    pipes = find_unquoted(text, '|')
    if not pipes:
        return text, None
    if len(pipes) > 1:
        raise CommandSyntaxError("only one pipe is supported")
    left, right = text[:pipes[0]].strip(), text[pipes[0] + 1:].strip()
    if not left or not right:
        raise CommandSyntaxError("pipe with an empty side")
    return left, right


def run_pipeline(left: List[str], right: List[str]) -> int:
    """Run `left | right` and return the right-hand status.

    Both children are started before either is awaited. A side that cannot
    be executed is reported; the other side still runs.
    """
    lproc = None
    try:
        lproc = spawn(left, stdout=subprocess.PIPE)
        upstream = lproc.stdout
    except ExecError as e:
        report(e)
        upstream = subprocess.DEVNULL

    rproc = None
    try:
        rproc = spawn(right, stdin=upstream)
    except ExecError as e:
        report(e)
    finally:
        # Drop the parent's copy so the reader sees EOF once the writer exits
        if lproc is not None:
            lproc.stdout.close()
            logger.debug("pipeline left status %s", wait_status(lproc))

    if rproc is None:
        return ExecError.status
    return wait_status(rproc)
