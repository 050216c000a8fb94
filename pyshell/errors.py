"""Error taxonomy for a single segment.

Every error raised while a segment is parsed or launched is a ShellError.
The interpreter never shows the cause to the user: it logs it and prints
the one message the user ever sees.
"""

from __future__ import annotations
import logging
import sys

MESSAGE = "Invalid Command"

logger = logging.getLogger(__name__)


class ShellError(Exception):
    status = 1


class CommandSyntaxError(ShellError):
    """Structurally malformed segment, e.g. a redirection with no target."""


class OpenError(ShellError):
    """A redirection target could not be opened."""


class SpawnError(ShellError):
    """Process creation failed."""


class ExecError(ShellError):
    """The program could not be found or executed."""
    status = 127


class InvalidCombination(ShellError):
    """Redirection and a pipe in the same segment."""


class InvalidCommand(ShellError):
    """A built-in was used incorrectly."""


def report(err: ShellError) -> int:
    logger.debug("%s: %s", type(err).__name__, err)
    sys.stdout.flush()
    print(MESSAGE, file=sys.stderr)
    return err.status
