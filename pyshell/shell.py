from __future__ import annotations
import logging
from typing import Iterable, Optional

from .config import Config, get_config
from .errors import CommandSyntaxError, InvalidCombination, ShellError, report
from .executor import run_command
from .globbing import expand_globs
from .history import History
from .pipeline import run_pipeline, split_pipe
from .redirection import has_redirection, parse_redirections
from .separators import split_segments
from .sequencer import run_segments
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class Shell:
    """The command interpreter: owns the history and runs submitted lines."""

    def __init__(self, config: Optional[Config] = None, history: Optional[History] = None):
        self.config = config or get_config()
        self.history = history if history is not None else History(self.config.history_size)

    def run_line(self, line: str) -> int:
        line = line.strip()
        if not line:
            return 0
        self.history.append(line)
        return run_segments(split_segments(line), self.run_segment)

    def run_segment(self, text: str) -> int:
        try:
            return self._run_segment(text)
        except ShellError as e:
            return report(e)

    def _run_segment(self, text: str) -> int:
        max_args = self.config.max_args
        left, right = split_pipe(text)
        if right is None:
            argv, redir = parse_redirections(tokenize(text, max_args), max_args)
            with redir:
                return run_command(argv, redir, self.history)

        ltokens, rtokens = tokenize(left, max_args), tokenize(right, max_args)
        # Checked before anything is opened or spawned
        if has_redirection(ltokens) or has_redirection(rtokens):
            raise InvalidCombination("redirection cannot be combined with a pipe")
        largv, rargv = expand_globs(ltokens, max_args), expand_globs(rtokens, max_args)
        if not largv or not rargv:
            raise CommandSyntaxError("pipe with an empty side")
        return run_pipeline(largv, rargv)

    def loop(self, lines: Iterable[str]) -> int:
        for line in lines:
            status = self.run_line(line)
            logger.debug("line status %s", status)
        return 0
