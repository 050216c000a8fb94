from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import Config
from .linesource import interactive_lines, stream_lines
from .log import setup_logging
from .shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyshell", description="Interactive command interpreter")
    parser.add_argument("-c", "--command", help="Run one command line and exit")
    parser.add_argument("--prompt", help="Prompt template; {cwd} is replaced by the working directory")
    parser.add_argument("--history-size", type=int, help="Number of lines kept in history")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = Config()
    if args.prompt is not None:
        config.prompt = args.prompt
    if args.history_size is not None and args.history_size > 0:
        config.history_size = args.history_size
    if args.log_level is not None:
        config.log_level = args.log_level.upper()
    setup_logging(config.log_level)

    shell = Shell(config)
    if args.command is not None:
        shell.run_line(args.command)
        return 0
    if sys.stdin.isatty():
        return shell.loop(interactive_lines(config.render_prompt))
    return shell.loop(stream_lines(sys.stdin))
