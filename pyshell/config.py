"""
Configuration for pyshell

Settings are read from environment variables; command line options
override them.
"""

import os
from typing import Optional

from .history import HISTORY_MAX
from .tokenizer import MAX_ARGS

DEFAULT_PROMPT = "{cwd}$ "


class Config:
    """Interpreter settings"""

    def __init__(self):
        self._load_from_environment()

    def _load_from_environment(self):
        self.prompt = os.getenv('PYSHELL_PROMPT', DEFAULT_PROMPT)
        self.history_size = self._parse_int_env('PYSHELL_HISTORY_SIZE', HISTORY_MAX)
        self.max_args = self._parse_int_env('PYSHELL_MAX_ARGS', MAX_ARGS)
        self.log_level = os.getenv('PYSHELL_LOG_LEVEL', 'WARNING').upper()

    def _parse_int_env(self, key: str, default: Optional[int]) -> Optional[int]:
        """Parse a positive integer environment variable"""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            parsed = int(value)
        except ValueError:
            return default
        return parsed if parsed > 0 else default

    def render_prompt(self) -> str:
        try:
            return self.prompt.format(cwd=os.getcwd())
        except (KeyError, IndexError, ValueError):
            return self.prompt


config = Config()


def get_config() -> Config:
    """Get the global configuration instance"""
    return config
