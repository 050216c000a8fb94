"""
pyshell - an interactive command interpreter

Splits lines on `;` and `&&`, tokenizes with double quotes, resolves
`<`, `>`, `>>` and globs, and runs external programs or a single pipe.
"""

__version__ = "1.0.0"

from .history import History
from .shell import Shell

__all__ = [
    'History',
    'Shell',
]
