from __future__ import annotations
import glob as pyglob
import logging
from typing import List

from .tokenizer import MAX_ARGS

MAGIC = ('*', '?', '[')

logger = logging.getLogger(__name__)


def has_magic(token: str) -> bool:
    if getattr(token, 'quoted', False):
        return False
    return any(ch in token for ch in MAGIC)


def expand_globs(args: List[str], max_args: int = MAX_ARGS) -> List[str]:
    # A pattern that matches nothing is kept as a literal argument
    expanded: List[str] = []
    for a in args:
        if has_magic(a):
            matches = sorted(pyglob.glob(a))
            if matches:
                logger.debug("glob %r -> %d paths", a, len(matches))
                expanded.extend(matches)
            else:
                expanded.append(a)
        else:
            expanded.append(a)
    return expanded[:max_args]
