from __future__ import annotations
import logging
from typing import Callable, Sequence

from .separators import Operator, Segment

logger = logging.getLogger(__name__)


def run_segments(segments: Sequence[Segment], run: Callable[[str], int]) -> int:
    """Run segments left to right with `&&` short-circuiting.

    When a segment followed by `&&` fails, every following segment reached
    through `&&` is skipped; execution resumes after the next `;`.
    """
    last_status = 0
    i = 0
    while i < len(segments):
        seg = segments[i]
        last_status = run(seg.text) if seg.text else 0
        i += 1
        if seg.op is Operator.AND and last_status != 0:
            while i < len(segments) and segments[i - 1].op is Operator.AND:
                logger.debug("skip %r after status %s", segments[i].text, last_status)
                i += 1
    return last_status
