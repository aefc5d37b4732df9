"""Fenced code extraction: raw capture between a start fence and an end fence"""

import logging
from typing import Optional, Sequence

from mdhtml.core.blocks import FENCE_END_RE, FENCE_START_RE
from mdhtml.core.errors import UnterminatedFenceError
from mdhtml.core.models import FencedBlock


logger = logging.getLogger(__name__)

RAW_TAG = "xmp"


def fence_language(line: str) -> Optional[str]:
    """Return the language tag if line opens a fence, else None."""
    m = FENCE_START_RE.match(line)
    return m.group(1) if m else None


def extract_fence(lines: Sequence[str], start: int) -> FencedBlock:
    """Capture raw lines after the start fence at start up to the next end fence.

    Content lines are kept verbatim. Raises UnterminatedFenceError when the
    input ends before an end fence.
    """
    language = fence_language(lines[start])
    if language is None:
        raise ValueError(f"Line {start} is not a start fence: {lines[start]!r}")

    for end in range(start + 1, len(lines)):
        if FENCE_END_RE.match(lines[end]):
            logger.debug("```%s fence spans lines %d-%d", language, start, end)
            return FencedBlock(start=start, end=end, language=language, lines=list(lines[start + 1:end]))

    raise UnterminatedFenceError(start, language)


def render_fence(block: FencedBlock) -> str:
    body = "\n".join(block.lines)
    return f"<{RAW_TAG}>{body}</{RAW_TAG}>"
