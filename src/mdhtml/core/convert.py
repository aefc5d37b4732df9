"""Line engine: fence capture, inline rewrite, classification, and run grouping"""

import logging
from typing import Sequence

from mdhtml.core.assemble import assemble_document
from mdhtml.core.blocks import SINGLE_LINE_KINDS, classify_line, render_paragraph, render_single_line
from mdhtml.core.fences import extract_fence, fence_language, render_fence
from mdhtml.core.grouping import RUN_KINDS, collect_run, render_run
from mdhtml.core.inline import transform_inline
from mdhtml.core.models import LineKind
from mdhtml.core.source import source_lines


logger = logging.getLogger(__name__)


def convert_lines(lines: Sequence[str]) -> list[str]:
    """Convert non-blank source lines into HTML fragments, in source order.

    The cursor only moves forward: a fence consumes through its end fence, a
    run consumes every line it grouped, anything else consumes one line.
    """
    fragments: list[str] = []
    i = 0

    while i < len(lines):
        if fence_language(lines[i]) is not None:
            block = extract_fence(lines, i)
            fragments.append(render_fence(block))
            i = block.end + 1
            continue

        text = transform_inline(lines[i])
        kind = classify_line(text)

        if kind in SINGLE_LINE_KINDS:
            fragments.append(render_single_line(text))
            i += 1
        elif kind in RUN_KINDS:
            run = collect_run(lines, i, kind)
            fragments.append(render_run(run))
            i = run.end
        else:
            if kind == LineKind.fence_end:
                logger.warning("Closing fence with no open fence at line %d; kept as text", i)
            fragments.append(render_paragraph(text))
            i += 1

    return fragments


def markdown_to_html(text: str) -> str:
    """Convert a whole document string into a complete HTML document."""
    return assemble_document(convert_lines(source_lines(text)))
