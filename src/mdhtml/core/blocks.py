"""Whole-line classification and single-line block rendering"""

import re
from typing import Optional

from mdhtml.core.models import LineKind


FENCE_START_RE = re.compile(r'^```(\w+)$')
FENCE_END_RE   = re.compile(r'^```$')
HEADING_RE     = re.compile(r'^(#{1,6})(?!#)[ \t]*(.*)$')
IMAGE_RE       = re.compile(r'^!\[(.*?)\]\((.*?)\)$')
RULE_RE        = re.compile(r'^([*\-_])\1{2}$')

# Patterns whose first group is the run item content (tables: the inner row).
UNORDERED_RE   = re.compile(r'^[-+*] (.*)$')
ORDERED_RE     = re.compile(r'^\d+\. (.*)$')
QUOTE_RE       = re.compile(r'^> ?(.*)$')
TABLE_ROW_RE   = re.compile(r'^\|(.*)\|$')

# Priority order; the first matching pattern decides the kind.
LINE_PATTERNS: tuple[tuple[LineKind, re.Pattern], ...] = (
    (LineKind.fence_start,    FENCE_START_RE),
    (LineKind.fence_end,      FENCE_END_RE),
    (LineKind.heading,        HEADING_RE),
    (LineKind.image,          IMAGE_RE),
    (LineKind.rule,           RULE_RE),
    (LineKind.unordered_item, UNORDERED_RE),
    (LineKind.ordered_item,   ORDERED_RE),
    (LineKind.quote,          QUOTE_RE),
    (LineKind.table_row,      TABLE_ROW_RE),
)

SINGLE_LINE_KINDS = frozenset({LineKind.heading, LineKind.image, LineKind.rule})


def classify_line(text: str) -> LineKind:
    """Return the kind of a line; lines matching no pattern are paragraphs."""
    for kind, pattern in LINE_PATTERNS:
        if pattern.match(text):
            return kind
    return LineKind.paragraph


def render_single_line(text: str) -> Optional[str]:
    """Render a heading, image, or horizontal rule line; None for anything else."""
    if m := HEADING_RE.match(text):
        level = len(m.group(1))
        return f"<h{level}>{m.group(2)}</h{level}>"
    if m := IMAGE_RE.match(text):
        return f'<img src="{m.group(2)}" alt="{m.group(1)}" />'
    if RULE_RE.match(text):
        return "<hr/>"
    return None


def render_paragraph(text: str) -> str:
    return f"<p>{text}</p>"
