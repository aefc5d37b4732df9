"""Folding runs of consecutive list, quote, and table lines into one container"""

import logging
from typing import Sequence

from mdhtml.core.blocks import ORDERED_RE, QUOTE_RE, TABLE_ROW_RE, UNORDERED_RE, classify_line
from mdhtml.core.inline import transform_inline
from mdhtml.core.models import LineKind, Run


logger = logging.getLogger(__name__)

RUN_PATTERNS = {
    LineKind.unordered_item: UNORDERED_RE,
    LineKind.ordered_item:   ORDERED_RE,
    LineKind.quote:          QUOTE_RE,
    LineKind.table_row:      TABLE_ROW_RE,
}

RUN_KINDS = frozenset(RUN_PATTERNS)


def collect_run(lines: Sequence[str], start: int, kind: LineKind) -> Run:
    """Consume lines from start while each one classifies as kind.

    Lines are inline-transformed before matching. The run stops at the first
    line of another kind; nothing past it is inspected.
    """
    if kind not in RUN_PATTERNS:
        raise ValueError(f"{kind.value} does not form multi-line runs")
    pattern = RUN_PATTERNS[kind]
    run = Run(kind=kind, start=start)

    for line in lines[start:]:
        text = transform_inline(line)
        if classify_line(text) != kind:
            break
        run.items.append(pattern.match(text).group(1))

    logger.debug("%s run of %d line(s) at line %d", kind.value, len(run.items), start)
    return run


def _split_cells(row: str) -> list[str]:
    return [cell.strip() for cell in row.split("|")]


def _render_table(rows: list[str]) -> str:
    """Row 0 is the header, row 1 the separator (dropped), the rest data rows."""
    parts = ["<table>"]
    for i, row in enumerate(rows):
        if i == 1:
            continue
        tag = "th" if i == 0 else "td"
        cells = "".join(f"<{tag}>{cell}</{tag}>" for cell in _split_cells(row))
        parts.append(f"<tr>{cells}</tr>")
    parts.append("</table>")
    return "".join(parts)


def render_run(run: Run) -> str:
    """Render a whole run as exactly one HTML fragment."""
    if run.kind == LineKind.unordered_item:
        return "<ul>" + "".join(f"<li>{item}</li>" for item in run.items) + "</ul>"
    if run.kind == LineKind.ordered_item:
        return "<ol>" + "".join(f"<li>{item}</li>" for item in run.items) + "</ol>"
    if run.kind == LineKind.quote:
        return "<blockquote>" + "".join(f"{item}<br/>" for item in run.items) + "</blockquote>"
    if run.kind == LineKind.table_row:
        return _render_table(run.items)
    raise ValueError(f"Cannot render a run of kind {run.kind.value}")
