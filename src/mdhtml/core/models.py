"""Intermediate data models for the line engine"""

from dataclasses import dataclass, field
from enum import Enum


class LineKind(str, Enum):
    """Closed set of whole-line classifications."""
    heading = "heading"
    image = "image"
    rule = "horizontal-rule"
    unordered_item = "unordered-list-item"
    ordered_item = "ordered-list-item"
    quote = "quote-line"
    table_row = "table-row"
    fence_start = "fence-start"
    fence_end = "fence-end"
    paragraph = "paragraph"


@dataclass
class Run:
    """Consecutive lines of one multi-line kind, already inline-transformed."""
    kind:  LineKind
    start: int                                      # index of the first line
    items: list[str] = field(default_factory=list)  # captured inner content

    @property
    def end(self) -> int:
        """Index one past the last consumed line."""
        return self.start + len(self.items)


@dataclass
class FencedBlock:
    """A fenced region; start and end index the fence lines themselves."""
    start:    int
    end:      int
    language: str
    lines:    list[str] = field(default_factory=list)
