"""Inline substitutions: emphasis, strikethrough, links, and inline code"""

import re
from typing import NamedTuple


class InlineRule(NamedTuple):
    name: str
    pattern: re.Pattern
    replacement: str


# Order matters: bold must consume `**`/`__` pairs before italic sees single markers.
INLINE_RULES: tuple[InlineRule, ...] = (
    InlineRule("bold",   re.compile(r'([*_]{2})(.*?)\1'),            r'<b>\2</b>'),
    InlineRule("italic", re.compile(r'(?<![*_])([*_])([^*_]+?)\1'),  r'<i>\2</i>'),
    InlineRule("strike", re.compile(r'~~(.*?)~~'),                   r'<del>\1</del>'),
    InlineRule("link",   re.compile(r'(?<!!)\[(.*?)\]\((.*?)\)'),    r'<a href="\2">\1</a>'),
    InlineRule("code",   re.compile(r'(?<!`)`([^`]+?)`(?!`)'),       r'<code>\1</code>'),
)


def transform_inline(line: str) -> str:
    """Apply every inline rule in order, replacing all matches of each."""
    for rule in INLINE_RULES:
        line = rule.pattern.sub(rule.replacement, line)
    return line
