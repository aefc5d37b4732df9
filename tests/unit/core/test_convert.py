"""Unit tests for core/convert.py"""

import logging

import pytest

from mdhtml.core.assemble import FOOTER, HEADER
from mdhtml.core.convert import convert_lines, markdown_to_html
from mdhtml.core.errors import UnterminatedFenceError


def test_list_run_consumed_once():
    """Three list lines become one fragment; the next line starts a new one."""
    fragments = convert_lines(["- A", "- B", "- C", "done"])
    assert fragments == ["<ul><li>A</li><li>B</li><li>C</li></ul>", "<p>done</p>"]


def test_list_at_end_of_input():
    assert convert_lines(["- A", "- B"]) == ["<ul><li>A</li><li>B</li></ul>"]


@pytest.mark.parametrize("line,expected", [
    ("# A",        "<h1>A</h1>"),
    ("###### F",   "<h6>F</h6>"),
    ("####### G",  "<p>####### G</p>"),
])
def test_heading_level_bound(line, expected):
    assert convert_lines([line]) == [expected]


def test_heading_gets_inline_markup():
    assert convert_lines(["## The **new** API"]) == ["<h2>The <b>new</b> API</h2>"]


def test_table_split():
    fragments = convert_lines(["|ID|Name|", "|--|--|", "|1|Alice|"])
    assert fragments == [
        "<table><tr><th>ID</th><th>Name</th></tr><tr><td>1</td><td>Alice</td></tr></table>"
    ]


def test_single_line_blocks():
    fragments = convert_lines(["![logo](logo.png)", "***", "text"])
    assert fragments == ['<img src="logo.png" alt="logo" />', "<hr/>", "<p>text</p>"]


def test_paragraph_inline():
    assert convert_lines(["Hello **world**"]) == ["<p>Hello <b>world</b></p>"]


def test_fence_is_verbatim():
    html = markdown_to_html("```text\n**not bold**\n```\n")
    assert "<xmp>**not bold**</xmp>" in html
    assert "<b>" not in html


def test_fence_interrupts_run_and_resumes():
    fragments = convert_lines(["- a", "```py", "- raw", "```", "- b"])
    assert fragments == [
        "<ul><li>a</li></ul>",
        "<xmp>- raw</xmp>",
        "<ul><li>b</li></ul>",
    ]


def test_unterminated_fence_on_last_line_fails():
    with pytest.raises(UnterminatedFenceError):
        convert_lines(["# Title", "Body", "```python"])


def test_unterminated_fence_with_content_fails():
    with pytest.raises(UnterminatedFenceError) as excinfo:
        markdown_to_html("intro\n```python\nprint(1)\n\nmore\n")
    assert excinfo.value.line == 1


def test_stray_end_fence_kept_as_text(caplog):
    with caplog.at_level(logging.WARNING, logger="mdhtml"):
        fragments = convert_lines(["text", "```"])
    assert fragments == ["<p>text</p>", "<p>```</p>"]
    assert "Closing fence with no open fence" in caplog.text


def test_blank_lines_do_not_split_runs():
    """Blank lines are stripped before grouping, so these two lists merge."""
    html = markdown_to_html("- a\n\n- b\n")
    assert "<ul><li>a</li><li>b</li></ul>" in html


def test_blank_lines_inside_fence_are_dropped():
    assert "<xmp>a\nb</xmp>" in markdown_to_html("```py\na\n\nb\n```\n")


def test_markdown_to_html_full_document():
    assert markdown_to_html("# T\n\nbody\n") == HEADER + "<h1>T</h1>\n<p>body</p>\n" + FOOTER


def test_empty_document():
    assert convert_lines([]) == []
    assert markdown_to_html("\n  \n") == HEADER + FOOTER


def test_calls_do_not_share_state():
    lines = ["> q", "|a|", "- x"]
    assert convert_lines(lines) == convert_lines(lines)


def test_run_over_extends_into_matching_prose():
    """Any line still matching the list pattern joins the run, whatever its marker."""
    fragments = convert_lines(["- a", "- b", "+ prose continues", "end"])
    assert fragments == [
        "<ul><li>a</li><li>b</li><li>prose continues</li></ul>",
        "<p>end</p>",
    ]


def test_quote_over_extends_across_stripped_blank_line():
    html = markdown_to_html("> quoted\n\n> separate thought\n")
    assert "<blockquote>quoted<br/>separate thought<br/></blockquote>" in html
