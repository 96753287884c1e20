import pytest

from mdextras.html import (
    HTML_BLOCKS,
    HTML_SEQUENCES,
    find_html_sequence,
    scan_html_block,
    scan_html_inline,
)


def test_inline_link_open_raises_level():
    tag = '<a href="hello">'
    assert scan_html_inline(tag + "rest") == (tag, 1)


def test_inline_link_close_lowers_level():
    assert scan_html_inline("</a> tail") == ("</a>", -1)


def test_inline_plain_tag_keeps_level():
    assert scan_html_inline("<br>world") == ("<br>", 0)


@pytest.mark.parametrize(
    "tag",
    [
        "<!-- a comment -->",
        "<!---->",
        "<?php echo 1; ?>",
        "<!DOCTYPE html>",
        "<![CDATA[ x < y ]]>",
        "<img src='x' alt=\"y\" />",
        "</div >",
    ],
)
def test_inline_recognised_forms(tag):
    result = scan_html_inline(tag + " trailing")
    assert result is not None
    assert result[0] == tag


@pytest.mark.parametrize("src", ["<1>", "< a>", "<", "text", "<!-->", "<a href=>"])
def test_inline_rejected(src):
    assert scan_html_inline(src) is None


def test_sequence_for_block_tag_can_interrupt_paragraph():
    seq = find_html_sequence("<div>")
    assert seq is HTML_SEQUENCES[5]
    assert seq.can_terminate_paragraph


def test_sequence_for_custom_tag_cannot_interrupt_paragraph():
    seq = find_html_sequence("<custom-tag>")
    assert seq is HTML_SEQUENCES[6]
    assert not seq.can_terminate_paragraph


@pytest.mark.parametrize("line", ["text", "<span>foo", "", "<!doctype html>"])
def test_no_sequence(line):
    assert find_html_sequence(line) is None


@pytest.mark.parametrize("name", HTML_BLOCKS)
def test_every_block_name_opens_a_block(name):
    assert find_html_sequence(f"<{name}>") is HTML_SEQUENCES[5]
    assert find_html_sequence(f"</{name.upper()}>") is HTML_SEQUENCES[5]


def test_block_ends_before_blank_line():
    lines = ["<div>", "hello", "", "after"]
    assert scan_html_block(lines) == ("<div>\nhello\n", 2)


def test_block_includes_closing_line():
    lines = ["<pre>", "x", "</pre>", "y"]
    assert scan_html_block(lines) == ("<pre>\nx\n</pre>\n", 3)


def test_comment_block_spanning_lines():
    lines = ["<!-- a", "b -->", "c"]
    content, count = scan_html_block(lines)
    assert count == 2
    assert content == "<!-- a\nb -->\n"


def test_block_closed_on_first_line():
    lines = ["<!DOCTYPE html>", "next"]
    assert scan_html_block(lines) == ("<!DOCTYPE html>\n", 1)


def test_unclosed_block_runs_to_end():
    lines = ["<script>", "a", "b"]
    content, count = scan_html_block(lines)
    assert count == len(lines)
    assert content.splitlines() == lines


@pytest.mark.parametrize("lines", [[], ["plain"], ["<span>foo"]])
def test_no_block(lines):
    assert scan_html_block(lines) is None