"""Recognition of raw HTML, inline and as blocks, following CommonMark rules."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "HTML_BLOCKS",
    "HTML_TAG_RE",
    "HTML_OPEN_CLOSE_TAG_RE",
    "HtmlSequence",
    "HTML_SEQUENCES",
    "find_html_sequence",
    "scan_html_inline",
    "scan_html_block",
]

HTML_BLOCKS: tuple[str, ...] = (
    "address", "article", "aside", "base", "basefont", "blockquote", "body",
    "caption", "center", "col", "colgroup", "dd", "details", "dialog", "dir",
    "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form",
    "frame", "frameset", "h1", "h2", "h3", "h4", "h5", "h6", "head", "header",
    "hr", "html", "iframe", "legend", "li", "link", "main", "menu", "menuitem",
    "nav", "noframes", "ol", "optgroup", "option", "p", "param", "section",
    "source", "summary", "table", "tbody", "td", "tfoot", "th", "thead",
    "title", "tr", "track", "ul",
)

_ATTR_NAME = r"[a-zA-Z_:][a-zA-Z0-9:._-]*"
_UNQUOTED = r"[^\"'=<>`\x00-\x20]+"
_SINGLE_QUOTED = r"'[^']*'"
_DOUBLE_QUOTED = r'"[^"]*"'
_ATTR_VALUE = f"(?:{_UNQUOTED}|{_SINGLE_QUOTED}|{_DOUBLE_QUOTED})"
_ATTRIBUTE = rf"(?:\s+{_ATTR_NAME}(?:\s*=\s*{_ATTR_VALUE})?)"
_OPEN_TAG = rf"<[A-Za-z][A-Za-z0-9\-]*{_ATTRIBUTE}*\s*/?>"
_CLOSE_TAG = r"</[A-Za-z][A-Za-z0-9\-]*\s*>"
_COMMENT = r"<!---->|<!--(?:-?[^>-])(?:-?[^-])*-->"
_PROCESSING = r"<[?][\s\S]*?[?]>"
_DECLARATION = r"<![A-Z]+\s+[^>]*>"
_CDATA = r"<!\[CDATA\[[\s\S]*?\]\]>"

HTML_TAG_RE = re.compile(
    f"^(?:{_OPEN_TAG}|{_CLOSE_TAG}|{_COMMENT}|{_PROCESSING}|{_DECLARATION}|{_CDATA})"
)
HTML_OPEN_CLOSE_TAG_RE = re.compile(f"^(?:{_OPEN_TAG}|{_CLOSE_TAG})")

_LINK_OPEN_RE = re.compile(r"^<a[>\s]")
_LINK_CLOSE_RE = re.compile(r"^</a\s*>")


@dataclass(frozen=True)
class HtmlSequence:
    """How one kind of HTML block starts and ends.

    ``can_terminate_paragraph`` tells whether the block may interrupt a
    paragraph.
    """

    open: re.Pattern[str]
    close: re.Pattern[str]
    can_terminate_paragraph: bool

    def opens(self, line: str) -> bool:
        """Whether ``line`` starts a block of this kind."""
        return self.open.search(line) is not None

    def closes(self, line: str) -> bool:
        """Whether ``line`` ends a block of this kind."""
        return self.close.search(line) is not None


_BLANK_LINE = re.compile(r"^\Z")

HTML_SEQUENCES: tuple[HtmlSequence, ...] = (
    HtmlSequence(
        re.compile(r"^<(script|pre|style|textarea)(\s|>|\Z)", re.IGNORECASE),
        re.compile(r"</(script|pre|style|textarea)>", re.IGNORECASE),
        True,
    ),
    HtmlSequence(re.compile(r"^<!--"), re.compile(r"-->"), True),
    HtmlSequence(re.compile(r"^<\?"), re.compile(r"\?>"), True),
    HtmlSequence(re.compile(r"^<![A-Z]"), re.compile(r">"), True),
    HtmlSequence(re.compile(r"^<!\[CDATA\["), re.compile(r"\]\]>"), True),
    HtmlSequence(
        re.compile(rf"^</?({'|'.join(HTML_BLOCKS)})(\s|/?>|\Z)", re.IGNORECASE),
        _BLANK_LINE,
        True,
    ),
    HtmlSequence(
        re.compile(rf"{HTML_OPEN_CLOSE_TAG_RE.pattern}\s*\Z"),
        _BLANK_LINE,
        False,
    ),
)


def find_html_sequence(line: str) -> HtmlSequence | None:
    """Return the kind of HTML block that ``line`` starts, or ``None``.

    ``line`` is the line's text from its first non-space character.
    """
    if not line.startswith("<"):
        return None
    return next((seq for seq in HTML_SEQUENCES if seq.opens(line)), None)


def scan_html_inline(src: str) -> tuple[str, int] | None:
    """Match an inline HTML tag, comment, declaration or similar at the start of ``src``.

    Returns the matched text and the change it makes to the link nesting
    level (``1`` for ``<a ...>``, ``-1`` for ``</a>``, otherwise ``0``), or
    ``None`` if ``src`` does not start with raw HTML.
    """
    if len(src) < 2 or src[0] != "<":
        return None
    second = src[1]
    if not (second in "!?/" or (second.isascii() and second.isalpha())):
        return None

    match = HTML_TAG_RE.match(src)
    if match is None:
        return None
    content = match.group(0)

    if _LINK_OPEN_RE.search(content):
        delta = 1
    elif _LINK_CLOSE_RE.search(content):
        delta = -1
    else:
        delta = 0
    return content, delta


def scan_html_block(lines: Sequence[str]) -> tuple[str, int] | None:
    """Scan an HTML block starting at the first of ``lines``.

    ``lines`` are the block's lines with its indentation removed. Returns the
    block's raw content (each line followed by a newline) and the number of
    lines it occupies, or ``None`` if the first line does not start one.
    """
    if not lines:
        return None
    sequence = find_html_sequence(lines[0])
    if sequence is None:
        return None

    end = 1
    if not sequence.closes(lines[0]):
        while end < len(lines):
            line = lines[end]
            if sequence.closes(line):
                if line:
                    end += 1
                break
            end += 1

    content = "".join(f"{line}\n" for line in lines[:end])
    return content, end