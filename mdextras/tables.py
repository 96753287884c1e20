"""Row and delimiter-row scanning for GFM-style pipe tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = ["ColumnAlignment", "RowContent", "scan_row", "scan_alignment_row"]


class ColumnAlignment(Enum):
    """Horizontal alignment of a table column."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @property
    def style(self) -> str | None:
        """The inline CSS for a cell in this column, or ``None`` when unaligned."""
        if self is ColumnAlignment.NONE:
            return None
        return f"text-align:{self.value}"


@dataclass
class RowContent:
    """The text of one cell and how its characters map back to the source line.

    ``srcmap`` holds ``(text_offset, line_offset)`` pairs: from each
    ``text_offset`` in ``text`` onwards, characters come from the line starting
    at ``line_offset``.
    """

    text: str
    srcmap: list[tuple[int, int]] = field(default_factory=list)


_ALIGNMENTS = {
    0: ColumnAlignment.NONE,
    1: ColumnAlignment.LEFT,
    2: ColumnAlignment.RIGHT,
    3: ColumnAlignment.CENTER,
}


def scan_row(line: str) -> list[RowContent]:
    """Split a table row into cells on unescaped ``|`` characters.

    Leading and trailing blanks of each cell are dropped, ``\\|`` becomes
    ``|``, and an empty first or last cell (from a leading or trailing pipe)
    is removed.
    """
    result: list[RowContent] = []
    text = ""
    srcmap: list[tuple[int, int]] = [(0, 0)]
    is_escaped = False
    is_leading = True

    for pos, ch in enumerate(line):
        if ch in " \t" and is_leading:
            dst, src = srcmap[0]
            srcmap[0] = (dst, src + 1)
        elif ch == "|":
            is_leading = False
            if is_escaped:
                text += line[srcmap[-1][1]:pos - 1]
                srcmap.append((len(text), pos))
            else:
                text += line[srcmap[-1][1]:pos]
                result.append(RowContent(text, srcmap))
                text = ""
                srcmap = [(0, pos + 1)]
                is_escaped = False
                is_leading = True
        elif ch == "\\":
            is_leading = False
            is_escaped = True
        else:
            is_leading = False
            is_escaped = False

    text += line[srcmap[-1][1]:]
    result.append(RowContent(text, srcmap))

    for content in result:
        content.text = content.text.rstrip(" \t")

    if result and not result[-1].text:
        result.pop()
    if result and not result[0].text:
        result.pop(0)

    return result


def scan_alignment_row(line: str) -> list[ColumnAlignment] | None:
    """Parse a delimiter row such as ``| :-- | :-: | --: |``.

    Returns the alignment of each column, or ``None`` if the line is not a
    valid delimiter row.
    """
    has_delimiter = False
    for ch in line:
        if ch in "|:":
            has_delimiter = True
        elif ch not in "- \t":
            return None
    if not has_delimiter:
        return None

    # A leading "- " would be ambiguous with a list item.
    if line.startswith("- "):
        return None

    alignments: list[ColumnAlignment] = []
    for row in scan_row(line):
        cell = row.text
        bits = 0
        if cell.startswith(":"):
            bits |= 1
            cell = cell[1:]
        if cell.endswith(":"):
            bits |= 2
            cell = cell[:-1]
        if not cell or cell.strip("-"):
            return None
        alignments.append(_ALIGNMENTS[bits])

    return alignments