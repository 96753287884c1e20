"""Footnote bookkeeping, label scanning and HTML for references and back-links."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

__all__ = [
    "FootnoteMap",
    "parse_reference",
    "parse_definition",
    "render_reference",
    "render_backrefs",
]

# "↩" followed by a text presentation selector so it is not shown as an emoji.
_BACKREF_SYMBOL = "\u21a9\ufe0e"


@dataclass
class FootnoteMap:
    """Tracks footnote definitions and the references pointing at them."""

    _def_counter: int = 0
    _ref_counter: int = 0
    _label_to_def: dict[str, int] = field(default_factory=dict)
    _def_to_refs: dict[int, list[int]] = field(default_factory=dict)

    def add_def(self, label: str) -> int | None:
        """Assign an id to a new definition, or return ``None`` if the label is taken."""
        if label in self._label_to_def:
            return None
        self._def_counter += 1
        self._label_to_def[label] = self._def_counter
        return self._def_counter

    def add_ref(self, label: str) -> tuple[int, int] | None:
        """Record a reference to ``label`` and return ``(def_id, ref_id)``.

        Returns ``None`` when no definition exists for the label.
        """
        def_id = self._label_to_def.get(label)
        if def_id is None:
            return None
        self._ref_counter += 1
        self._def_to_refs.setdefault(def_id, []).append(self._ref_counter)
        return def_id, self._ref_counter

    def add_inline_def(self) -> tuple[int, int]:
        """Record an inline footnote, which is both a definition and its reference."""
        self._def_counter += 1
        self._ref_counter += 1
        self._def_to_refs[self._def_counter] = [self._ref_counter]
        return self._def_counter, self._ref_counter

    def referenced_by(self, def_id: int) -> list[int]:
        """Return the ids of all references to the given definition."""
        return list(self._def_to_refs.get(def_id, []))


def _scan_label(text: str) -> tuple[str, int] | None:
    """Read a ``[^label]`` prefix; return the label and the index just past ``]``."""
    if not text.startswith("[^"):
        return None
    # Labels may not contain spaces; backslashes are kept as part of the label.
    for index in range(2, len(text)):
        char = text[index]
        if char == "]":
            label = text[2:index]
            return (label, index + 1) if label else None
        if char == " ":
            return None
    return None


def parse_reference(text: str) -> tuple[str, int] | None:
    """Parse a footnote reference ``[^label]`` at the start of ``text``.

    Returns the label and the number of characters the reference occupies,
    or ``None`` if ``text`` does not start with a valid reference.
    """
    return _scan_label(text)


def parse_definition(line: str) -> tuple[str, int] | None:
    """Parse the start of a footnote definition line, ``[^label]: ...``.

    Returns the label and the number of spaces or tabs between the colon and
    the definition's content, or ``None`` if the line does not start a
    definition.
    """
    scanned = _scan_label(line)
    if scanned is None:
        return None
    label, after = scanned
    if line[after:after + 1] != ":":
        return None
    rest = line[after + 1:]
    spaces = len(rest) - len(rest.lstrip(" \t"))
    return label, spaces


def _attrs(pairs: list[tuple[str, str]]) -> str:
    return "".join(f' {name}="{escape(value)}"' for name, value in pairs)


def render_reference(def_id: int, ref_id: int) -> str:
    """Render the superscript link for a footnote reference."""
    link_attrs = _attrs([("href", f"#fn{def_id}"), ("id", f"fnref{ref_id}")])
    return (
        f'<sup class="footnote-ref"><a{link_attrs}>'
        f"{escape(f'[{def_id}]')}</a></sup>"
    )


def render_backrefs(ref_ids: list[int]) -> str:
    """Render the back-links from a footnote definition to its references."""
    return "".join(
        " <a"
        + _attrs([("href", f"#fnref{ref_id}"), ("class", "footnote-backref")])
        + f">{_BACKREF_SYMBOL}</a>"
        for ref_id in ref_ids
    )