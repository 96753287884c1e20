"""Common typographic replacements: dashes, ellipses, ``±``, ``©``, ``®`` and ``™``."""

from __future__ import annotations

import re

__all__ = ["apply_typography"]

_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\+-"), "\u00b1"),
    (re.compile(r"\.{2,}"), "\u2026"),
    (re.compile(r"([?!])\u2026"), r"\g<1>.."),
    (re.compile(r"([?!]){4,}"), r"\g<1>\g<1>\g<1>"),
    (re.compile(r",{2,}"), ","),
    (
        re.compile(r"(?P<pre>^|[^-])(?P<dash>---)(?P<post>[^-]|$)", re.MULTILINE),
        "\\g<pre>\u2014\\g<post>",
    ),
    (
        re.compile(r"(?P<pre>^|\s)(?P<dash>--)(?P<post>\s|$)", re.MULTILINE),
        "\\g<pre>\u2013\\g<post>",
    ),
    (
        re.compile(r"(?P<pre>^|[^-\s])(?P<dash>--)(?P<post>[^-\s]|$)", re.MULTILINE),
        "\\g<pre>\u2013\\g<post>",
    ),
)

_SCOPED_RE = re.compile(r"\((c|tm|r)\)", re.IGNORECASE)
_RARE_RE = re.compile(r"\+-|\.\.|\?\?\?\?|!!!!|,,|--")

_ABBREVIATIONS = {"(c)": "\u00a9", "(r)": "\u00ae", "(tm)": "\u2122"}


def _replace_abbreviation(match: re.Match[str]) -> str:
    return _ABBREVIATIONS[match.group(0).lower()]


def apply_typography(text: str) -> str:
    """Return ``text`` with typographic replacements applied.

    ``(c)``, ``(r)`` and ``(tm)`` (any case) become symbols; ``+-`` becomes
    ``±``; runs of dots become an ellipsis (``?...``/``!...`` become
    ``?..``/``!..``); ``?`` and ``!`` are limited to three in a row; repeated
    commas collapse; ``---`` and ``--`` become em and en dashes.
    """
    if _SCOPED_RE.search(text):
        text = _SCOPED_RE.sub(_replace_abbreviation, text)

    if _RARE_RE.search(text):
        for pattern, replacement in _REPLACEMENTS:
            text, count = pattern.subn(replacement, text)
            if count:
                # The dash patterns consume their neighbours, so overlapping
                # candidates need a second pass.
                text = pattern.sub(replacement, text)

    return text