"""Replacement of straight quotes with typographic ones.

The document is given as a flat sequence of tokens in pre-order walk order.
Quotes are paired across tokens, so all replacements are computed first and
applied afterwards.
"""

from __future__ import annotations

import string
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

__all__ = [
    "QuoteType",
    "QuoteSet",
    "TextToken",
    "HtmlToken",
    "LineBreak",
    "Irrelevant",
    "can_open_or_close",
    "compute_replacements",
    "execute_replacements",
    "apply_smartquotes",
]

APOSTROPHE = "\u2019"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
SPACE = " "

# Characters with the Unicode White_Space property.
_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_ASCII_PUNCTUATION = frozenset(string.punctuation)


class QuoteType(Enum):
    """Whether a quote is single or double."""

    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True)
class QuoteSet:
    """The characters that replace opening and closing quotes."""

    open_single: str = "\u2018"
    close_single: str = "\u2019"
    open_double: str = "\u201c"
    close_double: str = "\u201d"

    def opening(self, quote_type: QuoteType) -> str:
        """The opening character for ``quote_type``."""
        return self.open_single if quote_type is QuoteType.SINGLE else self.open_double

    def closing(self, quote_type: QuoteType) -> str:
        """The closing character for ``quote_type``."""
        return self.close_single if quote_type is QuoteType.SINGLE else self.close_double


@dataclass(frozen=True)
class TextToken:
    """Plain text at a given nesting level of the document tree."""

    content: str
    nesting_level: int = 0


@dataclass(frozen=True)
class HtmlToken:
    """Raw inline HTML; its characters count as neighbours but are never changed."""

    content: str


@dataclass(frozen=True)
class LineBreak:
    """A paragraph start or a hard or soft line break."""


@dataclass(frozen=True)
class Irrelevant:
    """Any other node; it is skipped when looking for neighbouring characters."""


Token = Union[TextToken, HtmlToken, LineBreak, Irrelevant]


@dataclass
class _QuoteMarker:
    walk_index: int
    quote_position: int
    quote_type: QuoteType
    level: int


def _is_punct(char: str) -> bool:
    return char in _ASCII_PUNCTUATION or unicodedata.category(char).startswith("P")


def can_open_or_close(
    quote_type: QuoteType, last_char: str, next_char: str
) -> tuple[bool, bool]:
    """Decide whether a quote between ``last_char`` and ``next_char`` may open or close a pair."""
    # 1"" -- the first quote is an inch mark.
    if (
        quote_type is QuoteType.DOUBLE
        and next_char == DOUBLE_QUOTE
        and last_char in string.digits
    ):
        return False, False

    last_punct = _is_punct(last_char)
    next_punct = _is_punct(next_char)
    last_space = last_char in _WHITESPACE
    next_space = next_char in _WHITESPACE

    can_open = not next_space and (not next_punct or last_space or last_punct)
    can_close = not last_space and (not last_punct or next_space or next_punct)

    if can_open and can_close:
        # Replace inside punctuation sequences, but not inside words.
        return last_punct, next_punct

    return can_open, can_close


def _token_text(token: Token) -> str | None:
    if isinstance(token, (TextToken, HtmlToken)):
        return token.content
    return None


def _last_char_before(tokens: Sequence[Token], token_index: int, position: int) -> str:
    for index in range(token_index, -1, -1):
        token = tokens[index]
        if isinstance(token, LineBreak):
            return SPACE
        content = _token_text(token)
        if content is None:
            continue
        start = position if index == token_index else len(content)
        if start == 0:
            continue
        return content[start - 1]
    return SPACE


def _first_char_after(tokens: Sequence[Token], token_index: int, position: int) -> str:
    for index in range(token_index, len(tokens)):
        token = tokens[index]
        if isinstance(token, LineBreak):
            return SPACE
        content = _token_text(token)
        if content is None:
            continue
        start = position + 1 if index == token_index else 0
        if start < len(content):
            return content[start]
    return SPACE


def _find_quotes(content: str):
    for position, char in enumerate(content):
        if char == SINGLE_QUOTE:
            yield position, QuoteType.SINGLE
        elif char == DOUBLE_QUOTE:
            yield position, QuoteType.DOUBLE


def _try_close(
    stack: list[_QuoteMarker],
    walk_index: int,
    level: int,
    quote_type: QuoteType,
    position: int,
    quotes: QuoteSet,
) -> tuple[list[tuple[int, int, str]], int] | None:
    for j in range(len(stack) - 1, -1, -1):
        other = stack[j]
        if other.level < level:
            return None
        if other.quote_type is quote_type and other.level == level:
            ops = [
                (other.walk_index, other.quote_position, quotes.opening(quote_type)),
                (walk_index, position, quotes.closing(quote_type)),
            ]
            return ops, j
    return None


def _replace_in_token(
    content: str,
    walk_index: int,
    level: int,
    tokens: Sequence[Token],
    stack: list[_QuoteMarker],
    quotes: QuoteSet,
) -> list[tuple[int, int, str]]:
    while stack and stack[-1].level > level:
        stack.pop()

    ops: list[tuple[int, int, str]] = []
    for position, quote_type in _find_quotes(content):
        last_char = _last_char_before(tokens, walk_index, position)
        next_char = _first_char_after(tokens, walk_index, position)
        can_open, can_close = can_open_or_close(quote_type, last_char, next_char)

        if not can_open and not can_close:
            # Inside a word: a single quote is an apostrophe.
            if quote_type is QuoteType.SINGLE:
                ops.append((walk_index, position, APOSTROPHE))
            continue

        if can_close:
            closed = _try_close(stack, walk_index, level, quote_type, position, quotes)
            if closed is not None:
                pair, new_len = closed
                del stack[new_len:]
                ops.extend(pair)
                continue

        if can_open:
            stack.append(_QuoteMarker(walk_index, position, quote_type, level))
        elif can_close and quote_type is QuoteType.SINGLE:
            ops.append((walk_index, position, APOSTROPHE))
    return ops


def compute_replacements(
    tokens: Sequence[Token], quotes: QuoteSet | None = None
) -> dict[int, dict[int, str]]:
    """Work out which quotes to replace.

    Returns a mapping from token index to a mapping from character position
    within that token's text to the replacement character.
    """
    quotes = quotes or QuoteSet()
    stack: list[_QuoteMarker] = []
    result: dict[int, dict[int, str]] = {}
    for walk_index, token in enumerate(tokens):
        if not isinstance(token, TextToken):
            continue
        for index, position, char in _replace_in_token(
            token.content, walk_index, token.nesting_level, tokens, stack, quotes
        ):
            result.setdefault(index, {})[position] = char
    return result


def execute_replacements(replacements: dict[int, str], content: str) -> str:
    """Replace the characters of ``content`` at the given positions."""
    return "".join(replacements.get(i, c) for i, c in enumerate(content))


def apply_smartquotes(
    tokens: Sequence[Token], quotes: QuoteSet | None = None
) -> list[Token]:
    """Return the tokens with straight quotes in text tokens made typographic."""
    replacements = compute_replacements(tokens, quotes)
    result: list[Token] = []
    for index, token in enumerate(tokens):
        ops = replacements.get(index)
        if ops and isinstance(token, TextToken):
            token = replace(token, content=execute_replacements(ops, token.content))
        result.append(token)
    return result