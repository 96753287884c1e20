"""Parsing of trailing attribute blocks such as ``{#id .class key=value}``."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["parse_attrs"]

# Whitespace as understood by ASCII-only checks (vertical tab excluded).
_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")


class _State(Enum):
    START = auto()
    BLANK = auto()
    KEY = auto()
    EQUAL = auto()
    QUOTED = auto()
    UNQUOTED = auto()


def parse_attrs(s: str) -> tuple[str, list[tuple[str, str]]]:
    """Split a trailing ``{...}`` attribute block off ``s``.

    Returns the remaining text (with trailing whitespace removed) and the
    attributes in source order. If ``s`` does not end with a valid, non-empty
    attribute block, returns ``s`` unchanged and an empty list.
    """
    fail: tuple[str, list[tuple[str, str]]] = (s, [])

    attrs: list[tuple[str, str]] = []
    state = _State.START
    key = ""
    value = ""
    end: int | None = None

    # The block sits at the end of the string, so it is read backwards.
    for index, char in reversed(list(enumerate(s))):
        if state is _State.START:
            if char != "}":
                return fail
            state = _State.BLANK

        elif state is _State.BLANK:
            if char == "{":
                end = index
                break
            if char == '"':
                value = ""
                state = _State.QUOTED
            elif char in _ASCII_WHITESPACE:
                state = _State.BLANK
            else:
                value = char
                state = _State.UNQUOTED

        elif state is _State.QUOTED:
            if char == '"':
                state = _State.EQUAL
            else:
                value = char + value

        elif state is _State.EQUAL:
            if char == "\\":
                value = '"' + value
                state = _State.QUOTED
            elif char == "=":
                key = ""
                state = _State.KEY
            else:
                return fail

        elif state is _State.UNQUOTED:
            if char == "{":
                return fail
            if char == "#":
                attrs.append(("id", value))
                state = _State.BLANK
            elif char == ".":
                attrs.append(("class", value))
                state = _State.BLANK
            elif char == "=":
                key = ""
                state = _State.KEY
            elif char in _ASCII_WHITESPACE:
                return fail
            else:
                value = char + value

        elif state is _State.KEY:
            if char == "{" or char in _ASCII_WHITESPACE:
                attrs.append((key, value))
                if char == "{":
                    end = index
                    break
                state = _State.BLANK
            else:
                key = char + key

    if end is None or not attrs:
        return fail

    attrs.reverse()
    return s[:end].rstrip(), attrs