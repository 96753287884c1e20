"""A minimal slug generator for heading identifiers."""

from __future__ import annotations

__all__ = ["simple_slugify"]


def simple_slugify(s: str) -> str:
    """Lowercase ASCII letters and replace every non-alphanumeric character with ``-``.

    Non-ASCII alphanumerics are kept as they are; the result has the same
    number of characters as the input.
    """
    return "".join(
        (c.lower() if c.isascii() else c) if c.isalnum() else "-" for c in s
    )