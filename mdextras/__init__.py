"""Building blocks for Markdown extensions: attributes, slugs, tables, footnotes, typography, smart quotes and raw HTML."""

__version__ = "0.6.1"

__all__ = ["attrs", "slugify", "tables", "footnotes", "typographer", "html", "smartquotes"]