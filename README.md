# mdextras

Building blocks for common Markdown extensions that do not depend on any
particular parser. Each module works on plain strings or on simple token
lists, so any Markdown parser can call it.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Modules

- `mdextras.attrs`: `parse_attrs(s)` reads a `{#id .class key=value}` block
  at the end of `s`. It returns the text before the block, with trailing
  whitespace removed, and a list of `(name, value)` pairs. If `s` has no
  valid, non-empty block at its end, you get `s` back unchanged with an
  empty list.

  ```python
  from mdextras.attrs import parse_attrs

  parse_attrs('My heading {#foo .bar key="a b"}')
  # ('My heading', [('id', 'foo'), ('class', 'bar'), ('key', 'a b')])
  ```

- `mdextras.slugify`: `simple_slugify(s)` makes heading identifiers. ASCII
  letters are lower-cased. Other letters and all digits are kept as they
  are. Every other character becomes `-`.

- `mdextras.tables`: scanning for GFM tables.
  - `scan_row(line)` splits a row into `RowContent` cells. Each cell has
    `text` and a `srcmap`. It handles `\|` escapes and drops an empty first
    or last cell.
  - `scan_alignment_row(line)` reads a delimiter row into a list of
    `ColumnAlignment` values (`NONE`, `LEFT`, `RIGHT`, `CENTER`). It returns
    `None` when the line is not a delimiter row.
  - `ColumnAlignment.style` gives the inline CSS for a cell in that column.

- `mdextras.footnotes`: footnote support.
  - `FootnoteMap` numbers footnotes through `add_def`, `add_ref`,
    `add_inline_def` and `referenced_by`.
  - `parse_reference(text)` recognises the `[^label]` syntax and
    `parse_definition(line)` recognises `[^label]:`.
  - `render_reference(def_id, ref_id)` produces the superscript link HTML, and
    `render_backrefs(ref_ids)` produces the back-link HTML.

- `mdextras.typographer`: `apply_typography(text)` makes these replacements:
  - `(c)` becomes ©, `(r)` becomes ®, and `(tm)` becomes ™, in any case.
  - `+-` becomes ±.
  - Runs of dots become an ellipsis, except that `?...` and `!...` become
    `?..` and `!..`.
  - Runs of `?` and `!` are limited to three.
  - Repeated commas are collapsed to one.
  - `---` becomes an em dash and `--` becomes an en dash.

- `mdextras.html`: recognition of raw HTML, following CommonMark.
  - `scan_html_inline(src)` matches an inline tag, comment, declaration,
    processing instruction or CDATA section at the start of `src`. It
    returns the matched text and the change to the link nesting level.
  - `find_html_sequence(line)` picks the `HtmlSequence` that opens an HTML
    block.
  - `scan_html_block(lines)` returns the block's content and how many lines
    it runs.
  - `HTML_BLOCKS`, `HTML_TAG_RE` and `HTML_OPEN_CLOSE_TAG_RE` are exported
    as well.

- `mdextras.smartquotes`: replaces straight quotes with curly ones across a
  flat list of `TextToken`, `HtmlToken`, `LineBreak` and `Irrelevant`
  tokens, given in document order. A `QuoteSet` chooses the quote
  characters.
  - `compute_replacements` reports which characters to replace.
  - `execute_replacements` applies those replacements to one string.
  - `apply_smartquotes` returns the token list with the replacements made.
  - `can_open_or_close` is the test that decides whether a quote can open
    or close a pair.

  ```python
  from mdextras.smartquotes import TextToken, apply_smartquotes

  apply_smartquotes([TextToken("'hello' \"world\"", 1)])
  # [TextToken(content='‘hello’ “world”', nesting_level=1)]
  ```

## What this package does not do

This package has no Markdown parser, no document tree and no HTML renderer
for whole documents. It provides the scanning, bookkeeping and
text-replacement pieces. Your parser decides when to call them and how to
build and render its output. There is no command-line program.