# tikzkit

Building blocks for editing TikZ/PGF pictures. tikzkit uses only the
standard library. It provides:

- **A command catalogue.** `tikzkit.commands` reads TikZ command
  descriptions from JSON (`parse_commands_json`) or XML
  (`parse_commands_xml`) into a `CommandCatalog`. `load_catalog(path)` picks
  the parser from the file suffix and gives an empty catalogue when the file
  cannot be read. Each entry is a `TikzCommand`, and the entries are grouped
  into nested `TikzCommandList` sections. `CommandCatalog.command_words()`
  produces the words used for completion, and
  `CommandCatalog.insertion_for(number)` gives the text to insert for a
  command.
- **Highlighting rules and tag insertion.** `tikzkit.rules.highlighting_rules`
  turns a catalogue into `HighlightingRule`s for commands, draw-to operations
  and options. `insert_tag(text, position, tag, dx, dy)` inserts a command
  into text, replaces each `<option>` by a placeholder (`•`), and returns the
  new text with the selection to place: on the first placeholder, or at the
  given offset. `list_entries` flattens a section into `(text, number)` entries
  for a list of commands.
- **A syntax highlighter.** `tikzkit.highlighter.TikzHighlighter` applies
  those rules to a line of text and returns `(start, length, format)` spans.
  It adds its own rules for `\begin{...}`/`\end{...}` environments and `%`
  comments. `apply_settings` resets the formats to `default_highlight_formats()`
  and reads custom colours and fonts from a flat settings mapping
  (`Highlighting/Customize`, `Highlighting/Number`,
  `Highlighting/Item<i>/Name`, `/Color`, `/Font`).
- **Bookmarks.** `tikzkit.bookmarks.BookmarkList` keeps a sorted list of
  bookmarked lines. It toggles lines and finds the previous and next
  bookmark. `recalculate` keeps the bookmarks on the right lines when lines
  are added or removed.
- **Text helpers.** `tikzkit.textops` finds the bracket that matches the one
  at a cursor (`matching_bracket`) and the word before the cursor for
  completion (`word_before`). It also computes the width of a line number
  gutter (`line_number_area_width`).
- **Locating the PGF manual.** `tikzkit.documentation.tikz_documentation_path`
  takes the path from a settings mapping. If the mapping has none, it asks
  `kpsewhich` to search the TeX tree. If that finds nothing, it falls back to
  `/usr/share/doc/texmf/pgf/pgfmanual.pdf.gz`, and it stores the path it
  found in the mapping.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Examples

Load a command catalogue and list the completion words:

```python
from tikzkit.commands import load_catalog

catalog = load_catalog("tikzcommands.json")
words = catalog.command_words()
```

Highlight a line of TikZ code:

```python
from tikzkit.highlighter import TikzHighlighter
from tikzkit.rules import highlighting_rules

highlighter = TikzHighlighter()
highlighter.set_highlighting_rules(highlighting_rules(catalog))
highlighter.apply_settings({})
spans = highlighter.highlight_block(r"\draw (0,0) -- (1,1); % a line")
```

Insert a command and match brackets:

```python
from tikzkit.rules import insert_tag
from tikzkit.textops import matching_bracket

text, anchor, cursor = insert_tag("", 0, r"\node at (<x>,<y>) {<text>};")
print(matching_bracket(text, 9))
```

Keep bookmarks on the right lines:

```python
from tikzkit.bookmarks import BookmarkList

marks = BookmarkList(old_line_count=10)
marks.toggle(4, 10)
marks.recalculate(2, 12)   # two lines inserted at line 2
print(marks.lines)         # [6]
```

## What it does not do

tikzkit is a library only. It has no editor window or other user interface,
and no command-line program. It does not load or save PGF documents, and it
does not run LaTeX to build a preview. It holds no editor state either: text,
cursor and bookmarks are passed to its functions, and the caller keeps them.