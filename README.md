# wrapkit

Word wrapping, filling, columns and indentation for plain and
terminal text.

wrapkit measures text by its *displayed width*, not its length: wide
characters such as emojis and CJK ideographs count as two columns
(widths come from `wcwidth`), and ANSI colour and hyperlink escape
sequences count as zero. That keeps wrapped output lined up in a
terminal.

## Installing

```
pip install wrapkit
```

## Filling and wrapping

```python
from wrapkit.fill import fill, wrap

fill("Memory safety without garbage collection.", 15)
# 'Memory safety\nwithout garbage\ncollection.'

wrap("foo bar baz", 10)
# ['foo bar', 'baz']
```

`wrap` returns the lines as a list; `fill` joins them with the
configured line ending. Both take either a width or an `Options`
value. Options are immutable; each `with_*` method returns a changed
copy:

```python
from wrapkit.fill import fill
from wrapkit.options import Options

options = (
    Options.coerce(15)
    .with_initial_indent("- ")
    .with_subsequent_indent("  ")
)
fill("Memory safety without garbage collection.", options)
# '- Memory safety\n  without\n  garbage\n  collection.'
```

The settings of `Options` are:

- `width` (`with_width`): the line width in columns; must be a
  non-negative `int`.
- `line_ending` (`with_line_ending`): `LineEnding.LF` (the default) or
  `LineEnding.CRLF` from `wrapkit.line_ending`. Input is split into
  lines on this ending, and `fill` joins output lines with it.
- `initial_indent` / `subsequent_indent`: prefixes for the first and
  the later output lines.
- `break_words` (`with_break_words`, default `True`): whether words
  wider than a line are cut into pieces.
- `word_splitter` (`with_word_splitter`): `WordSplitter.HYPHEN_SPLITTER`
  (the default) lets a word split after a hyphen between two
  alphanumeric characters; `WordSplitter.NO_HYPHENATION` never splits.

Words are separated by ASCII spaces. Existing line breaks in the input
are kept, and trailing spaces at the end of wrapped lines are dropped.

### Filling in place

`fill_inplace(text, width)` returns a copy of `text` in which only
spaces have been turned into newlines, so the result has exactly the
length of the input. It never hyphenates or breaks long words, and a
line may keep trailing spaces where words were separated by several:

```python
from wrapkit.fill import fill_inplace

fill_inplace("Some text to wrap over multiple lines", 12)
# 'Some text to\nwrap over\nmultiple\nlines'
fill_inplace("foo  bar    baz", 10)
# 'foo  bar   \nbaz'
```

`fill_slow_path(text, options)` gives the same result as `fill` but
always goes through `wrap`.

## Columns

```python
from wrapkit.columns import wrap_columns

wrap_columns("Foo Bar Baz Quux", 4, 21, "|", "|", "|")
# ['|Foo |Bar |Baz |Quux|']
```

The gaps are placed before, between and after the columns. The width
left over is shared equally between the columns (each at least one
column wide), and the last column takes any remainder. The text runs
down the first column before continuing in the next. Asking for zero
or fewer columns raises `ValueError`.

## Indenting and dedenting

```python
from wrapkit.indentation import dedent, indent

indent("foo = 123\n\nprint(foo)\n", "# ")
# '# foo = 123\n#\n# print(foo)\n'

dedent("    foo\n  bar\n    baz")
# '  foo\nbar\n  baz'
```

`indent` uses the prefix without its trailing whitespace on blank
lines, so they get no trailing spaces. `dedent` removes the longest
run of leading whitespace shared by every non-blank line; blank lines
become empty.

## Lower-level pieces

`wrapkit.core` holds the building blocks: `display_width(text)`, the
abstract `Fragment`, the `Word` fragment (`Word.from_text`,
`Word.break_apart`) and `break_words` for cutting over-long words to a
given width. `wrapkit.line_ending.non_empty_lines(text)` yields the
non-empty lines of a text together with their `LineEnding` (or `None`
for an unterminated last line).

```python
from wrapkit.core import Word, display_width

display_width("\x1b[31mCafé Rouge\x1b[0m")  # 10
display_width("你好")                        # 4
list(Word.from_text("Hello!  ").break_apart(3))
# [Word('Hel'), Word('lo!', whitespace='  ')]
```

## Commands

`wrapkit-demo [hello|layout|termwidth] [--width N]` runs a small
demonstration:

- `hello` (the default) fills a greeting at 30 columns.
- `layout` wraps a sample paragraph at every width from 15 to 59 and
  prints each distinct layout in a box titled with its width.
- `termwidth` fills the sample paragraph at `--width` columns, or at
  the terminal's width when none is given.

`wrapkit-sizes` builds a demo program in the current directory with
`cargo build --release`, once plainly and once for each of a fixed set
of features, strips the resulting binary with `strip`, and prints a
Markdown table of the sizes in kilobytes. Both tools must be on the
`PATH`. With `--update PATH` it rewrites the section between the
`<!-- begin binary-sizes -->` and `<!-- end binary-sizes -->` markers
in that file instead. Any other arguments print a usage line. The
helpers it uses (`quick_fill`, `kb`, `format_row`, `find_marker`) live
in `wrapkit.sizes`.

## What it does not do

Lines are filled greedily: each line takes as many words as fit
before a new one starts; there is no whole-paragraph optimisation of
line breaks. Words are found at ASCII spaces only, not by Unicode
line-breaking rules, and there is no dictionary-based hyphenation.

## Running the tests

```
pip install -e ".[test]"
pytest
```