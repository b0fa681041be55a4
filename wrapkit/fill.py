"""Wrapping text into lines and filling it into a single string."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Union

from wrapkit.core import Fragment, Word, break_words, display_width
from wrapkit.options import Options, WordSplitter

__all__ = ["fill", "fill_inplace", "fill_slow_path", "wrap"]


def _utf8_len(text: str) -> int:
    """Length of ``text`` in UTF-8 bytes; never smaller than its display width."""
    return len(text.encode("utf-8", errors="surrogatepass"))


def _find_words(line: str) -> list[Word]:
    """Split ``line`` into words separated by ASCII spaces.

    Each word keeps the spaces that follow it as its whitespace; leading
    spaces form a word of their own with empty content.
    """
    words: list[Word] = []
    start = 0
    in_whitespace = False
    for idx, ch in enumerate(line):
        if in_whitespace and ch != " ":
            words.append(Word.from_text(line[start:idx]))
            start = idx
        in_whitespace = ch == " "
    if start < len(line):
        words.append(Word.from_text(line[start:]))
    return words


def _split_words(words: Iterable[Word], splitter: WordSplitter) -> Iterator[Word]:
    """Split words at the points allowed by ``splitter``.

    Pieces that do not already end in a hyphen get "-" as their penalty.
    """
    for word in words:
        prev = 0
        for idx in splitter.split_points(word.word):
            penalty = "" if word.word[:idx].endswith("-") else "-"
            yield Word(word.word[prev:idx], "", penalty)
            prev = idx
        yield Word(word.word[prev:], word.whitespace, word.penalty)


def _wrap_first_fit(
    fragments: Sequence[Fragment], line_widths: Sequence[float]
) -> list[Sequence[Fragment]]:
    """Put fragments on lines greedily, starting a new line when one is full.

    Line ``n`` has width ``line_widths[n]``; the last width is used for
    all lines beyond the given ones.
    """
    default_width = line_widths[-1] if line_widths else 0.0
    lines: list[Sequence[Fragment]] = []
    start = 0
    width = 0.0
    for idx, fragment in enumerate(fragments):
        line_width = line_widths[len(lines)] if len(lines) < len(line_widths) else default_width
        if width + fragment.width() + fragment.penalty_width() > line_width and idx > start:
            lines.append(fragments[start:idx])
            start = idx
            width = 0.0
        width += fragment.width() + fragment.whitespace_width()
    lines.append(fragments[start:])
    return lines


def _wrap_line(line: str, options: Options, first: bool) -> list[str]:
    """Wrap a single line without newlines.

    ``first`` tells whether this line starts the output, which decides
    between the initial and the subsequent indentation.
    """
    indent = options.initial_indent if first else options.subsequent_indent
    if _utf8_len(line) < options.width and not indent:
        return [line.rstrip(" ")]
    return _wrap_line_slow_path(line, options, first)


def _wrap_line_slow_path(line: str, options: Options, first: bool) -> list[str]:
    initial_width = max(options.width - display_width(options.initial_indent), 0)
    subsequent_width = max(options.width - display_width(options.subsequent_indent), 0)
    line_widths = [float(initial_width), float(subsequent_width)]

    split = _split_words(_find_words(line), options.word_splitter)
    if options.break_words:
        words = break_words(split, subsequent_width)
        if options.initial_indent:
            # Words were broken for the second line's width, so the first
            # word must not be forced onto the first line.
            words.insert(0, Word.from_text(""))
    else:
        words = list(split)

    result: list[str] = []
    idx = 0
    for group in _wrap_first_fit(words, line_widths):
        if not group:
            result.append("")
            continue
        last_word = group[-1]
        length = sum(len(w.word) + len(w.whitespace) for w in group) - len(
            last_word.whitespace
        )
        is_first = first and not result
        prefix = options.initial_indent if is_first else options.subsequent_indent
        result.append(prefix + line[idx:idx + length] + last_word.penalty)
        idx += length + len(last_word.whitespace)
    return result


def wrap(text: str, width_or_options: Union[int, Options]) -> list[str]:
    """Wrap ``text`` into lines no wider than the given width.

    Existing line breaks are kept; trailing spaces are removed from
    every line.
    """
    options = Options.coerce(width_or_options)
    lines: list[str] = []
    for line in text.split(options.line_ending.as_str()):
        lines.extend(_wrap_line(line, options, first=not lines))
    return lines


def fill(text: str, width_or_options: Union[int, Options]) -> str:
    """Wrap ``text`` and join the lines with the configured line ending."""
    options = Options.coerce(width_or_options)
    if _utf8_len(text) < options.width and "\n" not in text and not options.initial_indent:
        return text.rstrip(" ")
    return fill_slow_path(text, options)


def fill_slow_path(text: str, options: Options) -> str:
    """Fill ``text`` by always going through :func:`wrap`."""
    return options.line_ending.as_str().join(wrap(text, options))


def fill_inplace(text: str, width: int) -> str:
    """Fill ``text`` by turning some spaces into newlines.

    Only existing ' ' characters are replaced, so the result has the same
    length as ``text``. Words are never split or hyphenated, and a line
    may keep trailing spaces when words were separated by several.
    """
    indices: list[int] = []
    offset = 0
    for line in text.split("\n"):
        wrapped = _wrap_first_fit(_find_words(line), [float(width)])
        line_offset = offset
        for words in wrapped[:-1]:
            line_offset += sum(len(w.word) + len(w.whitespace) for w in words)
            # Put the newline at the last space before the next word.
            indices.append(line_offset - 1)
        offset += len(line) + 1

    chars = list(text)
    for idx in indices:
        chars[idx] = "\n"
    return "".join(chars)