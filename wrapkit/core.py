"""Building blocks for wrapping: display widths, fragments and words.

Wrapping proceeds by splitting input into fragments, optionally
splitting or breaking those fragments further, and then distributing
them over lines. Only the displayed width of each part of a fragment
matters to the wrapping algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from wcwidth import wcwidth

__all__ = [
    "Fragment",
    "Word",
    "break_words",
    "display_width",
    "skip_ansi_escape_sequence",
]

# Control Sequence Introducer: ESC followed by '['.
_CSI = ("\x1b", "[")
# Final bytes of an ANSI escape sequence lie in this range.
_ANSI_FINAL_FIRST = "\x40"
_ANSI_FINAL_LAST = "\x7e"


def skip_ansi_escape_sequence(ch: str, chars: Iterator[str]) -> bool:
    """Consume an ANSI escape sequence starting at ``ch`` from ``chars``.

    Returns True when ``ch`` starts an escape sequence, in which case the
    rest of the sequence has been consumed from ``chars``.
    """
    if ch != _CSI[0]:
        return False

    following = next(chars, None)
    if following == _CSI[1]:
        # Colour codes and the like: skip until a final byte.
        for c in chars:
            if _ANSI_FINAL_FIRST <= c <= _ANSI_FINAL_LAST:
                break
    elif following == "]":
        # Operating System Command: ends with ST ("\x1b\\") or BEL.
        last = "]"
        for c in chars:
            if c == "\x07" or (c == "\\" and last == _CSI[0]):
                break
            last = c

    return True


def _ch_width(ch: str) -> int:
    """Displayed width of a single character; control characters count as 0."""
    return max(wcwidth(ch), 0)


def display_width(text: str) -> int:
    """Compute the displayed width of ``text``, ignoring ANSI escape sequences."""
    chars = iter(text)
    width = 0
    for ch in chars:
        if skip_ansi_escape_sequence(ch, chars):
            continue
        width += _ch_width(ch)
    return width


class Fragment(ABC):
    """An abstract unit of wrappable content.

    A fragment is a word plus the whitespace that follows it. When the
    fragment ends a line the whitespace is dropped and a penalty (such as
    a hyphen) may be shown instead.
    """

    @abstractmethod
    def width(self) -> float:
        """Displayed width of the word itself."""

    @abstractmethod
    def whitespace_width(self) -> float:
        """Displayed width of the whitespace following the word."""

    @abstractmethod
    def penalty_width(self) -> float:
        """Displayed width of the penalty shown when the word ends a line."""


@dataclass(frozen=True)
class Word(Fragment):
    """A piece of wrappable text with its trailing whitespace and penalty."""

    word: str
    whitespace: str = ""
    penalty: str = ""
    _columns: int = field(default=-1, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self._columns < 0:
            object.__setattr__(self, "_columns", display_width(self.word))

    @classmethod
    def from_text(cls, text: str) -> Word:
        """Build a word from ``text``; trailing spaces become its whitespace."""
        trimmed = text.rstrip(" ")
        return cls(trimmed, text[len(trimmed):], "")

    def __str__(self) -> str:
        return self.word

    def width(self) -> float:
        return float(self._columns)

    def whitespace_width(self) -> float:
        # The whitespace consists of ' ' only.
        return float(len(self.whitespace))

    def penalty_width(self) -> float:
        # The penalty is "" or "-".
        return float(len(self.penalty))

    def break_apart(self, line_width: int) -> Iterator[Word]:
        """Yield pieces of this word at most ``line_width`` columns wide.

        The whitespace and penalty of this word go to the last piece. A
        single character wider than the line still forms its own piece.
        """
        offset = 0
        width = 0
        indexed = enumerate(self.word)
        for idx, ch in indexed:
            if skip_ansi_escape_sequence(ch, (c for _, c in indexed)):
                continue
            ch_width = _ch_width(ch)
            if width > 0 and width + ch_width > line_width:
                yield Word(self.word[offset:idx], "", "", width)
                offset = idx
                width = ch_width
                continue
            width += ch_width

        if offset < len(self.word):
            yield Word(self.word[offset:], self.whitespace, self.penalty, width)


def break_words(words: Iterable[Word], line_width: int) -> list[Word]:
    """Break words wider than ``line_width`` into smaller pieces.

    No hyphen is inserted; over-long words are simply cut.
    """
    shortened: list[Word] = []
    for word in words:
        if word.width() > line_width:
            shortened.extend(word.break_apart(line_width))
        else:
            shortened.append(word)
    return shortened