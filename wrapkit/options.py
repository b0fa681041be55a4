"""Options controlling how text is wrapped and filled."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from wrapkit.line_ending import LineEnding

__all__ = ["Options", "WordSplitter"]


class WordSplitter(Enum):
    """Strategy for finding places where a word may be split."""

    NO_HYPHENATION = "NoHyphenation"
    HYPHEN_SPLITTER = "HyphenSplitter"

    def split_points(self, word: str) -> list[int]:
        """Return the indices in ``word`` where it may be split.

        The hyphen splitter allows a split right after a hyphen that has
        an alphanumeric character on both sides.
        """
        if self is WordSplitter.NO_HYPHENATION:
            return []
        return [
            idx + 1
            for idx, ch in enumerate(word)
            if ch == "-"
            and idx > 0
            and word[idx - 1].isalnum()
            and idx + 1 < len(word)
            and word[idx + 1].isalnum()
        ]


@dataclass(frozen=True)
class Options:
    """Configuration for wrapping and filling text."""

    width: int
    line_ending: LineEnding = LineEnding.LF
    initial_indent: str = ""
    subsequent_indent: str = ""
    break_words: bool = True
    word_splitter: WordSplitter = WordSplitter.HYPHEN_SPLITTER

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise TypeError(f"width must be an int, not {type(self.width).__name__}")
        if self.width < 0:
            raise ValueError(f"width must not be negative: {self.width}")

    @classmethod
    def coerce(cls, width_or_options: Union[int, Options]) -> Options:
        """Turn a width or an existing Options value into Options."""
        if isinstance(width_or_options, Options):
            return width_or_options
        if isinstance(width_or_options, bool) or not isinstance(width_or_options, int):
            raise TypeError(
                "expected a width or Options, not "
                f"{type(width_or_options).__name__}"
            )
        return cls(width_or_options)

    def with_width(self, width: int) -> Options:
        """Return a copy with a different width."""
        return replace(self, width=width)

    def with_line_ending(self, line_ending: LineEnding) -> Options:
        """Return a copy that joins lines with ``line_ending``."""
        return replace(self, line_ending=line_ending)

    def with_initial_indent(self, initial_indent: str) -> Options:
        """Return a copy whose first output line starts with ``initial_indent``."""
        return replace(self, initial_indent=initial_indent)

    def with_subsequent_indent(self, subsequent_indent: str) -> Options:
        """Return a copy whose later output lines start with ``subsequent_indent``."""
        return replace(self, subsequent_indent=subsequent_indent)

    def with_break_words(self, break_words: bool) -> Options:
        """Return a copy that does or does not break over-long words."""
        return replace(self, break_words=break_words)

    def with_word_splitter(self, word_splitter: WordSplitter) -> Options:
        """Return a copy using ``word_splitter`` to split words."""
        return replace(self, word_splitter=word_splitter)