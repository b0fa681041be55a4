"""Line endings and splitting text into non-empty lines."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

__all__ = ["LineEnding", "non_empty_lines"]


class LineEnding(Enum):
    """The supported line endings."""

    CRLF = "\r\n"
    LF = "\n"

    def as_str(self) -> str:
        """The characters making up this line ending."""
        return self.value


def non_empty_lines(text: str) -> Iterator[tuple[str, Optional[LineEnding]]]:
    """Yield the non-empty lines of ``text`` with their line endings.

    A final line without a terminator is paired with None.
    """
    pos = 0
    while True:
        lf = text.find("\n", pos)
        if lf == -1:
            break
        length = lf - pos
        if length == 0 or (length == 1 and text[pos] == "\r"):
            pos = lf + 1
            continue
        if text[lf - 1] == "\r":
            yield text[pos:lf - 1], LineEnding.CRLF
        else:
            yield text[pos:lf], LineEnding.LF
        pos = lf + 1
    if pos < len(text):
        yield text[pos:], None