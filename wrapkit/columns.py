"""Wrapping text into several side-by-side columns."""

from __future__ import annotations

from typing import Union

from wrapkit.core import display_width
from wrapkit.fill import wrap
from wrapkit.options import Options

__all__ = ["wrap_columns"]


def wrap_columns(
    text: str,
    columns: int,
    total_width_or_options: Union[int, Options],
    left_gap: str,
    middle_gap: str,
    right_gap: str,
) -> list[str]:
    """Wrap ``text`` into ``columns`` columns of a given total width.

    The gaps are placed before, between and after the columns. Each
    column is ``inner_width // columns`` wide (at least 1), and the last
    column absorbs any remaining width. The text flows down the first
    column before continuing in the next.
    """
    if columns <= 0:
        raise ValueError(f"columns must be positive: {columns}")

    options = Options.coerce(total_width_or_options)
    inner_width = max(options.width - display_width(left_gap), 0)
    inner_width = max(inner_width - display_width(right_gap), 0)
    inner_width = max(inner_width - display_width(middle_gap) * (columns - 1), 0)

    column_width = max(inner_width // columns, 1)
    last_column_padding = " " * (inner_width % column_width)
    wrapped = wrap(text, options.with_width(column_width))
    lines_per_column = -(-len(wrapped) // columns)

    lines: list[str] = []
    for line_no in range(lines_per_column):
        parts = [left_gap]
        for column_no in range(columns):
            pos = line_no + column_no * lines_per_column
            if pos < len(wrapped):
                column_line = wrapped[pos]
                parts.append(column_line)
                parts.append(" " * (column_width - display_width(column_line)))
            else:
                parts.append(" " * column_width)
            parts.append(last_column_padding if column_no == columns - 1 else middle_gap)
        parts.append(right_gap)
        lines.append("".join(parts))
    return lines