"""Small demonstrations of wrapping text."""

from __future__ import annotations

import argparse
import shutil
from typing import Iterator, Optional, Sequence

from wrapkit.fill import fill, wrap
from wrapkit.options import Options, WordSplitter

__all__ = ["hello_world", "layouts", "main", "render_layout", "termwidth_report"]

HELLO_TEXT = "Hello, welcome to a world of beautifully wrapped text!"
EXAMPLE_TEXT = (
    "Memory safety without garbage collection. "
    "Concurrency without data races. "
    "Zero-cost abstractions."
)


def hello_world() -> str:
    """Fill the greeting text at 30 columns."""
    return fill(HELLO_TEXT, 30)


def layouts(
    text: str = EXAMPLE_TEXT, min_width: int = 15, max_width: int = 60
) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(width, lines)`` for each width in ``[min_width, max_width)``
    whose wrapping differs from that of the previous width."""
    options = Options(0, word_splitter=WordSplitter.HYPHEN_SPLITTER)
    prev_lines: list[str] = []
    for width in range(min_width, max_width):
        lines = wrap(text, options.with_width(width))
        if lines != prev_lines:
            yield width, lines
            prev_lines = lines


def render_layout(width: int, lines: Sequence[str]) -> list[str]:
    """Draw wrapped lines in a box with a title showing the width."""
    title = f" Width: {width} "
    rendered = [f".{title:-^{width + 2}}."]
    rendered.extend(f"| {line:<{width}} |" for line in lines)
    return rendered


def termwidth_report(text: str = EXAMPLE_TEXT, width: Optional[int] = None) -> str:
    """Fill ``text`` at ``width`` columns, defaulting to the terminal width."""
    if width is None:
        width = shutil.get_terminal_size().columns
    return "\n".join(
        [
            f"Formatted without hyphenation in {width} columns:",
            "----",
            fill(text, width),
            "----",
        ]
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the demonstrations: hello, layout or termwidth."""
    parser = argparse.ArgumentParser(prog="wrapkit-demo", description=main.__doc__)
    parser.add_argument(
        "demo", nargs="?", default="hello", choices=["hello", "layout", "termwidth"]
    )
    parser.add_argument("--width", type=int, default=None, help="width for termwidth")
    args = parser.parse_args(argv)

    if args.demo == "hello":
        print(hello_world())
    elif args.demo == "layout":
        for width, lines in layouts():
            for row in render_layout(width, lines):
                print(row)
    else:
        print(termwidth_report(EXAMPLE_TEXT, args.width))
    return 0