"""Measure the binary size of the wrapping demo under different feature sets.

The measurements are written as a Markdown table. With ``--update PATH``
the table replaces the section between the ``binary-sizes`` markers in
the given file.
"""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Optional, Sequence

from wrapkit.fill import fill
from wrapkit.indentation import indent

__all__ = ["find_marker", "format_row", "kb", "main", "quick_fill"]

_BINARY_PATH = "target/release/textwrap-binary-sizes-demo"
_FEATURES = (
    ("textwrap", "textwrap without default features"),
    ("smawk", "textwrap with smawk"),
    ("unicode-width", "textwrap with unicode-width"),
    ("unicode-linebreak", "textwrap with unicode-linebreak"),
)
_USAGE = "usage: make-table [--update PATH]"


def quick_fill(text: str, width: int) -> str:
    """Fill ``text`` the quick and dirty way.

    Words are separated by whitespace and measured by their UTF-8 size;
    no hyphenation or breaking of over-long words is done.
    """
    words = text.split()
    if not words:
        raise ValueError("cannot fill text without words")
    parts: list[str] = []
    line_width = 0
    for word in words:
        size = len(word.encode("utf-8"))
        if line_width + 1 + size > width:
            parts.append("\n")
            line_width = 0
        parts.append(word)
        parts.append(" ")
        line_width += size + 1
    # Drop the final space.
    return "".join(parts)[:-1]


def kb(size: int) -> str:
    """Format a size in bytes as whole kilobytes."""
    return f"{size // 1000} KB"


def format_row(label: str, size: str, delta: str) -> str:
    """Format one row of the Markdown size table."""
    return f"| {label:<40} | {size:>12} | {delta:>8} |"


def find_marker(path: str, marker: str, content: str) -> tuple[int, int]:
    """Locate the lines between the begin and end markers in ``content``.

    Returns ``(start, end)`` such that ``content[start:end]`` is the text
    after the begin marker's line and up to and including the newline
    before the end marker. Raises ValueError when a marker is missing.
    """
    start_marker = f"<!-- begin {marker} -->"
    end_marker = f"<!-- end {marker} -->"

    idx = content.find(start_marker)
    newline = content.find("\n", idx) if idx != -1 else -1
    if newline == -1:
        raise ValueError(f'Could not find "{start_marker}" in {path}')
    start = newline + 1

    idx = content.find(end_marker)
    newline = content.rfind("\n", 0, idx) if idx != -1 else -1
    if newline == -1:
        raise ValueError(f'Could not find "{end_marker}" in {path}')
    end = newline + 1

    return start, end


def _run(command: Sequence[str], what: str) -> None:
    completed = subprocess.run(list(command))
    if completed.returncode != 0:
        raise RuntimeError(f"failed to {what}: exit status {completed.returncode}")


def _compile(extra_args: Sequence[str]) -> int:
    """Build the demo in release mode, strip it and return its size."""
    _run(["cargo", "build", "--quiet", "--release", *extra_args], "compile")
    _run(["strip", _BINARY_PATH], "strip")
    try:
        return os.path.getsize(_BINARY_PATH)
    except OSError as err:
        raise RuntimeError(f"failed to read metadata for {_BINARY_PATH}: {err}") from err


def _rustc_version() -> str:
    try:
        completed = subprocess.run(["rustc", "--version"], capture_output=True)
    except OSError as err:
        raise RuntimeError(f"Could not determine rustc version: {err}") from err
    try:
        output = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as err:
        raise RuntimeError(f"Could convert output to UTF-8: {err}") from err
    fields = output.split()
    if len(fields) < 2:
        raise RuntimeError(f"Could not find rustc version in {output!r}")
    return fields[1]


def _make_table() -> str:
    rows = [
        format_row("Configuration", "Binary Size", "Delta"),
        format_row(":---", "---:", "---:"),
    ]
    base_size = _compile([])
    rows.append(format_row("quick-and-dirty implementation", kb(base_size), "— KB"))
    for feature, label in _FEATURES:
        size = _compile(["--features", feature])
        rows.append(format_row(label, kb(size), kb(size - base_size)))
    return "".join(row + "\n" for row in rows)


def _update(path: str) -> None:
    print(f"Updating {path}")
    with open(path, encoding="utf-8") as handle:
        content = handle.read()
    start, end = find_marker(path, "binary-sizes", content)
    intro = (
        f"With Rust {_rustc_version()}, the size impact of the above features "
        "on your binary is as follows:\n"
    )
    intro = fill(intro, 70 - len("//! "))
    table = _make_table()
    replacement = indent(f"\n{intro}\n{table}\n", "//! ")
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(content[:start] + replacement + content[end:])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the size table, or update it in a file with ``--update PATH``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) == 2 and args[0] == "--update":
            _update(args[1])
        elif not args:
            print(_make_table())
        else:
            print(_USAGE)
    except (OSError, RuntimeError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0