"""Adding and removing indentation from lines of text."""

from __future__ import annotations

__all__ = ["dedent", "indent"]


def _lines(s: str) -> list[str]:
    """Split ``s`` into lines on '\\n', dropping a trailing '\\r' from each.

    A final empty line after a terminating newline is not returned.
    """
    if not s:
        return []
    parts = s.split("\n")
    if s.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _is_blank(line: str) -> bool:
    return not line or line.isspace()


def indent(s: str, prefix: str) -> str:
    """Prefix every line of ``s`` with ``prefix``.

    Lines holding only whitespace get the prefix with its trailing
    whitespace removed, so empty lines stay free of trailing spaces.
    """
    if not s:
        return ""
    lines = s.split("\n")
    if s.endswith("\n"):
        lines.pop()
    trimmed_prefix = prefix.rstrip()
    result = "\n".join(
        (trimmed_prefix if _is_blank(line) else prefix) + line for line in lines
    )
    if s.endswith("\n"):
        result += "\n"
    return result


def _leading_whitespace(line: str) -> str | None:
    """Return the leading whitespace of ``line``, or None if it is blank."""
    for idx, ch in enumerate(line):
        if not ch.isspace():
            return line[:idx]
    return None


def _common_length(line: str, prefix: str) -> int:
    """Index of the first mismatch between ``line`` and ``prefix``.

    Returns ``len(line)`` when no mismatch occurs within the shorter one.
    """
    for idx, (a, b) in enumerate(zip(line, prefix)):
        if a != b:
            return idx
    return len(line)


def dedent(s: str) -> str:
    """Remove the whitespace common to the start of every non-blank line."""
    lines = _lines(s)
    remaining = iter(lines)

    prefix = ""
    for line in remaining:
        leading = _leading_whitespace(line)
        if leading is not None:
            prefix = leading
            break

    for line in remaining:
        idx = _common_length(line, prefix)
        if idx < len(line) and idx < len(prefix):
            prefix = line[:idx]

    result = "".join(
        (line[len(prefix):] if line.startswith(prefix) and not _is_blank(line) else "")
        + "\n"
        for line in lines
    )

    if result.endswith("\n") and not s.endswith("\n"):
        result = result[:-1]
    return result