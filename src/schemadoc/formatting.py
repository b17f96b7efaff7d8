"""String helpers shared by the renderers."""

from __future__ import annotations

import os
import sys
from typing import Callable, TextIO

from rich.cells import cell_len

ELLIPSIS = "…"
MARKDOWN_SPECIAL = ("|", "<", ">")

# Returns the display width in columns, or None when there is no terminal.
WidthProvider = Callable[[], "int | None"]


def terminal_width(stream: TextIO | None = None) -> int | None:
    """Return the width of the terminal behind *stream* (stdout by default).

    Returns None if the stream is not an interactive terminal.
    """
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return None
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return None


def stream_width_provider(stream: TextIO | None = None) -> WidthProvider:
    """Build a width provider probing *stream*."""
    return lambda: terminal_width(stream)


def no_terminal() -> int | None:
    """Width provider for output that is never displayed on a terminal."""
    return None


def fixed_width(width: int) -> WidthProvider:
    """Build a width provider always reporting *width* columns."""
    return lambda: width


def terminal_trim(message: str, width_provider: WidthProvider = terminal_width) -> str:
    """Shorten *message* to fit in half of the terminal width.

    The message is returned unchanged when no terminal width is available.
    """
    width = width_provider()
    if width is None:
        return message

    size = width // 2
    if len(message) <= size:
        return message
    if size < 1:
        return ""
    return message[: size - 1] + ELLIPSIS


def md_escape(text: str) -> str:
    """Escape characters with a meaning in Markdown tables."""
    for char in MARKDOWN_SPECIAL:
        text = text.replace(char, "\\" + char)
    return text


def align_columns(rows: list[list[str]], padding: int = 4, indent: str = "") -> list[str]:
    """Align cells in columns.

    Every column but the last is padded to its widest cell plus *padding*.
    Widths are measured in terminal cells.
    """
    if not rows:
        return []
    columns = max(len(row) for row in rows)
    widths = [0] * columns
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            widths[i] = max(widths[i], cell_len(cell))

    lines = []
    for row in rows:
        parts = [
            cell + " " * (widths[i] + padding - cell_len(cell))
            for i, cell in enumerate(row[:-1])
        ]
        parts.append(row[-1])
        lines.append(indent + "".join(parts))
    return lines
