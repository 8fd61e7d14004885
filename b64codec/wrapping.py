"""Line-break insertion and removal for encoded text."""

from __future__ import annotations

PEM_LINE_LENGTH = 64
MIME_LINE_LENGTH = 76
LINE_BREAK = "\n"


def insert_linebreaks(text: str, width: int) -> str:
    """Insert a line break after every `width` characters.

    Breaks are placed by raw character count and do not count toward the
    width. Text that ends exactly on a line boundary gets no trailing break.

    Args:
        text: The text to wrap.
        width: The number of characters per line.

    Returns:
        The wrapped text, or an empty string for empty input.

    Raises:
        ValueError: If width is not a positive integer.
    """
    if width <= 0:
        raise ValueError(f"line width must be positive, got {width}")

    return LINE_BREAK.join(text[pos : pos + width] for pos in range(0, len(text), width))


def strip_linebreaks(text: str) -> str:
    """Remove every line break from text."""
    return text.replace(LINE_BREAK, "")
