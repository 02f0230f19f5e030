"""Physical/logical line folding for calendar text.

Widths are counted in Python string characters (code points), not bytes, so a
fold may fall in the middle of a multi-byte UTF-8 sequence once encoded.
"""

import re
from collections.abc import Iterator

DEFAULT_FOLD_WIDTH = 75
CONTINUATION_CHARS = (" ", "\t")

_LINE_BREAK = re.compile(r"\r\n|\n")


def fold_line(line: str, width: int = DEFAULT_FOLD_WIDTH) -> list[str]:
    """Split one logical line into physical lines.

    The first physical line holds up to ``width`` characters. Every following
    physical line is a single space plus up to ``width - 1`` characters.

    Args:
        line: Logical line without terminator
        width: Maximum physical line length

    Returns:
        Physical lines, without terminators
    """
    if len(line) <= width:
        return [line]

    physical = [line[:width]]
    remaining = line[width:]
    chunk = width - 1
    while remaining:
        physical.append(" " + remaining[:chunk])
        remaining = remaining[chunk:]
    return physical


def iter_logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, logical_line) pairs from raw calendar text.

    A physical line starting with a space or tab continues the previous
    logical line; its first character is dropped and the rest appended as is.
    Logical lines that are empty or whitespace-only are skipped. Line numbers
    are 1-based and refer to the physical line where the logical line starts.
    """
    current: list[str] = []
    start = 0

    for number, physical in enumerate(_LINE_BREAK.split(text), start=1):
        if physical.startswith(CONTINUATION_CHARS):
            if not current:
                start = number
            current.append(physical[1:])
            continue

        if current:
            logical = "".join(current)
            if logical.strip():
                yield start, logical
        current = [physical]
        start = number

    if current:
        logical = "".join(current)
        if logical.strip():
            yield start, logical


def unfold_lines(text: str) -> list[str]:
    """Return the logical lines of raw calendar text."""
    return [line for _, line in iter_logical_lines(text)]
