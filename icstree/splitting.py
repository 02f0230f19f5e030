"""Quote-aware scanning helpers for content lines.

A double quote toggles "inside quotes" mode. While inside quotes the
separator is treated as ordinary text. Quotes cannot themselves be escaped.
"""

QUOTE = '"'


def find_unquoted(text: str, target: str) -> int:
    """Find the first occurrence of target that is not inside double quotes.

    Args:
        text: String to scan
        target: Single character to look for

    Returns:
        Index of the first unquoted occurrence, or -1 if there is none
    """
    in_quotes = False
    for index, char in enumerate(text):
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == target and not in_quotes:
            return index
    return -1


def split_unquoted(text: str, separator: str, keep_quotes: bool = True) -> list[str]:
    """Split text on every unquoted occurrence of separator.

    An empty final segment (text ending in the separator, or empty text) is
    not returned; empty segments in the middle are kept.

    Args:
        text: String to split
        separator: Single separator character
        keep_quotes: Keep the quote characters in the returned segments

    Returns:
        Ordered list of segments
    """
    segments: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in text:
        if char == QUOTE:
            in_quotes = not in_quotes
            if keep_quotes:
                current.append(char)
        elif char == separator and not in_quotes:
            segments.append("".join(current))
            current = []
        else:
            current.append(char)

    if current:
        segments.append("".join(current))

    return segments
