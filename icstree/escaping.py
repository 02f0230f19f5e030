"""TEXT value escaping and parameter quoting for content lines."""

# Applied in order when writing a value; carriage returns are dropped.
_ESCAPE_SEQUENCE = (
    ("\\", "\\\\"),
    (";", "\\;"),
    (",", "\\,"),
    ("\n", "\\n"),
    ("\r", ""),
)

# Applied in order when reading a value. Each replacement runs over the whole
# string, so an escaped backslash followed by "n" is read as backslash + newline.
_UNESCAPE_SEQUENCE = (
    ("\\n", "\n"),
    ("\\N", "\n"),
    ("\\;", ";"),
    ("\\,", ","),
    ("\\\\", "\\"),
)

# Characters that force a parameter value to be written inside double quotes.
PARAMETER_QUOTE_CHARS = frozenset(":;, \t")


def escape_value(value: str) -> str:
    """Escape a property value for output.

    Args:
        value: Raw property value

    Returns:
        Value with backslash, semicolon, comma and newline escaped
    """
    if not value:
        return value

    for raw, escaped in _ESCAPE_SEQUENCE:
        value = value.replace(raw, escaped)
    return value


def unescape_value(value: str) -> str:
    """Reverse escape_value for a value read from a content line."""
    for escaped, raw in _UNESCAPE_SEQUENCE:
        value = value.replace(escaped, raw)
    return value


def needs_quoting(value: str) -> bool:
    """Check whether a parameter value must be wrapped in double quotes."""
    return any(char in PARAMETER_QUOTE_CHARS for char in value)


def quote_parameter_value(value: str) -> str:
    """Return the parameter value as it should appear on a content line."""
    if needs_quoting(value):
        return f'"{value}"'
    return value

