"""ICS tree exceptions for error handling."""

from typing import Optional


class ICSTreeError(Exception):
    """Base exception for icstree errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ICSParseError(ICSTreeError):
    """Exception raised when calendar text is structurally malformed.

    Parsing never recovers a partial tree: any instance of this error means
    the whole input was rejected.
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        super().__init__(message)
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"{self.message} (line {self.line_number})"
        return self.message


class ICSContentTooLargeError(ICSParseError):
    """Raised when calendar content exceeds the configured size limit."""
