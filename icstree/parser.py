"""Calendar text parser producing a CalendarComponent tree."""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import ICSTreeSettings, get_settings
from .content_line import parse_content_line
from .exceptions import ICSContentTooLargeError, ICSParseError
from .folding import iter_logical_lines
from .models import CalendarComponent, ComponentType

logger = logging.getLogger(__name__)

ROOT_BEGIN = "BEGIN:VCALENDAR"
_BEGIN = "BEGIN:"
_END = "END:"


class ICSTreeParser:
    """Builds a component tree from calendar text.

    The builder keeps an explicit stack of open components instead of
    recursing, so nesting depth is bounded by ``max_nesting_depth`` rather
    than the interpreter's recursion limit. Only the first VCALENDAR is
    consumed; anything after its END line is ignored.
    """

    def __init__(self, settings: Optional[ICSTreeSettings] = None) -> None:
        """Initialize parser.

        Args:
            settings: Parser settings, defaults to the process-wide settings
        """
        self.settings = settings or get_settings()

    def parse(self, calendar_text: str) -> CalendarComponent:
        """Parse calendar text into a VCALENDAR tree.

        Args:
            calendar_text: Raw calendar text with CRLF or LF line endings

        Returns:
            Root VCALENDAR component

        Raises:
            ICSParseError: If the text is structurally malformed
            ICSContentTooLargeError: If the text exceeds the size limit
        """
        self._check_content_size(calendar_text)

        lines = iter_logical_lines(calendar_text)
        first = next(lines, None)
        if first is None:
            raise ICSParseError("Empty calendar data")

        line_number, line = first
        if line.upper() != ROOT_BEGIN:
            raise ICSParseError(
                f"Expected BEGIN:VCALENDAR but got: {line}", line_number=line_number, line=line
            )

        root = CalendarComponent.new(ComponentType.VCALENDAR)
        stack: list[CalendarComponent] = [root]
        logical_lines = 1

        for line_number, line in lines:
            logical_lines += 1
            current = stack[-1]
            keyword = line[: len(_BEGIN)].upper()

            if keyword == _BEGIN:
                stack.append(self._begin_component(line, line_number, len(stack)))

            elif keyword.startswith(_END):
                end_type = line[len(_END) :].upper()
                if end_type != current.component_type.value:
                    raise ICSParseError(
                        f"Mismatched END tag: expected END:{current.component_type.value} "
                        f"but got END:{end_type}",
                        line_number=line_number,
                        line=line,
                    )
                stack.pop()
                if not stack:
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug(
                            "Parsed calendar: %d logical lines, %d components",
                            logical_lines,
                            sum(1 for _ in root.walk()),
                        )
                    return root
                stack[-1].add_component(current)

            else:
                current.add_property(parse_content_line(line, line_number))

        raise ICSParseError(
            f"Unexpected end of input while parsing {stack[-1].component_type.value}"
        )

    def parse_file(self, file_path: Union[str, Path]) -> CalendarComponent:
        """Read a UTF-8 calendar file, with or without a byte order mark, and parse it."""
        content = Path(file_path).read_text(encoding="utf-8-sig")
        return self.parse(content)

    def _begin_component(self, line: str, line_number: int, depth: int) -> CalendarComponent:
        """Create the component opened by a BEGIN line at the given depth."""
        type_name = line[len(_BEGIN) :].upper()
        component_type = ComponentType.from_keyword(type_name)
        if component_type is None:
            raise ICSParseError(
                f"Unknown component type: {type_name}", line_number=line_number, line=line
            )

        if depth >= self.settings.max_nesting_depth:
            logger.warning(
                "Nesting depth limit %d exceeded at line %d",
                self.settings.max_nesting_depth,
                line_number,
            )
            raise ICSParseError(
                f"Maximum nesting depth {self.settings.max_nesting_depth} exceeded "
                f"while opening {type_name}",
                line_number=line_number,
                line=line,
            )

        return CalendarComponent.new(component_type)

    def _check_content_size(self, calendar_text: str) -> None:
        """Reject or warn about oversized input."""
        size = len(calendar_text.encode("utf-8"))

        if size > self.settings.max_content_bytes:
            logger.error(
                "Content too large: %d bytes exceeds %d limit",
                size,
                self.settings.max_content_bytes,
            )
            raise ICSContentTooLargeError(
                f"Content too large: {size} bytes exceeds {self.settings.max_content_bytes} limit"
            )

        if size > self.settings.content_size_warning_bytes:
            logger.warning(
                "Large calendar content detected: %d bytes (threshold: %d)",
                size,
                self.settings.content_size_warning_bytes,
            )


def parse(calendar_text: str, settings: Optional[ICSTreeSettings] = None) -> CalendarComponent:
    """Parse calendar text into a VCALENDAR tree."""
    return ICSTreeParser(settings).parse(calendar_text)


def parse_file(
    file_path: Union[str, Path], settings: Optional[ICSTreeSettings] = None
) -> CalendarComponent:
    """Parse a UTF-8 calendar file into a VCALENDAR tree."""
    return ICSTreeParser(settings).parse_file(file_path)
