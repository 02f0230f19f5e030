"""Serializer writing a CalendarComponent tree back to calendar text."""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import ICSTreeSettings, get_settings
from .content_line import format_content_line
from .folding import fold_line
from .models import CalendarComponent

logger = logging.getLogger(__name__)


class ICSTreeSerializer:
    """Renders a component tree as folded content lines.

    Mirrors the parser: BEGIN, then every property grouped by name in
    first-seen order, then children, then END. Each logical line is folded
    before the line terminator is appended.
    """

    def __init__(self, settings: Optional[ICSTreeSettings] = None) -> None:
        self.settings = settings or get_settings()

    def serialize(self, calendar: CalendarComponent) -> str:
        """Serialize a component tree to calendar text.

        Args:
            calendar: Root component, normally a VCALENDAR

        Returns:
            Calendar text, every line terminated
        """
        out: list[str] = []
        # (component, entering) pairs; children are pushed in reverse.
        stack: list[tuple[CalendarComponent, bool]] = [(calendar, True)]

        while stack:
            component, entering = stack.pop()
            if not entering:
                self._write_line(out, f"END:{component.component_type.value}")
                continue

            self._write_line(out, f"BEGIN:{component.component_type.value}")
            for prop in component.iter_properties():
                self._write_line(out, format_content_line(prop))

            stack.append((component, False))
            stack.extend((child, True) for child in reversed(component.sub_components))

        logger.debug("Serialized %s to %d physical lines", calendar.component_type.value, len(out))
        return "".join(out)

    def serialize_to_file(self, calendar: CalendarComponent, file_path: Union[str, Path]) -> None:
        """Serialize a component tree and write it as UTF-8."""
        content = self.serialize(calendar)
        with Path(file_path).open("w", encoding="utf-8", newline="") as f:
            f.write(content)

    def _write_line(self, out: list[str], line: str) -> None:
        for physical in fold_line(line, self.settings.fold_width):
            out.append(physical + self.settings.line_ending)


def serialize(calendar: CalendarComponent, settings: Optional[ICSTreeSettings] = None) -> str:
    """Serialize a component tree to calendar text."""
    return ICSTreeSerializer(settings).serialize(calendar)


def serialize_to_file(
    calendar: CalendarComponent,
    file_path: Union[str, Path],
    settings: Optional[ICSTreeSettings] = None,
) -> None:
    """Serialize a component tree into a UTF-8 file."""
    ICSTreeSerializer(settings).serialize_to_file(calendar, file_path)
