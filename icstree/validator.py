"""Semantic checks over a parsed calendar tree.

The parser only enforces structure. This module checks required
properties, enumerated values and value shapes, reporting problems instead
of raising.
"""

import logging
import re
from typing import Optional

from pydantic import BaseModel, Field

from .models import CalendarComponent, CalendarProperty, ComponentType

logger = logging.getLogger(__name__)

DATE_TIME_PATTERN = re.compile(r"^\d{8}T\d{6}Z?$")
DATE_PATTERN = re.compile(r"^\d{8}$")
DURATION_PATTERN = re.compile(r"^[+-]?P(\d+W|(\d+D)?(T(\d+H)?(\d+M)?(\d+S)?)?)$")
UTC_OFFSET_PATTERN = re.compile(r"^[+-]\d{4}(\d{2})?$")
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)

EVENT_STATUSES = ("TENTATIVE", "CONFIRMED", "CANCELLED")
TODO_STATUSES = ("NEEDS-ACTION", "COMPLETED", "IN-PROCESS", "CANCELLED")
ALARM_ACTIONS = ("AUDIO", "DISPLAY", "EMAIL")


class ValidationResult(BaseModel):
    """Result of calendar validation."""

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if validation found no errors."""
        return not self.errors

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def get_summary(self) -> str:
        """Get a human-readable summary of the result."""
        lines = [
            f"Validation Result: {'VALID' if self.is_valid else 'INVALID'}",
            f"Errors: {len(self.errors)}",
            f"Warnings: {len(self.warnings)}",
            "",
        ]
        if self.errors:
            lines.append("Errors:")
            lines.extend(f"  - {error}" for error in self.errors)
            lines.append("")
        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)
        return "\n".join(lines) + "\n"


class ICSTreeValidator:
    """Validates a VCALENDAR tree against the calendar format's rules."""

    def validate(self, calendar: CalendarComponent) -> ValidationResult:
        """Validate a calendar tree.

        Args:
            calendar: Root VCALENDAR component

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult()
        self._validate_calendar(calendar, result)
        logger.debug(
            "Validated calendar: %d errors, %d warnings", len(result.errors), len(result.warnings)
        )
        return result

    def _validate_calendar(self, calendar: CalendarComponent, result: ValidationResult) -> None:
        self._require(calendar, "VERSION", result)
        self._require(calendar, "PRODID", result)

        version = calendar.get_property("VERSION")
        if version is not None and version.value != "2.0":
            result.add_error(f"VERSION must be 2.0, found: {version.value}")

        calscale = calendar.get_property("CALSCALE")
        if calscale is not None and calscale.value and calscale.value.upper() != "GREGORIAN":
            result.add_warning(f"CALSCALE is not GREGORIAN: {calscale.value}")

        for event in calendar.events:
            self._validate_event(event, result)
        for todo in calendar.todos:
            self._validate_todo(todo, result)
        for journal in calendar.journals:
            self._validate_journal(journal, result)
        for free_busy in calendar.free_busy:
            self._validate_free_busy(free_busy, result)
        for timezone in calendar.timezones:
            self._validate_timezone(timezone, result)

    def _validate_identity(self, component: CalendarComponent, result: ValidationResult) -> None:
        """Checks shared by VEVENT, VTODO, VJOURNAL and VFREEBUSY."""
        name = component.component_type.value
        self._require(component, "UID", result)
        self._require(component, "DTSTAMP", result)

        uid = component.get_property("UID")
        if uid is not None and not uid.value.strip():
            result.add_error(f"{name} UID cannot be empty")

        self._check_date_time(component.get_property("DTSTAMP"), "DTSTAMP", result)

    def _validate_event(self, event: CalendarComponent, result: ValidationResult) -> None:
        self._validate_identity(event, result)
        self._check_date_time(event.get_property("DTSTART"), "DTSTART", result)

        dtend = event.get_property("DTEND")
        duration = event.get_property("DURATION")
        if dtend is not None and duration is not None:
            result.add_error("VEVENT cannot have both DTEND and DURATION")

        self._check_date_time(dtend, "DTEND", result)

        if duration is not None and not DURATION_PATTERN.match(duration.value):
            result.add_error(
                f"Invalid DURATION format: {duration.value}. "
                "Expected ISO 8601 duration format (e.g., P1D, PT1H30M)"
            )

        self._check_enum(event, "STATUS", EVENT_STATUSES, result)

        for alarm in event.alarms:
            self._validate_alarm(alarm, result)

    def _validate_todo(self, todo: CalendarComponent, result: ValidationResult) -> None:
        self._validate_identity(todo, result)
        self._check_enum(todo, "STATUS", TODO_STATUSES, result)

        percent = todo.get_property("PERCENT-COMPLETE")
        if percent is not None and not _is_percentage(percent.value):
            result.add_error(
                f"Invalid PERCENT-COMPLETE: {percent.value}. "
                "Must be an integer between 0 and 100"
            )

        self._check_date_time(todo.get_property("COMPLETED"), "COMPLETED", result)
        self._check_date_time(todo.get_property("DUE"), "DUE", result)

        for alarm in todo.alarms:
            self._validate_alarm(alarm, result)

    def _validate_journal(self, journal: CalendarComponent, result: ValidationResult) -> None:
        self._validate_identity(journal, result)

    def _validate_free_busy(self, free_busy: CalendarComponent, result: ValidationResult) -> None:
        self._validate_identity(free_busy, result)
        self._check_date_time(free_busy.get_property("DTSTART"), "DTSTART", result)
        self._check_date_time(free_busy.get_property("DTEND"), "DTEND", result)

    def _validate_timezone(self, timezone: CalendarComponent, result: ValidationResult) -> None:
        self._require(timezone, "TZID", result)

        observances = timezone.standards + timezone.daylights
        if not observances:
            result.add_error("VTIMEZONE must contain at least one STANDARD or DAYLIGHT component")

        for observance in observances:
            for name in ("DTSTART", "TZOFFSETFROM", "TZOFFSETTO"):
                self._require(observance, name, result)
            self._check_date_time(observance.get_property("DTSTART"), "DTSTART", result)
            for name in ("TZOFFSETFROM", "TZOFFSETTO"):
                offset = observance.get_property(name)
                if offset is not None and not UTC_OFFSET_PATTERN.match(offset.value):
                    result.add_error(
                        f"Invalid UTC offset format for {name}: {offset.value}. "
                        "Expected +/-HHMM or +/-HHMMSS"
                    )

    def _validate_alarm(self, alarm: CalendarComponent, result: ValidationResult) -> None:
        self._require(alarm, "ACTION", result)

        action = alarm.get_property("ACTION")
        if action is not None:
            action_value = action.value.upper()
            if action_value not in ALARM_ACTIONS:
                result.add_warning(f"Unknown VALARM ACTION: {action.value}")

            if action_value in ("DISPLAY", "EMAIL"):
                self._require(alarm, "DESCRIPTION", result, f"VALARM with ACTION={action_value}")
            if action_value == "EMAIL":
                self._require(alarm, "SUMMARY", result, "VALARM with ACTION=EMAIL")

        self._require(alarm, "TRIGGER", result)

    @staticmethod
    def _require(
        component: CalendarComponent,
        property_name: str,
        result: ValidationResult,
        label: Optional[str] = None,
    ) -> None:
        if component.get_property(property_name) is None:
            name = label or component.component_type.value
            result.add_error(f"{name} is missing required property: {property_name}")

    @staticmethod
    def _check_date_time(
        prop: Optional[CalendarProperty], property_name: str, result: ValidationResult
    ) -> None:
        if prop is None:
            return
        if not (DATE_TIME_PATTERN.match(prop.value) or DATE_PATTERN.match(prop.value)):
            result.add_error(
                f"Invalid date/time format for {property_name}: {prop.value}. "
                "Expected YYYYMMDD or YYYYMMDDTHHMMSS[Z]"
            )

    @staticmethod
    def _check_enum(
        component: CalendarComponent,
        property_name: str,
        allowed: tuple[str, ...],
        result: ValidationResult,
    ) -> None:
        prop = component.get_property(property_name)
        if prop is not None and prop.value.upper() not in allowed:
            result.add_error(
                f"Invalid {component.component_type.value} {property_name}: {prop.value}. "
                f"Must be one of: {', '.join(allowed)}"
            )


def _is_percentage(value: str) -> bool:
    if not INTEGER_PATTERN.fullmatch(value):
        return False
    return 0 <= int(value) <= 100


def validate(calendar: CalendarComponent) -> ValidationResult:
    """Validate a calendar tree."""
    return ICSTreeValidator().validate(calendar)
