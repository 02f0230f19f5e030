"""Data models for the calendar component tree."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PRODID = "-//icstree//icstree//EN"


class ComponentType(str, Enum):
    """Closed set of component kinds that may appear between BEGIN and END."""

    VCALENDAR = "VCALENDAR"
    VEVENT = "VEVENT"
    VTODO = "VTODO"
    VJOURNAL = "VJOURNAL"
    VFREEBUSY = "VFREEBUSY"
    VTIMEZONE = "VTIMEZONE"
    STANDARD = "STANDARD"
    DAYLIGHT = "DAYLIGHT"
    VALARM = "VALARM"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional[ComponentType]:
        """Resolve a BEGIN/END keyword (case-insensitive), or None if unknown."""
        try:
            return cls(keyword.upper())
        except ValueError:
            return None


class CalendarProperty(BaseModel):
    """A single ``NAME;PARAM=VALUE:value`` record.

    ``value`` holds the unescaped text. ``parameters`` maps each uppercased
    parameter name to its values in source order; repeated assignments and
    comma-separated values end up in the same list.
    """

    name: str
    value: str = ""
    parameters: dict[str, list[str]] = Field(default_factory=dict)

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        return value.upper()

    @field_validator("parameters")
    @classmethod
    def _normalize_parameters(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        normalized: dict[str, list[str]] = {}
        for name, values in value.items():
            normalized.setdefault(name.upper(), []).extend(values)
        return normalized

    def add_parameter(self, name: str, value: str) -> None:
        """Append a value under a parameter name."""
        self.parameters.setdefault(name.upper(), []).append(value)

    def get_parameter(self, name: str) -> Optional[str]:
        """Get the first value of a parameter, or None if absent."""
        values = self.parameters.get(name.upper())
        return values[0] if values else None

    def get_parameters(self, name: str) -> list[str]:
        """Get all values of a parameter in source order."""
        return list(self.parameters.get(name.upper(), []))


class CalendarComponent(BaseModel):
    """A BEGIN/END delimited node of the calendar tree.

    Properties are grouped by uppercased name in first-seen order, each group
    keeping its occurrences in source order. Children are owned exclusively
    by their parent and kept in source order.
    """

    component_type: ComponentType = Field(frozen=True)
    properties: dict[str, list[CalendarProperty]] = Field(default_factory=dict)
    sub_components: list[CalendarComponent] = Field(default_factory=list)

    @field_validator("component_type", mode="before")
    @classmethod
    def _normalize_component_type(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, ComponentType):
            return value.upper()
        return value

    @field_validator("properties")
    @classmethod
    def _group_properties(
        cls, value: dict[str, list[CalendarProperty]]
    ) -> dict[str, list[CalendarProperty]]:
        grouped: dict[str, list[CalendarProperty]] = {}
        for props in value.values():
            for prop in props:
                grouped.setdefault(prop.name, []).append(prop)
        return grouped

    @classmethod
    def new(cls, component_type: Union[ComponentType, str]) -> CalendarComponent:
        """Create an empty component of the given type."""
        return cls(component_type=component_type)

    # Mutation is append-only.

    def add_property(self, prop: CalendarProperty) -> CalendarProperty:
        """Append a property after any existing ones of the same name."""
        self.properties.setdefault(prop.name, []).append(prop)
        return prop

    def add(
        self,
        name: str,
        value: str,
        parameters: Optional[dict[str, list[str]]] = None,
    ) -> CalendarProperty:
        """Create and append a property."""
        return self.add_property(
            CalendarProperty(name=name, value=value, parameters=parameters or {})
        )

    def add_component(self, component: CalendarComponent) -> CalendarComponent:
        """Append a child component."""
        self.sub_components.append(component)
        return component

    # Read-only queries.

    def get_property(self, name: str) -> Optional[CalendarProperty]:
        """Get the first property with the given name, or None."""
        props = self.properties.get(name.upper())
        return props[0] if props else None

    def get_properties(self, name: str) -> list[CalendarProperty]:
        """Get all properties with the given name in source order."""
        return list(self.properties.get(name.upper(), []))

    def get_value(self, name: str) -> Optional[str]:
        """Get the value of the first property with the given name."""
        prop = self.get_property(name)
        return prop.value if prop is not None else None

    def iter_properties(self) -> Iterator[CalendarProperty]:
        """Iterate over every property in serialization order."""
        for props in self.properties.values():
            yield from props

    def get_components(self, component_type: Union[ComponentType, str]) -> list[CalendarComponent]:
        """Get the direct children of the given type."""
        if not isinstance(component_type, ComponentType):
            component_type = ComponentType(component_type.upper())
        return [c for c in self.sub_components if c.component_type == component_type]

    def walk(
        self, component_type: Union[ComponentType, str, None] = None
    ) -> Iterator[CalendarComponent]:
        """Iterate over this component and all descendants, depth first.

        Args:
            component_type: Only yield components of this type when given
        """
        if component_type is not None and not isinstance(component_type, ComponentType):
            component_type = ComponentType(component_type.upper())

        stack: list[CalendarComponent] = [self]
        while stack:
            component = stack.pop()
            if component_type is None or component.component_type == component_type:
                yield component
            stack.extend(reversed(component.sub_components))

    @property
    def events(self) -> list[CalendarComponent]:
        return self.get_components(ComponentType.VEVENT)

    @property
    def todos(self) -> list[CalendarComponent]:
        return self.get_components(ComponentType.VTODO)

    @property
    def journals(self) -> list[CalendarComponent]:
        return self.get_components(ComponentType.VJOURNAL)

    @property
    def free_busy(self) -> list[CalendarComponent]:
        return self.get_components(ComponentType.VFREEBUSY)

    @property
    def timezones(self) -> list[CalendarComponent]:
        return self.get_components(ComponentType.VTIMEZONE)

    @property
    def alarms(self) -> list[CalendarComponent]:
        return self.get_components(ComponentType.VALARM)

    @property
    def standards(self) -> list[CalendarComponent]:
        return self.get_components(ComponentType.STANDARD)

    @property
    def daylights(self) -> list[CalendarComponent]:
        return self.get_components(ComponentType.DAYLIGHT)


def new_calendar(version: str = "2.0", prodid: str = DEFAULT_PRODID) -> CalendarComponent:
    """Create a VCALENDAR root with VERSION and PRODID set."""
    calendar = CalendarComponent.new(ComponentType.VCALENDAR)
    calendar.add("VERSION", version)
    calendar.add("PRODID", prodid)
    return calendar
