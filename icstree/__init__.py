"""icstree - calendar text parser, serializer and validator.

Converts line-oriented calendar text into a tree of CalendarComponent nodes
and back, with folding, escaping and quoted parameters handled on both sides.
"""

__version__ = "0.1.0"

from .config import ICSTreeSettings, get_settings
from .exceptions import ICSContentTooLargeError, ICSParseError, ICSTreeError
from .models import CalendarComponent, CalendarProperty, ComponentType, new_calendar
from .parser import ICSTreeParser, parse, parse_file
from .serializer import ICSTreeSerializer, serialize, serialize_to_file
from .validator import ICSTreeValidator, ValidationResult, validate

__all__ = [
    "CalendarComponent",
    "CalendarProperty",
    "ComponentType",
    "ICSContentTooLargeError",
    "ICSParseError",
    "ICSTreeError",
    "ICSTreeParser",
    "ICSTreeSerializer",
    "ICSTreeSettings",
    "ICSTreeValidator",
    "ValidationResult",
    "get_settings",
    "new_calendar",
    "parse",
    "parse_file",
    "serialize",
    "serialize_to_file",
    "validate",
]
