"""Command-line entry for icstree.

Parses a calendar file and prints it back out, as JSON, or as a
validation report.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from .config import get_settings
from .exceptions import ICSParseError
from .logging_config import configure_logging
from .parser import ICSTreeParser
from .serializer import ICSTreeSerializer
from .validator import ICSTreeValidator

logger = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for icstree CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="icstree",
        description="icstree - parse, re-serialize and validate calendar files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m icstree meeting.ics               # Print normalized calendar text
  python -m icstree meeting.ics --json        # Print the component tree as JSON
  python -m icstree meeting.ics --validate    # Print a validation report
  cat meeting.ics | python -m icstree -       # Read from stdin
        """,
    )

    parser.add_argument("file", metavar="FILE", help="Calendar file to read, or - for stdin")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the parsed tree as JSON")
    output.add_argument(
        "--validate", action="store_true", help="Validate the calendar and print a summary"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


def _read_input(file_arg: str) -> str:
    if file_arg == "-":
        return sys.stdin.read()
    with open(file_arg, encoding="utf-8-sig") as f:
        return f.read()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the icstree CLI.

    Returns:
        Process exit status: 0 on success, 1 on parse failure or invalid calendar
    """
    args = _create_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(debug_mode=args.debug or settings.debug, log_level=settings.log_level)

    try:
        content = _read_input(args.file)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return 1

    try:
        calendar = ICSTreeParser(settings).parse(content)
    except ICSParseError as exc:
        logger.error("Failed to parse %s: %s", args.file, exc)
        return 1

    if args.json:
        print(json.dumps(calendar.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return 0

    if args.validate:
        result = ICSTreeValidator().validate(calendar)
        print(result.get_summary(), end="")
        return 0 if result.is_valid else 1

    sys.stdout.write(ICSTreeSerializer(settings).serialize(calendar))
    return 0


if __name__ == "__main__":
    sys.exit(main())
