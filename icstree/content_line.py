"""Content line tokenizer and parameter parser.

Turns one unfolded logical line into a CalendarProperty and renders a
CalendarProperty back into a logical line. Purely syntactic: nothing here
knows which properties or parameters are meaningful.
"""

from typing import Optional

from .escaping import escape_value, quote_parameter_value, unescape_value
from .exceptions import ICSParseError
from .models import CalendarProperty
from .splitting import find_unquoted, split_unquoted


def parse_parameters(
    params_part: str,
    prop: CalendarProperty,
    line_number: Optional[int] = None,
) -> None:
    """Parse a parameter block and append each value to prop.

    Repeated ``NAME=`` assignments and comma-separated values inside one
    assignment both append to the same ordered list for that name. Empty
    values (``NAME=``, ``NAME=""`` or ``a,,b``) are skipped.

    Args:
        params_part: Text after the first unquoted ';' and before the ':'
        prop: Property that receives the parameters
        line_number: Source line, used for error context

    Raises:
        ICSParseError: If an assignment has no '='
    """
    for assignment in split_unquoted(params_part, ";"):
        equals_index = assignment.find("=")
        if equals_index == -1:
            raise ICSParseError(
                f"Invalid parameter (missing equals): {assignment}",
                line_number=line_number,
                line=assignment,
            )

        name = assignment[:equals_index].upper()
        # Splitting before dequoting keeps commas inside quoted values intact.
        for value in split_unquoted(assignment[equals_index + 1 :], ",", keep_quotes=False):
            if value:
                prop.add_parameter(name, value)


def parse_content_line(line: str, line_number: Optional[int] = None) -> CalendarProperty:
    """Tokenize one logical line into a property.

    Args:
        line: Unfolded, non-empty content line
        line_number: Source line, used for error context

    Returns:
        Property with uppercased name, parsed parameters and unescaped value

    Raises:
        ICSParseError: If the line has no unquoted ':' or a parameter lacks '='
    """
    colon_index = find_unquoted(line, ":")
    if colon_index == -1:
        raise ICSParseError(
            f"Invalid property line (missing colon): {line}",
            line_number=line_number,
            line=line,
        )

    name_and_params = line[:colon_index]
    value = unescape_value(line[colon_index + 1 :])

    semicolon_index = find_unquoted(name_and_params, ";")
    if semicolon_index == -1:
        return CalendarProperty(name=name_and_params, value=value)

    prop = CalendarProperty(name=name_and_params[:semicolon_index], value=value)
    parse_parameters(name_and_params[semicolon_index + 1 :], prop, line_number)
    return prop


def format_content_line(prop: CalendarProperty) -> str:
    """Render a property as an unfolded logical line.

    Every parameter value is written as its own ``;NAME=VALUE`` assignment,
    never comma-joined.
    """
    parts = [prop.name]
    for name, values in prop.parameters.items():
        for value in values:
            parts.append(f";{name}={quote_parameter_value(value)}")
    parts.append(":")
    parts.append(escape_value(prop.value))
    return "".join(parts)
