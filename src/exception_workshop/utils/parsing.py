"""
Integer parsing utilities.

Parses text into 32-bit signed integers using a strict literal grammar:
optional surrounding whitespace, an optional sign and ASCII digits only.
"""

import re
from typing import Any

from exception_workshop.errors import FormatError
from exception_workshop.utils.calculator import int_range

# Python's int() also accepts underscores and non-ASCII digits; this does not
_INTEGER_LITERAL = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def parse_int(text: Any) -> int:
    """
    Parse text into a 32-bit signed integer.

    Args:
        text: The text to parse

    Returns:
        The parsed integer

    Raises:
        FormatError: If text is not a string holding a valid integer literal
            within the 32-bit signed range

    Examples:
        >>> parse_int("619")
        619
        >>> parse_int("  -42 ")
        -42
        >>> parse_int("some string")
        Traceback (most recent call last):
            ...
        exception_workshop.errors.FormatError: 'some string' is not a valid integer
    """
    if not isinstance(text, str) or not _INTEGER_LITERAL.fullmatch(text):
        raise FormatError(f"{text!r} is not a valid integer", text=text)

    value = int(text)
    low, high = int_range(32)
    if not low <= value <= high:
        raise FormatError(
            f"{text!r} is outside the 32-bit integer range", text=text
        )
    return value
