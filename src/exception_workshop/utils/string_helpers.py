"""
String manipulation utilities.

Provides helpers for string processing.
"""

from typing import Union

from exception_workshop.errors import NullInputError


def reverse_text(text: Union[str, None]) -> str:
    """
    Reverse the characters of a string.

    Args:
        text: The string to reverse

    Returns:
        The characters of text in reverse order

    Raises:
        NullInputError: If text is None

    Examples:
        >>> reverse_text("strawberry")
        'yrrebwarts'
        >>> reverse_text("")
        ''
        >>> reverse_text(None)
        Traceback (most recent call last):
            ...
        exception_workshop.errors.NullInputError: text must not be None
    """
    if text is None:
        raise NullInputError("text must not be None", parameter="text")

    return text[::-1]
