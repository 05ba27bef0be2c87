"""
Mapping lookup utilities.

Provides key lookups that fail with KeyNotFoundError, and lookups that
additionally parse the stored text as an integer.
"""

from typing import Mapping

from exception_workshop.errors import KeyNotFoundError
from exception_workshop.utils.parsing import parse_int


def find_value_by_key(values: Mapping[str, int], key: str) -> int:
    """
    Look up the value stored under a key.

    Args:
        values: Mapping of names to integers
        key: The key to look up

    Returns:
        The value stored under key

    Raises:
        KeyNotFoundError: If key is not present in values

    Examples:
        >>> find_value_by_key({"Ani": 20, "Martin": 25}, "Martin")
        25
    """
    try:
        return values[key]
    except KeyError:
        raise KeyNotFoundError(f"Key {key!r} was not found", key=key) from None


def get_element_as_number(values: Mapping[str, str], key: str) -> int:
    """
    Look up the text stored under a key and parse it as an integer.

    Args:
        values: Mapping of names to integer literals
        key: The key to look up

    Returns:
        The integer parsed from the value stored under key

    Raises:
        KeyNotFoundError: If key is not present in values
        FormatError: If the stored value is not a valid integer literal

    Examples:
        >>> get_element_as_number({"Ani": "20", "Martin": "25"}, "Ani")
        20
    """
    if key not in values:
        raise KeyNotFoundError(f"Key {key!r} was not found", key=key)

    return parse_int(values[key])
