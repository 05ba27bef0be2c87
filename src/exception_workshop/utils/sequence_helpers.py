"""
Sequence access utilities.

Provides bounds-checked element access. Unlike plain Python indexing,
negative indexes are rejected instead of counting from the end.
"""

from typing import Sequence, TypeVar, Union

from exception_workshop.errors import IndexOutOfRangeError, NullInputError

T = TypeVar("T")


def _check_index(index: int, length: int) -> None:
    if index < 0 or index >= length:
        raise IndexOutOfRangeError(
            f"Index {index} is out of range for a collection of length {length}",
            index=index,
            length=length,
        )


def get_element(items: Sequence[T], index: int) -> T:
    """
    Get the element at a position in a sequence.

    Args:
        items: The sequence to read from
        index: Zero-based position of the element

    Returns:
        The element at index

    Raises:
        IndexOutOfRangeError: If index is negative or not below len(items)

    Examples:
        >>> get_element([1, 2, 3], 1)
        2
        >>> get_element([1, 2, 3], -1)
        Traceback (most recent call last):
            ...
        exception_workshop.errors.IndexOutOfRangeError: Index -1 is out of range for a collection of length 3
    """
    _check_index(index, len(items))
    return items[index]


def sum_collection_elements(items: Union[Sequence[int], None], index: int) -> int:
    """
    Sum a collection after checking that index falls inside it.

    The index only guards the call: the result is the total of every
    element, not a prefix sum.

    Args:
        items: The integers to sum
        index: Position that must be valid for items

    Returns:
        The sum of all elements of items

    Raises:
        NullInputError: If items is None
        IndexOutOfRangeError: If index is negative or not below len(items)

    Examples:
        >>> sum_collection_elements([1, 2, 3, 4], 2)
        10
        >>> sum_collection_elements([1, 2, 3, 4], 6)
        Traceback (most recent call last):
            ...
        exception_workshop.errors.IndexOutOfRangeError: Index 6 is out of range for a collection of length 4
    """
    if items is None:
        raise NullInputError("collection must not be None", parameter="items")

    _check_index(index, len(items))
    return sum(items)
