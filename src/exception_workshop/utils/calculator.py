"""
Calculator utility module.

Provides checked arithmetic over fixed-width signed integers and decimal
discount calculation, signalling failures through the workshop error kinds
instead of wrapping around or returning sentinels.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from exception_workshop.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    InvalidArgumentError,
)

DecimalLike = Union[Decimal, int, float, str]

SUPPORTED_BITS = (8, 16, 32, 64)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def int_range(bits: int = 32) -> tuple[int, int]:
    """
    Get the inclusive range of a signed integer of the given width.

    Args:
        bits: Integer width in bits (8, 16, 32 or 64)

    Returns:
        Tuple of (minimum, maximum) representable values

    Raises:
        ValueError: If bits is not a supported width

    Examples:
        >>> int_range(8)
        (-128, 127)
        >>> int_range() == (INT32_MIN, INT32_MAX)
        True
    """
    if bits not in SUPPORTED_BITS:
        raise ValueError(
            f"Unsupported integer width: {bits}. Use one of {SUPPORTED_BITS}"
        )
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _to_decimal(value: DecimalLike, parameter: str) -> Decimal:
    try:
        if isinstance(value, float):
            # Go through str so 0.1 stays 0.1 rather than its binary expansion
            result = Decimal(str(value))
        else:
            result = Decimal(value)
    except InvalidOperation as e:
        raise InvalidArgumentError(
            f"{parameter} is not a number: {value!r}",
            parameter=parameter,
            value=str(value),
        ) from e

    # NaN would make every later comparison signal InvalidOperation
    if not result.is_finite():
        raise InvalidArgumentError(
            f"{parameter} must be a finite number, got {result}",
            parameter=parameter,
            value=str(result),
        )
    return result


def calculate_discount(total_price: DecimalLike, discount: DecimalLike) -> Decimal:
    """
    Apply a percentage discount to a price.

    Args:
        total_price: Price before the discount (must not be negative)
        discount: Discount in percent, from 0 to 100 inclusive

    Returns:
        total_price * (1 - discount / 100) as a Decimal

    Raises:
        InvalidArgumentError: If discount is outside 0..100 or total_price
            is negative, or either value is not a finite number

    Examples:
        >>> calculate_discount(1000, 54)
        Decimal('460.00')
        >>> calculate_discount(100, 110)
        Traceback (most recent call last):
            ...
        exception_workshop.errors.InvalidArgumentError: Discount must be between 0 and 100, got 110
    """
    price = _to_decimal(total_price, "total_price")
    percent = _to_decimal(discount, "discount")

    if percent < 0 or percent > 100:
        raise InvalidArgumentError(
            f"Discount must be between 0 and 100, got {percent}",
            parameter="discount",
            value=str(percent),
        )
    if price < 0:
        raise InvalidArgumentError(
            f"Total price must not be negative, got {price}",
            parameter="total_price",
            value=str(price),
        )

    return price * (1 - percent / 100)


def add_numbers(a: int, b: int, *, bits: int = 32) -> int:
    """
    Add two fixed-width integers with overflow checking.

    Args:
        a: The first number
        b: The second number
        bits: Width of the integer type (default: 32)

    Returns:
        The sum of a and b

    Raises:
        ArithmeticOverflowError: If an operand or the exact sum does not
            fit in the signed range of the given width

    Examples:
        >>> add_numbers(619, 523)
        1142
        >>> add_numbers(100, 100, bits=8)
        Traceback (most recent call last):
            ...
        exception_workshop.errors.ArithmeticOverflowError: 100 + 100 overflows a 8-bit integer
    """
    low, high = int_range(bits)
    for operand in (a, b):
        if not low <= operand <= high:
            raise ArithmeticOverflowError(
                f"{operand} does not fit in a {bits}-bit integer",
                operands=[a, b],
                bits=bits,
            )

    result = a + b
    if not low <= result <= high:
        raise ArithmeticOverflowError(
            f"{a} + {b} overflows a {bits}-bit integer",
            operands=[a, b],
            bits=bits,
        )
    return result


def divide_numbers(dividend: int, divisor: int) -> int:
    """
    Divide two integers, truncating the quotient toward zero.

    Args:
        dividend: The number to be divided
        divisor: The number to divide by

    Returns:
        The integer quotient, truncated toward zero

    Raises:
        DivisionByZeroError: If divisor is zero

    Examples:
        >>> divide_numbers(125, 5)
        25
        >>> divide_numbers(-7, 2)
        -3
        >>> divide_numbers(125, 0)
        Traceback (most recent call last):
            ...
        exception_workshop.errors.DivisionByZeroError: Cannot divide by zero
    """
    if divisor == 0:
        raise DivisionByZeroError("Cannot divide by zero", dividend=dividend)

    # Floor division rounds toward negative infinity; truncate on magnitudes
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient
