"""
Operation catalog for exception-workshop.

Registers every utility operation with a Pydantic input model and the error
kinds it may fail with, and runs operations by name. run_operation() turns
an operation failure into an OperationResult tagged with its ErrorKind, for
callers (the CLI, the examples) that want a result value instead of an
exception.

Usage:
    from exception_workshop.catalog import run_operation

    result = run_operation("divide_numbers", {"dividend": 125, "divisor": 0})
    if not result.ok:
        print(result.error_kind)  # ErrorKind.DIVISION_BY_ZERO
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Literal

from pydantic import BaseModel, Field

from exception_workshop.errors import ErrorKind, WorkshopError
from exception_workshop.utils import (
    add_numbers,
    calculate_discount,
    divide_numbers,
    find_value_by_key,
    get_element,
    get_element_as_number,
    parse_int,
    perform_secure_operation,
    reverse_text,
    sum_collection_elements,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Input Models
# =============================================================================

class ReverseTextInput(BaseModel):
    text: str | None = Field(..., description="Text to reverse (null allowed)")


class CalculateDiscountInput(BaseModel):
    total_price: Decimal = Field(..., description="Price before the discount")
    discount: Decimal = Field(..., description="Discount in percent")


class GetElementInput(BaseModel):
    items: list[Any] = Field(..., description="Sequence to read from")
    index: int = Field(..., description="Zero-based position")


class PerformSecureOperationInput(BaseModel):
    is_logged_in: bool = Field(..., description="Whether the user is logged in")


class ParseIntInput(BaseModel):
    text: str = Field(..., description="Integer literal to parse")


class FindValueByKeyInput(BaseModel):
    values: dict[str, int] = Field(..., description="Mapping of names to integers")
    key: str = Field(..., description="Key to look up")


class AddNumbersInput(BaseModel):
    a: int
    b: int
    bits: Literal[8, 16, 32, 64] = Field(default=32, description="Integer width")


class DivideNumbersInput(BaseModel):
    dividend: int
    divisor: int


class SumCollectionElementsInput(BaseModel):
    items: list[int] | None = Field(..., description="Integers to sum (null allowed)")
    index: int = Field(..., description="Position that must be valid")


class GetElementAsNumberInput(BaseModel):
    values: dict[str, str] = Field(..., description="Mapping of names to integer literals")
    key: str = Field(..., description="Key to look up")


# =============================================================================
# Catalog
# =============================================================================

@dataclass(frozen=True)
class OperationSpec:
    """A registered operation and its contract."""

    name: str
    summary: str
    func: Callable[..., Any]
    input_model: type[BaseModel]
    error_kinds: tuple[ErrorKind, ...]
    width_parameter: str | None = None


class UnknownOperationError(LookupError):
    """Raised when an operation name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown operation: {name}. Available: {', '.join(CATALOG)}"
        )


class OperationResult(BaseModel):
    """Outcome of running an operation: a value or a tagged error."""

    operation: str
    ok: bool
    value: Any = None
    error_kind: ErrorKind | None = None
    message: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(cls, operation: str, value: Any) -> OperationResult:
        return cls(operation=operation, ok=True, value=value)

    @classmethod
    def failure(cls, operation: str, error: WorkshopError) -> OperationResult:
        return cls(
            operation=operation,
            ok=False,
            error_kind=error.kind,
            message=error.message,
            details=error.details,
        )


_SPECS = [
    OperationSpec(
        name="reverse_text",
        summary="Reverse the characters of a string",
        func=reverse_text,
        input_model=ReverseTextInput,
        error_kinds=(ErrorKind.NULL_INPUT,),
    ),
    OperationSpec(
        name="calculate_discount",
        summary="Apply a percentage discount to a price",
        func=calculate_discount,
        input_model=CalculateDiscountInput,
        error_kinds=(ErrorKind.INVALID_ARGUMENT,),
    ),
    OperationSpec(
        name="get_element",
        summary="Get the element at an index",
        func=get_element,
        input_model=GetElementInput,
        error_kinds=(ErrorKind.INDEX_OUT_OF_RANGE,),
    ),
    OperationSpec(
        name="perform_secure_operation",
        summary="Run an operation that requires a logged-in user",
        func=perform_secure_operation,
        input_model=PerformSecureOperationInput,
        error_kinds=(ErrorKind.INVALID_STATE,),
    ),
    OperationSpec(
        name="parse_int",
        summary="Parse text into a 32-bit integer",
        func=parse_int,
        input_model=ParseIntInput,
        error_kinds=(ErrorKind.FORMAT_ERROR,),
    ),
    OperationSpec(
        name="find_value_by_key",
        summary="Look up the integer stored under a key",
        func=find_value_by_key,
        input_model=FindValueByKeyInput,
        error_kinds=(ErrorKind.KEY_NOT_FOUND,),
    ),
    OperationSpec(
        name="add_numbers",
        summary="Add two fixed-width integers with overflow checking",
        func=add_numbers,
        input_model=AddNumbersInput,
        error_kinds=(ErrorKind.ARITHMETIC_OVERFLOW,),
        width_parameter="bits",
    ),
    OperationSpec(
        name="divide_numbers",
        summary="Divide two integers, truncating toward zero",
        func=divide_numbers,
        input_model=DivideNumbersInput,
        error_kinds=(ErrorKind.DIVISION_BY_ZERO,),
    ),
    OperationSpec(
        name="sum_collection_elements",
        summary="Sum a collection after checking an index against it",
        func=sum_collection_elements,
        input_model=SumCollectionElementsInput,
        error_kinds=(ErrorKind.NULL_INPUT, ErrorKind.INDEX_OUT_OF_RANGE),
    ),
    OperationSpec(
        name="get_element_as_number",
        summary="Look up text under a key and parse it as an integer",
        func=get_element_as_number,
        input_model=GetElementAsNumberInput,
        error_kinds=(ErrorKind.KEY_NOT_FOUND, ErrorKind.FORMAT_ERROR),
    ),
]

CATALOG: dict[str, OperationSpec] = {spec.name: spec for spec in _SPECS}


def list_operations() -> list[OperationSpec]:
    """Get every registered operation in catalog order."""
    return list(CATALOG.values())


def get_operation(name: str) -> OperationSpec:
    """
    Get a registered operation by name.

    Args:
        name: Operation name, snake_case or hyphenated (e.g. "parse-int")

    Returns:
        The matching OperationSpec

    Raises:
        UnknownOperationError: If no operation has that name
    """
    key = name.strip().lower().replace("-", "_")
    if key not in CATALOG:
        raise UnknownOperationError(name)
    return CATALOG[key]


def run_operation(
    name: str,
    payload: dict[str, Any],
    *,
    integer_bits: int | None = None,
) -> OperationResult:
    """
    Validate a payload and run an operation on it.

    Args:
        name: Operation name
        payload: Keyword arguments for the operation, validated against its
            input model
        integer_bits: Default integer width for operations that take one,
            used when the payload does not set it

    Returns:
        OperationResult with the value, or with the error kind and message
        when the operation fails with one of its declared error kinds

    Raises:
        UnknownOperationError: If no operation has that name
        pydantic.ValidationError: If payload does not match the input model
    """
    spec = get_operation(name)

    if spec.width_parameter and integer_bits is not None:
        payload = {spec.width_parameter: integer_bits, **payload}

    arguments = spec.input_model.model_validate(payload)
    logger.debug("Running %s with %r", spec.name, arguments)

    try:
        value = spec.func(**arguments.model_dump())
    except WorkshopError as e:
        if e.kind not in spec.error_kinds:
            raise
        logger.warning("%s failed with %s: %s", spec.name, e.kind.value, e)
        return OperationResult.failure(spec.name, e)

    logger.debug("%s returned %r", spec.name, value)
    return OperationResult.success(spec.name, value)
