"""
Tests for the operation catalog.

Verifies that:
1. Every operation is registered with its declared error kinds
2. run_operation returns tagged results instead of raising
3. Input validation and unknown names surface as errors
"""

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from exception_workshop.catalog import (
    CATALOG,
    OperationResult,
    OperationSpec,
    UnknownOperationError,
    get_operation,
    list_operations,
    run_operation,
)
from exception_workshop.errors import ErrorKind, FormatError

from fixtures.sample_inputs import AGES, AGE_TEXTS_WITH_WORDS, FOUR_NUMBERS


class TestCatalogRegistry:
    """Test catalog contents and lookup."""

    def test_all_operations_registered(self):
        assert list(CATALOG) == [
            "reverse_text",
            "calculate_discount",
            "get_element",
            "perform_secure_operation",
            "parse_int",
            "find_value_by_key",
            "add_numbers",
            "divide_numbers",
            "sum_collection_elements",
            "get_element_as_number",
        ]
        assert [spec.name for spec in list_operations()] == list(CATALOG)

    def test_only_two_operations_have_two_error_kinds(self):
        multi = {spec.name for spec in list_operations() if len(spec.error_kinds) > 1}

        assert multi == {"sum_collection_elements", "get_element_as_number"}

    def test_hyphenated_names(self):
        assert get_operation("parse-int") is CATALOG["parse_int"]
        assert get_operation(" Divide-Numbers ") is CATALOG["divide_numbers"]

    def test_unknown_operation(self):
        with pytest.raises(UnknownOperationError, match="Unknown operation: modulo"):
            get_operation("modulo")

        assert issubclass(UnknownOperationError, LookupError)


class TestRunOperation:
    """Test running operations through the catalog."""

    def test_success_result(self):
        result = run_operation("reverse_text", {"text": "strawberry"})

        assert result == OperationResult(
            operation="reverse_text", ok=True, value="yrrebwarts"
        )

    def test_failure_result_is_tagged(self):
        result = run_operation("divide_numbers", {"dividend": 125, "divisor": 0})

        assert result.ok is False
        assert result.value is None
        assert result.error_kind is ErrorKind.DIVISION_BY_ZERO
        assert result.message == "Cannot divide by zero"
        assert result.details == {"dividend": 125}

    def test_null_input_through_payload(self):
        result = run_operation("sum_collection_elements", {"items": None, "index": 2})

        assert result.error_kind is ErrorKind.NULL_INPUT

    def test_decimal_payload(self):
        result = run_operation(
            "calculate_discount", {"total_price": "1000", "discount": "54"}
        )

        assert result.value == Decimal(460)

    def test_mapping_payloads(self):
        assert run_operation("find_value_by_key", {"values": AGES, "key": "Martin"}).value == 25

        result = run_operation(
            "get_element_as_number", {"values": AGE_TEXTS_WITH_WORDS, "key": "Martin"}
        )
        assert result.error_kind is ErrorKind.FORMAT_ERROR

    def test_sum_collection_elements(self):
        result = run_operation("sum_collection_elements", {"items": FOUR_NUMBERS, "index": 2})

        assert result.value == 10

    def test_integer_bits_default(self):
        result = run_operation("add_numbers", {"a": 100, "b": 100}, integer_bits=8)
        assert result.error_kind is ErrorKind.ARITHMETIC_OVERFLOW

        # Explicit payload width wins over the default
        result = run_operation("add_numbers", {"a": 100, "b": 100, "bits": 16}, integer_bits=8)
        assert result.value == 200

    def test_operand_outside_width_is_tagged(self):
        result = run_operation("add_numbers", {"a": 300, "b": -200}, integer_bits=8)

        assert result.error_kind is ErrorKind.ARITHMETIC_OVERFLOW

    def test_integer_bits_ignored_for_other_operations(self):
        result = run_operation("divide_numbers", {"dividend": 10, "divisor": 3}, integer_bits=8)

        assert result.value == 3

    def test_invalid_payload_raises_validation_error(self):
        with pytest.raises(ValidationError):
            run_operation("parse_int", {"txt": "619"})

    def test_undeclared_error_kind_propagates(self, monkeypatch):
        def broken(text):
            raise FormatError("not declared for reverse_text")

        spec = CATALOG["reverse_text"]
        monkeypatch.setitem(
            CATALOG,
            "reverse_text",
            OperationSpec(
                name=spec.name,
                summary=spec.summary,
                func=broken,
                input_model=spec.input_model,
                error_kinds=spec.error_kinds,
            ),
        )

        with pytest.raises(FormatError):
            run_operation("reverse_text", {"text": "abc"})

    def test_failures_are_logged(self, caplog, monkeypatch):
        # setup_logging() stops propagation to the root logger caplog listens on
        monkeypatch.setattr(logging.getLogger("exception_workshop"), "propagate", True)

        with caplog.at_level(logging.WARNING, logger="exception_workshop"):
            run_operation("perform_secure_operation", {"is_logged_in": False})

        assert "perform_secure_operation failed with invalid_state" in caplog.text

    def test_result_serializes_to_json(self):
        result = run_operation("parse_int", {"text": "some string"})

        assert '"error_kind":"format_error"' in result.model_dump_json()
