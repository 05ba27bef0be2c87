"""
Utility operations for exception-workshop.

Each helper either returns a value or raises exactly one kind of
WorkshopError per failing input condition:
- Strings: reverse_text
- Arithmetic: calculate_discount, add_numbers, divide_numbers
- Sequences: get_element, sum_collection_elements
- Parsing: parse_int
- Mappings: find_value_by_key, get_element_as_number
- Access: perform_secure_operation
"""

from .access import perform_secure_operation
from .calculator import (
    INT32_MAX,
    INT32_MIN,
    add_numbers,
    calculate_discount,
    divide_numbers,
    int_range,
)
from .logging_helpers import setup_logging
from .mapping_helpers import find_value_by_key, get_element_as_number
from .parsing import parse_int
from .sequence_helpers import get_element, sum_collection_elements
from .string_helpers import reverse_text

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "add_numbers",
    "calculate_discount",
    "divide_numbers",
    "find_value_by_key",
    "get_element",
    "get_element_as_number",
    "int_range",
    "parse_int",
    "perform_secure_operation",
    "reverse_text",
    "setup_logging",
    "sum_collection_elements",
]
