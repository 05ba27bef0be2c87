"""
Error Tour Example

Runs every catalog operation once with a valid payload and once with a
payload that makes it fail, printing the resulting value or error kind.
Pattern: result values (run_operation) instead of try/except
"""

from rich.console import Console
from rich.table import Table

from exception_workshop import INT32_MAX, run_operation, setup_logging

CASES = [
    ("reverse_text", {"text": "strawberry"}, {"text": None}),
    ("calculate_discount", {"total_price": 1000, "discount": 54}, {"total_price": 1000, "discount": -25}),
    ("get_element", {"items": [1, 2, 3], "index": 1}, {"items": [1, 2, 3], "index": -1}),
    ("perform_secure_operation", {"is_logged_in": True}, {"is_logged_in": False}),
    ("parse_int", {"text": "619"}, {"text": "some string"}),
    (
        "find_value_by_key",
        {"values": {"Ani": 20, "Martin": 25}, "key": "Martin"},
        {"values": {"Ani": 20, "Martin": 25}, "key": "Maria"},
    ),
    ("add_numbers", {"a": 619, "b": 523}, {"a": INT32_MAX, "b": INT32_MAX}),
    ("divide_numbers", {"dividend": 125, "divisor": 5}, {"dividend": 125, "divisor": 0}),
    ("sum_collection_elements", {"items": [1, 2, 3, 4], "index": 2}, {"items": None, "index": 2}),
    (
        "get_element_as_number",
        {"values": {"Ani": "20", "Martin": "twenty five"}, "key": "Ani"},
        {"values": {"Ani": "20", "Martin": "twenty five"}, "key": "Martin"},
    ),
]


def main():
    """Run the tour and print a summary table."""
    # Failures are expected here; keep the warnings out of the table
    setup_logging("ERROR")

    table = Table(title="Error tour")
    table.add_column("Operation", style="cyan")
    table.add_column("Valid input")
    table.add_column("Invalid input", style="red")

    for name, valid, invalid in CASES:
        ok = run_operation(name, valid)
        failed = run_operation(name, invalid)
        table.add_row(
            name,
            str(ok.value),
            failed.error_kind.value if failed.error_kind else "-",
        )

    Console().print(table)


if __name__ == "__main__":
    main()
