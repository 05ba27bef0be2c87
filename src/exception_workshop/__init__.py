"""
exception-workshop: A catalog of utility operations and the errors they raise.

Every operation returns a value or fails with one well-defined error kind:
    from exception_workshop import divide_numbers, DivisionByZeroError

    try:
        divide_numbers(125, 0)
    except DivisionByZeroError as e:
        print(e.kind)  # ErrorKind.DIVISION_BY_ZERO

Result values instead of exceptions:
    from exception_workshop import run_operation

    result = run_operation("parse_int", {"text": "some string"})
    result.ok          # False
    result.error_kind  # ErrorKind.FORMAT_ERROR

Command line:
    exception-workshop list
    exception-workshop run divide-numbers --input '{"dividend": 125, "divisor": 5}'
"""

# Load environment variables before anything reads configuration
import os
from pathlib import Path

from dotenv import load_dotenv

# Determine which environment we're running in
env = os.getenv("EXCEPTION_WORKSHOP_ENV", "development")
env_file = f".env.{env}"

# Look for environment-specific .env file in current working directory
env_path = Path.cwd() / env_file
if env_path.exists():
    load_dotenv(env_path)
# Fall back to generic .env if environment-specific file doesn't exist
elif (Path.cwd() / ".env").exists():
    load_dotenv(Path.cwd() / ".env")

__version__ = "0.1.0"

# Error taxonomy
from .errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    ErrorKind,
    FormatError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidStateError,
    KeyNotFoundError,
    NullInputError,
    WorkshopError,
    error_for_kind,
)

# Operations
from .utils import (
    INT32_MAX,
    INT32_MIN,
    add_numbers,
    calculate_discount,
    divide_numbers,
    find_value_by_key,
    get_element,
    get_element_as_number,
    parse_int,
    perform_secure_operation,
    reverse_text,
    setup_logging,
    sum_collection_elements,
)

# Catalog and configuration
from .catalog import (
    CATALOG,
    OperationResult,
    OperationSpec,
    UnknownOperationError,
    get_operation,
    list_operations,
    run_operation,
)
from .config import Config, Environment, get_config

__all__ = [
    # Version
    "__version__",
    # Errors
    "ErrorKind",
    "WorkshopError",
    "NullInputError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "InvalidStateError",
    "FormatError",
    "KeyNotFoundError",
    "ArithmeticOverflowError",
    "DivisionByZeroError",
    "error_for_kind",
    # Operations
    "INT32_MAX",
    "INT32_MIN",
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
    # Catalog
    "CATALOG",
    "OperationResult",
    "OperationSpec",
    "UnknownOperationError",
    "get_operation",
    "list_operations",
    "run_operation",
    # Config
    "Config",
    "Environment",
    "get_config",
    # Utils
    "setup_logging",
]
