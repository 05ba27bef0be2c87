"""
Access-guarded operations.
"""

from exception_workshop.errors import InvalidStateError

LOGGED_IN_MESSAGE = "User logged in."


def perform_secure_operation(is_logged_in: bool) -> str:
    """
    Run an operation that requires an authenticated user.

    Args:
        is_logged_in: Whether the current user is logged in

    Returns:
        The fixed message "User logged in."

    Raises:
        InvalidStateError: If is_logged_in is false
    """
    if not is_logged_in:
        raise InvalidStateError("User must be logged in to perform this operation")

    return LOGGED_IN_MESSAGE
