"""
Domain exceptions for the user resource.

Absence of a user is not an error and is signalled with ``None``; the only
failure raised by the domain is a caller-correctable invalid argument.
"""


class InvalidArgumentError(ValueError):
    """Raised when a user field fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


NAME_CANNOT_BE_EMPTY = "Name cannot be empty"
INVALID_EMAIL = "Invalid email"
