# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..exceptions import InvalidArgumentError, NAME_CANNOT_BE_EMPTY, INVALID_EMAIL
from ..validation import validate_name, validate_email


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str

    def __post_init__(self) -> None:
        """Business validations"""
        if not validate_name(self.name):
            raise InvalidArgumentError(NAME_CANNOT_BE_EMPTY)
        if not validate_email(self.email):
            raise InvalidArgumentError(INVALID_EMAIL)
