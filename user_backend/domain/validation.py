# Standard library imports
from typing import Optional


def validate_name(name: Optional[str]) -> bool:
    """A name is valid when present and not made only of whitespace"""
    return name is not None and bool(name.strip())


def validate_email(email: Optional[str]) -> bool:
    """An email is valid when present and containing '@' (not a full RFC check)"""
    return email is not None and "@" in email
