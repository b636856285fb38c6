# Local application imports
from ....domain.models.user import User
from ...dto.user_dto import UserResponse


def to_user_response(user: User) -> UserResponse:
    """Convert a stored User domain model into its response DTO"""
    return UserResponse(
        id=user.id or "",
        name=user.name,
        email=user.email,
    )
