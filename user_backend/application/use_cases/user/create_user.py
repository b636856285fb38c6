# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import InvalidArgumentError, NAME_CANNOT_BE_EMPTY, INVALID_EMAIL
from ....domain.validation import validate_name, validate_email
from ...dto.user_dto import UserResponse
from .mapping import to_user_response

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, name: Optional[str], email: Optional[str]) -> UserResponse:
        """
        Create a new user
        
        Both fields are validated before anything is written; the store
        assigns the identity.
        
        Args:
            name: User name (must not be blank)
            email: User email (must contain '@')
            
        Returns:
            UserResponse with the stored user, including its new ID
            
        Raises:
            InvalidArgumentError: If name or email fails validation
        """
        if not validate_name(name):
            logger.warning("Rejected user creation: blank name")
            raise InvalidArgumentError(NAME_CANNOT_BE_EMPTY)
        if not validate_email(email):
            logger.warning("Rejected user creation: invalid email")
            raise InvalidArgumentError(INVALID_EMAIL)
        
        # Create domain user entity
        new_user = User(
            id=None,  # Will be set by repository
            name=name,
            email=email,
        )
        
        saved_user = await self.user_repository.save(new_user)
        
        logger.info(f"Created user {saved_user.id}")
        return to_user_response(saved_user)
