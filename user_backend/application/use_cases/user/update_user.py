# Standard library imports
import logging
from dataclasses import replace
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InvalidArgumentError, INVALID_EMAIL
from ....domain.validation import validate_name, validate_email
from ...dto.user_dto import UserResponse
from .mapping import to_user_response

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating an existing user (full or partial)"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[UserResponse]:
        """
        Merge the supplied fields into a stored user
        
        Per field: None leaves the value unchanged, a blank name is
        ignored, an email without '@' rejects the whole update. Every
        field is checked before anything is saved, so a rejected call
        persists nothing.
        
        Args:
            user_id: ID of the user to update
            name: New name, or None to keep the current one
            email: New email, or None to keep the current one
            
        Returns:
            UserResponse with the updated user, None if the user does not exist
            
        Raises:
            InvalidArgumentError: If a supplied email is invalid
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.debug(f"Update skipped, user {user_id} not found")
            return None
        
        changes = {}
        if validate_name(name):
            changes["name"] = name
        if email is not None:
            if not validate_email(email):
                logger.warning(f"Rejected update of user {user_id}: invalid email")
                raise InvalidArgumentError(INVALID_EMAIL)
            changes["email"] = email
        
        updated_user = replace(user, **changes)
        saved_user = await self.user_repository.save(updated_user)
        
        logger.info(f"Updated user {user_id} (fields: {', '.join(sorted(changes)) or 'none'})")
        return to_user_response(saved_user)
