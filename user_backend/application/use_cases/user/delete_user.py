# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> bool:
        """
        Delete a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            True if the user existed and was removed, False otherwise
        """
        if not await self.user_repository.exists_by_id(user_id):
            return False
        
        await self.user_repository.delete_by_id(user_id)
        logger.info(f"Deleted user {user_id}")
        return True
