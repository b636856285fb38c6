# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class ClearUsersUseCase:
    """
    Use case for removing every user.
    
    Administrative/test-support operation; not exposed over HTTP.
    """
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> None:
        await self.user_repository.delete_all()
        logger.info("Cleared all users")
