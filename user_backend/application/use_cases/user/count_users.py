# Local application imports
from ....domain.repositories.user_repository import UserRepository


class CountUsersUseCase:
    """Use case for counting stored users"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> int:
        return await self.user_repository.count()
