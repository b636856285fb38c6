# Standard library imports
import logging
from dataclasses import replace
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    Process-local implementation of UserRepository.
    
    IDs come from a counter ("1", "2", ...) that is never rewound, so an
    ID is not reused after a delete or a clear. Users are copied on the
    way in and out so callers never hold a reference to stored state.
    """
    
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._next_id = 1
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Args:
            user: User domain model to save
            
        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")
        
        if user.id is None:
            stored = replace(user, id=str(self._next_id))
            self._next_id += 1
            logger.debug(f"Inserted user {stored.id}")
        else:
            if user.id not in self._users:
                raise ValueError(f"User with ID {user.id} not found")
            stored = replace(user)
            logger.debug(f"Updated user {stored.id}")
        
        self._users[stored.id] = stored
        return replace(stored)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        return replace(user)
    
    async def find_all(self) -> List[User]:
        return [replace(user) for user in self._users.values()]
    
    async def exists_by_id(self, user_id: str) -> bool:
        return user_id in self._users
    
    async def delete_by_id(self, user_id: str) -> None:
        self._users.pop(user_id, None)
    
    async def delete_all(self) -> None:
        self._users.clear()
    
    async def count(self) -> int:
        return len(self._users)
