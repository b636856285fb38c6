from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create when id is None, otherwise update) and return the stored form"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return a snapshot of all stored users, in store order"""
        pass
    
    @abstractmethod
    async def exists_by_id(self, user_id: str) -> bool:
        """Check whether a user with this ID is stored"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: str) -> None:
        """Delete user by ID (no-op if absent)"""
        pass
    
    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every stored user"""
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of stored users"""
        pass
