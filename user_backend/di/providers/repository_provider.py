from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.memory_user_repository import InMemoryUserRepository
from .database_provider import MONGO_BACKEND

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the UserRepository implementation for the selected backend.
        Domain interface -> Infrastructure implementation
        """
        if container.get("user_store_backend") == MONGO_BACKEND:
            from ...infrastructure.db.mongo_user_repository import MongoUserRepository
            
            repository = MongoUserRepository(user_collection=container.get("user_collection"))
        else:
            repository = InMemoryUserRepository()
        
        container.register_singleton(UserRepository, repository)
