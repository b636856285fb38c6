# Standard library imports
import logging
from typing import TYPE_CHECKING

# Local application imports
from ...core.config import get_settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)

MEMORY_BACKEND = "memory"
MONGO_BACKEND = "mongo"
SUPPORTED_BACKENDS = (MEMORY_BACKEND, MONGO_BACKEND)


class DatabaseProvider:
    """Centralized store provider - single source of truth for the user store backend"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the selected store backend and, for MongoDB, the users collection.
        
        Raises:
            ValueError: If USER_STORE_BACKEND names an unknown backend
        """
        backend = get_settings().user_store_backend
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported USER_STORE_BACKEND '{backend}'. "
                f"Expected one of: {', '.join(SUPPORTED_BACKENDS)}"
            )
        
        container.register_singleton("user_store_backend", backend)
        
        if backend == MONGO_BACKEND:
            from ...infrastructure.db.mongo_connection import get_database, get_user_collection
            
            container.register_singleton("database", get_database())
            container.register_singleton("user_collection", get_user_collection())
        
        logger.info(f"User store backend: {backend}")
