# Standard library imports
import logging
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_all(self) -> List[User]:
        """
        Return all users in natural (insertion) order
        
        Returns:
            List of User domain models
        """
        try:
            documents = await self.user_collection.find({}).to_list(length=None)
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")
        
        return [self._document_to_user(document) for document in documents]
    
    async def exists_by_id(self, user_id: str) -> bool:
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return False
        
        try:
            matches = await self.user_collection.count_documents({UserFields.MONGO_ID: object_id}, limit=1)
        except Exception as e:
            raise RuntimeError(f"Error checking user existence: {str(e)}")
        return matches > 0
    
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
        
        user_dict = self._user_to_dict(user)
        
        if user.id:
            object_id = self._to_object_id(user.id)
            if object_id is None:
                raise ValueError(f"Invalid user ID format: {user.id}")
            
            try:
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
            except Exception as e:
                raise RuntimeError(f"Error saving user: {str(e)}")
            
            if update_result.matched_count == 0:
                raise ValueError(f"User with ID {user.id} not found")
            
            logger.debug(f"Updated user document {user.id}")
            return User(id=user.id, name=user.name, email=user.email)
        
        try:
            result = await self.user_collection.insert_one(user_dict)
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")
        
        logger.debug(f"Inserted user document {result.inserted_id}")
        return User(id=str(result.inserted_id), name=user.name, email=user.email)
    
    async def delete_by_id(self, user_id: str) -> None:
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return
        
        try:
            await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")
    
    async def delete_all(self) -> None:
        try:
            await self.user_collection.delete_many({})
        except Exception as e:
            raise RuntimeError(f"Error deleting users: {str(e)}")
    
    async def count(self) -> int:
        try:
            return await self.user_collection.count_documents({})
        except Exception as e:
            raise RuntimeError(f"Error counting users: {str(e)}")
    
    @staticmethod
    def _to_object_id(user_id: Optional[str]) -> Optional[ObjectId]:
        if not user_id:
            return None
        try:
            return ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to a MongoDB document body (without _id)"""
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
        }
