"""
User Store - Async data access over the MongoDB ``users`` collection.
"""
import logging
from typing import Any, Optional, Tuple

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from ..config import Settings
from ..errors import StoreError, StoreUnavailableError, UnknownUserError
from ..models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """
    Persistence for users keyed by username.
    
    Wraps any asyncio collection exposing ``find_one``, ``insert_one`` and
    ``update_one`` (pymongo's ``AsyncCollection`` in production).
    Every driver failure is re-raised as ``StoreError``.
    """
    
    def __init__(self, collection: Any):
        self.collection = collection
    
    async def find_by_username(self, username: str) -> Optional[User]:
        """Load a user, or None when no such username exists."""
        try:
            doc = await self.collection.find_one({"username": username})
        except PyMongoError as e:
            logger.error(f"Lookup of user {username!r} failed: {e}")
            raise StoreError(str(e)) from e
        
        if doc is None:
            return None
        return User.model_validate(doc)
    
    async def exists(self, username: str) -> bool:
        return await self.find_by_username(username) is not None
    
    async def create(self, username: str, password: str) -> User:
        """
        Insert a new user with no want-to-go list.
        
        Uniqueness is checked by the caller beforehand; the collection
        itself carries no unique index.
        """
        user = User(username=username, password=password)
        try:
            await self.collection.insert_one(user.to_document())
        except PyMongoError as e:
            logger.error(f"Insert of user {username!r} failed: {e}")
            raise StoreError(str(e)) from e
        
        logger.info(f"Registered user {username!r}")
        return user
    
    async def add_to_want_to_go(self, username: str, destination: str) -> bool:
        """
        Append a destination to the user's list unless already present.
        
        Membership check and push happen in a single conditional update.
        Returns False when the destination is already on the list.

        Raises:
            UnknownUserError: if no user has this username
        """
        try:
            result = await self.collection.update_one(
                {"username": username, "wantToGoList": {"$ne": destination}},
                {"$push": {"wantToGoList": destination}},
            )
        except PyMongoError as e:
            logger.error(f"Adding {destination!r} for {username!r} failed: {e}")
            raise StoreError(str(e)) from e

        if result.matched_count == 0:
            # Filter also misses on duplicates; tell the two apart
            if not await self.exists(username):
                raise UnknownUserError(username)
            return False

        logger.info(f"Added {destination!r} to want-to-go list of {username!r}")
        return True
    
    async def get_want_to_go(self, username: str) -> list[str]:
        """The user's saved destinations; empty when the user or list is absent."""
        user = await self.find_by_username(username)
        return user.want_to_go_list if user else []


async def connect_user_store(settings: Settings) -> Tuple[AsyncMongoClient, UserStore]:
    """
    Open the MongoDB client and verify the server answers.
    
    Raises:
        StoreUnavailableError: if the server cannot be reached
    """
    client = AsyncMongoClient(
        settings.mongo_url,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms
    )
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        await client.close()
        logger.error(f"Failed to connect to MongoDB at {settings.mongo_url}: {e}")
        raise StoreUnavailableError(str(e)) from e
    
    logger.info(f"Connected to MongoDB at {settings.mongo_url}")
    collection = client[settings.mongo_db][settings.users_collection]
    return client, UserStore(collection)
