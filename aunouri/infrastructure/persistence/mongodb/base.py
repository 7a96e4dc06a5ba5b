"""Base MongoDB store with reusable patterns.

Provides common functionality for MongoDB-backed stores:
- Client creation from configuration
- Document mapping hooks (domain ↔ MongoDB)
- Logged wrappers around collection operations

Concrete stores inherit from MongoBaseStore.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument

from aunouri.infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

logger = structlog.get_logger(__name__)


class MongoBaseStore(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB stores.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain value to MongoDB document
    - from_document(): Convert MongoDB document to domain value

    Collection operations log failures and re-raise the driver error;
    subclasses decide how to translate it for their domain.
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None,
        database_name: Optional[str] = None,
    ):
        """
        Initialize store with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
            database_name: Database (if None, MONGODB_DATABASE)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
        else:
            self._client = client

        self._db = self._client[database_name or get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            "Initialized MongoDB store",
            store=self.__class__.__name__,
            collection=self.collection_name,
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, key: str, entity: TEntity) -> Dict[str, Any]:
        """Convert domain value stored under ``key`` to a MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain value.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Find single document; driver errors are logged and re-raised."""
        try:
            return await self._collection.find_one(filter_dict)
        except Exception as e:
            logger.error(
                "find_one failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        """Insert single document; driver errors are logged and re-raised."""
        try:
            await self._collection.insert_one(document)
        except Exception as e:
            logger.error(
                "insert_one failed",
                collection=self.collection_name,
                error=str(e),
            )
            raise

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
    ) -> int:
        """
        Update single document.

        Returns:
            Number of documents matched by the filter (0 or 1)
        """
        try:
            result = await self._collection.update_one(filter_dict, update_dict, upsert=upsert)
            return result.matched_count
        except Exception as e:
            logger.error(
                "update_one failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _find_one_and_update(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """Update single document and return it after the update."""
        try:
            return await self._collection.find_one_and_update(
                filter_dict,
                update_dict,
                upsert=upsert,
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(
                "find_one_and_update failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """Delete single document; returns number deleted (0 or 1)."""
        try:
            result = await self._collection.delete_one(filter_dict)
            return result.deleted_count
        except Exception as e:
            logger.error(
                "delete_one failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info("Closed MongoDB connection", store=self.__class__.__name__)
