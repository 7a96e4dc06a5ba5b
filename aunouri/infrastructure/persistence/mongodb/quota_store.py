"""MongoDB implementation of IQuotaStore."""

from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

import structlog
from pymongo.errors import DuplicateKeyError, PyMongoError

from aunouri.domain.access_tier.core.exceptions.domain_errors import (
    StorageUnavailableError,
)
from aunouri.domain.access_tier.core.ports.quota_store import IQuotaStore
from aunouri.domain.access_tier.core.value_objects.meal_logging_quota import (
    MealLoggingQuota,
)

from .base import MongoBaseStore

logger = structlog.get_logger(__name__)


class MongoQuotaStore(MongoBaseStore[MealLoggingQuota], IQuotaStore):
    """MongoDB implementation of the meal logging quota store.

    One document per user (``_id`` = user ID). Conditional writes filter on
    the stored ``version``; creating the first document relies on the
    unique ``_id`` so two concurrent creators cannot both succeed.
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "meal_logging_quotas"

    def to_document(self, key: str, entity: MealLoggingQuota) -> Dict[str, Any]:
        """Convert quota to MongoDB document."""
        return {
            "_id": key,
            "user_id": key,
            "date": entity.date.isoformat(),
            "count": entity.count,
            "limit": entity.limit,
            "version": entity.version,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

    def from_document(self, doc: Dict[str, Any]) -> MealLoggingQuota:
        """Convert MongoDB document to quota."""
        return MealLoggingQuota(
            date=date.fromisoformat(doc["date"]),
            count=int(doc["count"]),
            limit=int(doc["limit"]),
            version=int(doc.get("version", 0)),
        )

    def _decode(
        self, operation: str, user_id: str, doc: Dict[str, Any]
    ) -> MealLoggingQuota:
        """Map a stored document, reporting malformed ones as storage failures."""
        try:
            return self.from_document(doc)
        except (KeyError, ValueError, TypeError) as e:
            logger.error(
                "Malformed quota document",
                collection=self.collection_name,
                user_id=user_id,
                operation=operation,
                error=repr(e),
            )
            raise StorageUnavailableError(operation, user_id, e) from e

    async def get(self, user_id: str) -> Optional[MealLoggingQuota]:
        """Load stored quota."""
        try:
            doc = await self._find_one({"_id": user_id})
        except PyMongoError as e:
            raise StorageUnavailableError("get", user_id, e) from e

        if doc is None:
            return None
        return self._decode("get", user_id, doc)

    async def save(self, user_id: str, quota: MealLoggingQuota) -> MealLoggingQuota:
        """Store quota unconditionally, bumping the version."""
        fields = self.to_document(user_id, quota)
        fields.pop("_id")
        fields.pop("version")
        try:
            doc = await self._find_one_and_update(
                {"_id": user_id},
                {"$set": fields, "$inc": {"version": 1}},
                upsert=True,
            )
        except PyMongoError as e:
            raise StorageUnavailableError("save", user_id, e) from e

        if doc is None:
            raise StorageUnavailableError("save", user_id)
        return self._decode("save", user_id, doc)

    async def compare_and_set(
        self,
        user_id: str,
        quota: MealLoggingQuota,
        expected_version: Optional[int],
    ) -> Optional[MealLoggingQuota]:
        """Store quota if the stored version matches ``expected_version``."""
        new_version = (expected_version or 0) + 1
        document = self.to_document(
            user_id,
            MealLoggingQuota(
                date=quota.date,
                count=quota.count,
                limit=quota.limit,
                version=new_version,
            ),
        )

        try:
            if expected_version is None:
                try:
                    await self._insert_one(document)
                except DuplicateKeyError:
                    return None
            else:
                fields = {k: v for k, v in document.items() if k != "_id"}
                matched = await self._update_one(
                    {"_id": user_id, "version": expected_version},
                    {"$set": fields},
                )
                if matched == 0:
                    return None
        except PyMongoError as e:
            raise StorageUnavailableError("compare_and_set", user_id, e) from e

        return self.from_document(document)

    async def delete(self, user_id: str) -> None:
        """Delete stored quota."""
        try:
            await self._delete_one({"_id": user_id})
        except PyMongoError as e:
            raise StorageUnavailableError("delete", user_id, e) from e
