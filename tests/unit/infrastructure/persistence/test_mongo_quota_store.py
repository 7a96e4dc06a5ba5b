"""Unit tests for MongoQuotaStore with a mocked collection."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from aunouri.domain.access_tier.core.exceptions import StorageUnavailableError
from aunouri.domain.access_tier.core.value_objects import MealLoggingQuota
from aunouri.domain.access_tier.services.access_tier_gate import AccessTierGate
from aunouri.infrastructure.persistence.mongodb.quota_store import MongoQuotaStore

DAY = date(2024, 3, 15)


@pytest.fixture
def collection():
    """Mocked Motor collection."""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    return collection


@pytest.fixture
def client(collection):
    """Mocked Motor client returning the mocked collection."""
    database = MagicMock()
    database.__getitem__.return_value = collection
    client = MagicMock()
    client.__getitem__.return_value = database
    return client


@pytest.fixture
def mongo_store(client):
    return MongoQuotaStore(client=client, database_name="aunouri_test")


def _doc(count=1, version=4):
    return {
        "_id": "user-1",
        "user_id": "user-1",
        "date": "2024-03-15",
        "count": count,
        "limit": 3,
        "version": version,
        "updated_at": "2024-03-15T09:30:00+00:00",
    }


class TestDocumentMapping:
    """Test quota <-> document conversion."""

    def test_collection_and_database(self, mongo_store, client):
        """Test collection selection."""
        assert mongo_store.collection_name == "meal_logging_quotas"
        client.__getitem__.assert_called_with("aunouri_test")

    def test_to_document(self, mongo_store):
        """Test document fields."""
        doc = mongo_store.to_document(
            "user-1", MealLoggingQuota(date=DAY, count=2, limit=3, version=5)
        )

        assert doc["_id"] == "user-1"
        assert doc["date"] == "2024-03-15"
        assert (doc["count"], doc["limit"], doc["version"]) == (2, 3, 5)
        assert "updated_at" in doc

    def test_from_document(self, mongo_store):
        """Test document parsing."""
        quota = mongo_store.from_document(_doc(count=2, version=7))

        assert quota == MealLoggingQuota(date=DAY, count=2, limit=3, version=7)

    def test_from_document_without_version(self, mongo_store):
        """Test documents written before versioning default to 0."""
        doc = _doc()
        del doc["version"]

        assert mongo_store.from_document(doc).version == 0


class TestMongoQuotaStore:
    """Test store operations."""

    @pytest.mark.asyncio
    async def test_get(self, mongo_store, collection):
        """Test get by user id."""
        collection.find_one.return_value = _doc()

        quota = await mongo_store.get("user-1")

        assert quota.count == 1
        collection.find_one.assert_awaited_once_with({"_id": "user-1"})

    @pytest.mark.asyncio
    async def test_get_missing(self, mongo_store):
        """Test get returns None when absent."""
        assert await mongo_store.get("user-1") is None

    @pytest.mark.asyncio
    async def test_get_unavailable(self, mongo_store, collection):
        """Test driver error becomes StorageUnavailableError."""
        collection.find_one.side_effect = ServerSelectionTimeoutError("timeout")

        with pytest.raises(StorageUnavailableError) as exc_info:
            await mongo_store.get("user-1")

        assert exc_info.value.operation == "get"
        assert isinstance(exc_info.value.cause, ServerSelectionTimeoutError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides,missing",
        [
            ({}, "date"),
            ({"date": "15/03/2024"}, None),
            ({"count": None}, None),
            ({"count": -1}, None),
        ],
    )
    async def test_get_malformed_document(
        self, mongo_store, collection, overrides, missing
    ):
        """Test a corrupt stored document becomes StorageUnavailableError."""
        doc = {**_doc(), **overrides}
        if missing:
            del doc[missing]
        collection.find_one.return_value = doc

        with pytest.raises(StorageUnavailableError) as exc_info:
            await mongo_store.get("user-1")

        assert exc_info.value.operation == "get"
        assert isinstance(exc_info.value.cause, (KeyError, ValueError, TypeError))

    @pytest.mark.asyncio
    async def test_gate_denies_on_malformed_document(
        self, mongo_store, collection, clock
    ):
        """Test the gate reports a corrupt quota as a denial, not a crash."""
        collection.find_one.return_value = {"_id": "u", "count": 1, "limit": 3}
        gate = AccessTierGate(store=mongo_store, clock=clock)

        status = await gate.can_log_meal("u", "guest")

        assert status.allowed is False
        assert isinstance(status.error, StorageUnavailableError)
        assert isinstance(status.error.cause, KeyError)

    @pytest.mark.asyncio
    async def test_save_upserts_and_increments_version(self, mongo_store, collection):
        """Test unconditional save."""
        collection.find_one_and_update.return_value = _doc(count=2, version=5)

        stored = await mongo_store.save(
            "user-1", MealLoggingQuota(date=DAY, count=2, limit=3)
        )

        assert stored.version == 5
        filter_dict, update = collection.find_one_and_update.call_args.args
        assert filter_dict == {"_id": "user-1"}
        assert update["$inc"] == {"version": 1}
        assert "_id" not in update["$set"]
        assert "version" not in update["$set"]
        assert collection.find_one_and_update.call_args.kwargs["upsert"] is True

    @pytest.mark.asyncio
    async def test_save_malformed_document(self, mongo_store, collection):
        """Test a corrupt document returned by the upsert is a storage failure."""
        collection.find_one_and_update.return_value = {"_id": "user-1", "count": 2}

        with pytest.raises(StorageUnavailableError) as exc_info:
            await mongo_store.save(
                "user-1", MealLoggingQuota(date=DAY, count=2, limit=3)
            )

        assert exc_info.value.operation == "save"

    @pytest.mark.asyncio
    async def test_compare_and_set_create(self, mongo_store, collection):
        """Test first write inserts version 1."""
        stored = await mongo_store.compare_and_set(
            "user-1", MealLoggingQuota(date=DAY, count=1, limit=3), None
        )

        assert stored.version == 1
        inserted = collection.insert_one.call_args.args[0]
        assert inserted["_id"] == "user-1"
        assert inserted["version"] == 1

    @pytest.mark.asyncio
    async def test_compare_and_set_create_race_lost(self, mongo_store, collection):
        """Test duplicate key on create is a lost race, not an error."""
        collection.insert_one.side_effect = DuplicateKeyError("duplicate _id")

        result = await mongo_store.compare_and_set(
            "user-1", MealLoggingQuota(date=DAY, count=1, limit=3), None
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_compare_and_set_update(self, mongo_store, collection):
        """Test update filters on the expected version."""
        stored = await mongo_store.compare_and_set(
            "user-1", MealLoggingQuota(date=DAY, count=2, limit=3, version=4), 4
        )

        assert stored.version == 5
        assert stored.count == 2
        filter_dict, update = collection.update_one.call_args.args
        assert filter_dict == {"_id": "user-1", "version": 4}
        assert update["$set"]["version"] == 5
        assert "_id" not in update["$set"]

    @pytest.mark.asyncio
    async def test_compare_and_set_version_mismatch(self, mongo_store, collection):
        """Test unmatched filter returns None."""
        collection.update_one.return_value = MagicMock(matched_count=0)

        result = await mongo_store.compare_and_set(
            "user-1", MealLoggingQuota(date=DAY, count=2, limit=3), 4
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_compare_and_set_unavailable(self, mongo_store, collection):
        """Test driver error on write becomes StorageUnavailableError."""
        collection.update_one.side_effect = ServerSelectionTimeoutError("timeout")

        with pytest.raises(StorageUnavailableError) as exc_info:
            await mongo_store.compare_and_set(
                "user-1", MealLoggingQuota(date=DAY, count=2, limit=3), 4
            )

        assert exc_info.value.operation == "compare_and_set"

    @pytest.mark.asyncio
    async def test_delete(self, mongo_store, collection):
        """Test delete by user id."""
        await mongo_store.delete("user-1")

        collection.delete_one.assert_awaited_once_with({"_id": "user-1"})

    def test_close(self, mongo_store, client):
        """Test close closes the client."""
        mongo_store.close()

        client.close.assert_called_once()
