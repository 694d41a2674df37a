"""Tests for the MongoDB session store."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from memberauth.core.modules.session.models import SESSION_TTL, Session, SessionId, SessionUser
from memberauth.core.modules.session.store import MongoSessionStore
from memberauth.utils import now


@pytest.fixture
def collection():
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def store(collection):
    database = MagicMock()
    database.get_collection.return_value = collection
    return MongoSessionStore(database)


class TestMongoSessionStore:
    """Tests for create, get and destroy."""

    async def test_indexes_created(self, store, collection):
        await store.on_start()
        collection.create_index.assert_any_await([("session_id", 1)], unique=True)
        collection.create_index.assert_any_await([("expires_at", 1)], expireAfterSeconds=0)

    async def test_create_sets_fixed_expiry(self, store, collection):
        session_id = await store.create(SessionUser(name="alice1"), SESSION_TTL)
        doc = collection.insert_one.await_args.args[0]
        assert doc["session_id"] == session_id
        assert doc["user"] == {"name": "alice1"}
        assert doc["expires_at"] - doc["created_at"] == timedelta(hours=1)

    async def test_create_returns_unique_opaque_ids(self, store):
        first = await store.create(SessionUser(name="alice1"), SESSION_TTL)
        second = await store.create(SessionUser(name="alice1"), SESSION_TTL)
        assert first != second
        assert len(first) >= 32

    async def test_get_live_session(self, store, collection):
        created_at = now()
        session = Session(
            session_id="abc", user=SessionUser(name="alice1"), created_at=created_at, expires_at=created_at + SESSION_TTL
        )
        collection.find_one.return_value = session.to_mongo()
        assert await store.get(SessionId("abc")) == SessionUser(name="alice1")

    async def test_get_filters_out_expired(self, store, collection):
        """Expiry is part of the query, not left to the TTL monitor."""
        assert await store.get(SessionId("abc")) is None
        query = collection.find_one.await_args.args[0]
        assert query["session_id"] == "abc"
        assert "$gt" in query["expires_at"]

    async def test_destroy(self, store, collection):
        await store.destroy(SessionId("abc"))
        collection.delete_one.assert_awaited_once_with({"session_id": "abc"})
