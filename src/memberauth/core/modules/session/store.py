from datetime import timedelta
from typing import Any, Protocol

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from memberauth.core.core import Service
from memberauth.core.modules.session.models import Session, SessionId, SessionUser
from memberauth.utils import now

logger = structlog.get_logger(__name__)


class SessionStore(Protocol):
    async def create(self, payload: SessionUser, ttl: timedelta) -> SessionId: ...

    async def get(self, session_id: SessionId) -> SessionUser | None: ...

    async def destroy(self, session_id: SessionId) -> None: ...


class MongoSessionStore(Service):
    """Sessions stored in the `sessions` collection."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._collection = database.get_collection("sessions")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        await self._collection.create_index([("session_id", 1)], unique=True)
        # MongoDB removes expired documents in the background, about once a minute
        await self._collection.create_index([("expires_at", 1)], expireAfterSeconds=0)
        logger.debug("session_store_started")

    async def create(self, payload: SessionUser, ttl: timedelta) -> SessionId:
        created_at = now()
        session = Session(user=payload, created_at=created_at, expires_at=created_at + ttl)
        await self._collection.insert_one(session.to_mongo())
        return SessionId(session.session_id)

    async def get(self, session_id: SessionId) -> SessionUser | None:
        # The TTL monitor is lazy, so expiry is also enforced on read
        doc = await self._collection.find_one({"session_id": session_id, "expires_at": {"$gt": now()}})
        if doc is None:
            return None
        return Session.from_mongo(doc).user

    async def destroy(self, session_id: SessionId) -> None:
        await self._collection.delete_one({"session_id": session_id})
