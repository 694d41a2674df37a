from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from memberauth.config import Config

if TYPE_CHECKING:
    from memberauth.core.modules.auth.service import AuthService
    from memberauth.core.modules.session.store import SessionStore
    from memberauth.core.modules.user.hashing import PasswordHasher
    from memberauth.core.modules.user.repository import UserRepository

logger = structlog.get_logger(__name__)


class Service:
    """Base class for components with startup and shutdown hooks."""

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""


class Services:
    """Service registry. Components are built outside and passed in."""

    users: UserRepository
    sessions: SessionStore
    hasher: PasswordHasher
    auth: AuthService

    def __init__(self, users: UserRepository, sessions: SessionStore, hasher: PasswordHasher) -> None:
        from memberauth.core.modules.auth.service import AuthService  # noqa: PLC0415

        self.users = users
        self.sessions = sessions
        self.hasher = hasher
        self.auth = AuthService(users, sessions, hasher)
        # Order matters for startup - stores before the service using them
        self._services: list[Any] = [users, sessions, self.auth]

    @classmethod
    def for_database(cls, database: AsyncDatabase[dict[str, Any]], config: Config) -> Services:
        """Build MongoDB-backed services."""
        from memberauth.core.modules.session.store import MongoSessionStore  # noqa: PLC0415
        from memberauth.core.modules.user.hashing import BcryptPasswordHasher  # noqa: PLC0415
        from memberauth.core.modules.user.repository import MongoUserRepository  # noqa: PLC0415

        return cls(
            users=MongoUserRepository(database),
            sessions=MongoSessionStore(database),
            hasher=BcryptPasswordHasher(rounds=config.bcrypt_rounds),
        )

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            if hasattr(service, "on_start"):
                await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            if hasattr(service, "on_stop"):
                await service.on_stop()


class Core:
    """Container providing config, the database connection, and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]] | None
    services: Services

    def __init__(
        self, config: Config, services: Services, mongo_client: AsyncMongoClient[dict[str, Any]] | None = None
    ) -> None:
        self.config = config
        self.services = services
        self.mongo_client = mongo_client

    @classmethod
    def from_config(cls, config: Config) -> Core:
        """Connect to MongoDB and build Mongo-backed services."""
        mongo_client: AsyncMongoClient[dict[str, Any]] = AsyncMongoClient(
            config.database_url, uuidRepresentation="standard"
        )
        database = mongo_client.get_database(urlparse(config.database_url).path[1:])
        return cls(config, Services.for_database(database, config), mongo_client)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Start all services on application startup."""
        await self.services.start_all()
        logger.info("core_started")

    async def on_stop(self) -> None:
        """Stop services and close MongoDB connection on shutdown."""
        await self.services.stop_all()
        if self.mongo_client is not None:
            await self.mongo_client.aclose()
