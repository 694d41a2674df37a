from typing import Any, Protocol

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from memberauth.core.core import Service
from memberauth.core.modules.user.models import User
from memberauth.errors import DuplicateEmailError

logger = structlog.get_logger(__name__)


class UserRepository(Protocol):
    async def find_by_email(self, email: str) -> User | None: ...

    async def insert(self, user: User) -> None: ...


class MongoUserRepository(Service):
    """Users stored in the `users` collection, unique by email."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._collection = database.get_collection("users")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        # The unique index is the only guard against two accounts per email
        await self._collection.create_index([("email", 1)], unique=True)
        logger.debug("user_repository_started")

    async def find_by_email(self, email: str) -> User | None:
        """Find user by exact email match."""
        doc = await self._collection.find_one({"email": email})
        if doc is None:
            return None
        return User.from_mongo(doc)

    async def insert(self, user: User) -> None:
        """Insert a new user, raising DuplicateEmailError if the email is taken."""
        try:
            await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError as e:
            raise DuplicateEmailError from e
