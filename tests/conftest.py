"""Shared pytest fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta

import pytest

from memberauth.app import App
from memberauth.config import Config
from memberauth.core.core import Core, Services
from memberauth.core.modules.auth.service import AuthService
from memberauth.core.modules.session.models import SessionId, SessionUser, new_session_id
from memberauth.core.modules.user.hashing import BcryptPasswordHasher
from memberauth.core.modules.user.models import User
from memberauth.errors import DuplicateEmailError
from memberauth.utils import now


class InMemoryUserRepository:
    """User repository double with an atomic uniqueness check on email."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.calls: list[str] = []

    async def find_by_email(self, email: str) -> User | None:
        self.calls.append("find_by_email")
        await asyncio.sleep(0)
        return self.users.get(email)

    async def insert(self, user: User) -> None:
        self.calls.append("insert")
        # Yield like a network round-trip, then check-and-set without yielding
        await asyncio.sleep(0)
        if user.email in self.users:
            raise DuplicateEmailError
        self.users[user.email] = user


@dataclass
class StoredSession:
    user: SessionUser
    expires_at: datetime


@dataclass
class InMemorySessionStore:
    """Session store double. Set `fail_destroy` to simulate a broken backend."""

    sessions: dict[str, StoredSession] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    fail_destroy: bool = False

    async def create(self, payload: SessionUser, ttl: timedelta) -> SessionId:
        self.calls.append("create")
        session_id = new_session_id()
        self.sessions[session_id] = StoredSession(user=payload, expires_at=now() + ttl)
        return session_id

    async def get(self, session_id: SessionId) -> SessionUser | None:
        self.calls.append("get")
        stored = self.sessions.get(session_id)
        if stored is None or stored.expires_at <= now():
            return None
        return stored.user

    async def destroy(self, session_id: SessionId) -> None:
        self.calls.append("destroy")
        if self.fail_destroy:
            raise ConnectionError("session store unavailable")
        self.sessions.pop(session_id, None)


@pytest.fixture
def users():
    return InMemoryUserRepository()


@pytest.fixture
def sessions():
    return InMemorySessionStore()


@pytest.fixture
def hasher():
    """Fast hasher for tests; the production cost factor is 10."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def auth_service(users, sessions, hasher):
    return AuthService(users, sessions, hasher)


@pytest.fixture
def config():
    return Config(database_url="mongodb://localhost:27017/memberauth_test", member_images=["cat1.jpg", "cat2.jpg"])


@pytest.fixture
def core(config, users, sessions, hasher):
    return Core(config, Services(users=users, sessions=sessions, hasher=hasher))


@pytest.fixture
def app(core):
    return App(core)
