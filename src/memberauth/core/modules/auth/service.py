from datetime import timedelta

import structlog

from memberauth.core.core import Service
from memberauth.core.modules.session.models import SESSION_TTL, SessionId, SessionUser
from memberauth.core.modules.session.store import SessionStore
from memberauth.core.modules.user.hashing import PasswordHasher
from memberauth.core.modules.user.models import LoginRequest, SignupRequest, User
from memberauth.core.modules.user.repository import UserRepository
from memberauth.core.modules.user.validators import validate_login, validate_signup
from memberauth.errors import InvalidCredentialsError

logger = structlog.get_logger(__name__)


class AuthService(Service):
    """Signup, login, logout and session lookup over injected stores.

    Expected failures are raised as AuthError subclasses. Store failures
    propagate unchanged.
    """

    def __init__(
        self,
        users: UserRepository,
        sessions: SessionStore,
        hasher: PasswordHasher,
        session_ttl: timedelta = SESSION_TTL,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._hasher = hasher
        self._session_ttl = session_ttl

    async def signup(self, request: SignupRequest) -> tuple[SessionId, SessionUser]:
        """Register a new user and open a session for them."""
        name, email, password = validate_signup(request)

        user = User(name=name, email=email, password_hash=self._hasher.hash(password))
        await self._users.insert(user)
        logger.info("user_signed_up", user_id=str(user.id))

        # No rollback: if this fails the account exists but no session is issued
        return await self._issue_session(user)

    async def login(self, request: LoginRequest) -> tuple[SessionId, SessionUser]:
        """Verify credentials and open a session."""
        email, password = validate_login(request)

        user = await self._users.find_by_email(email)
        if user is None:
            logger.info("login_failed", reason="unknown_email")
            raise InvalidCredentialsError
        if not self._hasher.verify(password, user.password_hash):
            logger.info("login_failed", reason="wrong_password", user_id=str(user.id))
            raise InvalidCredentialsError

        logger.info("user_logged_in", user_id=str(user.id))
        return await self._issue_session(user)

    async def logout(self, session_id: SessionId | None) -> None:
        """Destroy the session if there is one. Never raises."""
        if not session_id:
            return
        try:
            await self._sessions.destroy(session_id)
        except Exception:
            logger.exception("session_destroy_failed")

    async def get_session_user(self, session_id: SessionId | None) -> SessionUser | None:
        """Resolve a session id to its user, or None for anonymous requests."""
        if not session_id:
            return None
        return await self._sessions.get(session_id)

    async def _issue_session(self, user: User) -> tuple[SessionId, SessionUser]:
        payload = SessionUser(name=user.name)
        session_id = await self._sessions.create(payload, self._session_ttl)
        return session_id, payload
