import random
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from memberauth.core.core import Core
from memberauth.core.modules.auth.models import AuthFailure, AuthResult, AuthSuccess
from memberauth.core.modules.session.models import SessionId, SessionUser
from memberauth.core.modules.user.models import LoginRequest, SignupRequest
from memberauth.errors import AuthenticationError, AuthError


class App:
    """Facade for all application operations, turns expected auth failures into results."""

    def __init__(self, core: Core) -> None:
        self._core = core

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def signup(self, request: SignupRequest) -> AuthResult:
        """Register a user and open a session."""
        try:
            session_id, user = await self._core.services.auth.signup(request)
        except AuthError as e:
            return AuthFailure.from_error(e)
        return AuthSuccess(session_id=session_id, user=user)

    async def login(self, request: LoginRequest) -> AuthResult:
        """Authenticate by email and password and open a session."""
        try:
            session_id, user = await self._core.services.auth.login(request)
        except AuthError as e:
            return AuthFailure.from_error(e)
        return AuthSuccess(session_id=session_id, user=user)

    async def logout(self, session_id: SessionId | None) -> None:
        """End the session. Always succeeds."""
        await self._core.services.auth.logout(session_id)

    async def get_session_user(self, session_id: SessionId | None) -> SessionUser | None:
        """Get the user of a live session, None when anonymous."""
        return await self._core.services.auth.get_session_user(session_id)

    async def get_member_image(self, session_id: SessionId | None) -> tuple[SessionUser, str]:
        """Members-only content: the current user and a random picture."""
        user = await self.get_session_user(session_id)
        if user is None:
            raise AuthenticationError
        return user, random.choice(self._core.config.member_images)  # noqa: S311
