from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie

from memberauth.app import App
from memberauth.config import Config
from memberauth.core.modules.session.models import SessionId

SESSION_COOKIE = "session_id"

cookie_scheme = APIKeyCookie(name=SESSION_COOKIE, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_config(request: Request) -> Config:
    return cast(Config, request.app.state.config)


async def get_session_id(session_cookie: Annotated[str | None, Depends(cookie_scheme)] = None) -> SessionId | None:
    """Get the session id from the cookie, if any. Not checked against the store."""
    if not session_cookie:
        return None
    return SessionId(session_cookie)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ConfigDep = Annotated[Config, Depends(get_config)]
SessionIdDep = Annotated[SessionId | None, Depends(get_session_id)]
