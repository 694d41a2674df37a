from typing import Literal

from pydantic import BaseModel

from memberauth.core.modules.session.models import SessionId, SessionUser
from memberauth.errors import AuthError, AuthErrorKind


class AuthSuccess(BaseModel):
    """Signup or login succeeded and a session was issued."""

    ok: Literal[True] = True
    session_id: SessionId
    user: SessionUser


class AuthFailure(BaseModel):
    """Signup or login failed with an expected, user-correctable outcome."""

    ok: Literal[False] = False
    kind: AuthErrorKind
    message: str

    @classmethod
    def from_error(cls, error: AuthError) -> "AuthFailure":
        return cls(kind=error.kind, message=str(error))


# Check `ok` to tell the two apart
type AuthResult = AuthSuccess | AuthFailure
