"""Session management models."""

import secrets
from datetime import datetime, timedelta
from typing import NewType

from pydantic import BaseModel, Field

from memberauth.core.db import MongoModel
from memberauth.utils import now

SessionId = NewType("SessionId", str)

# Fixed lifetime, counted from creation and never extended
SESSION_TTL = timedelta(hours=1)


def new_session_id() -> SessionId:
    return SessionId(secrets.token_urlsafe(32))


class SessionUser(BaseModel):
    """Identity snapshot stored in a session, copied from the user at issuance."""

    name: str = Field(..., description="Display name")


class Session(MongoModel):
    """Server-side session.

    Indexed on session_id - unique, expires_at - TTL.
    """

    session_id: str = Field(default_factory=new_session_id)
    user: SessionUser
    created_at: datetime = Field(default_factory=now)
    expires_at: datetime
