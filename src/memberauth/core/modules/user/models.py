from pydantic import BaseModel, Field

from memberauth.core.db import MongoModel


class User(MongoModel):
    """User domain model with credentials."""

    name: str
    email: str  # unique, compared exactly as stored
    password_hash: str  # bcrypt hash


class SignupRequest(BaseModel):
    """Untrusted signup form input. Fields may be missing."""

    name: str | None = Field(None, description="Display name, 2-30 letters or digits")
    email: str | None = Field(None, description="Email address, used as login")
    password: str | None = Field(None, description="Password, 5-50 characters")


class LoginRequest(BaseModel):
    """Untrusted login form input. Fields may be missing."""

    email: str | None = Field(None, description="Email address")
    password: str | None = Field(None, description="Password")
