from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from memberauth.core.modules.auth.models import AuthFailure
from memberauth.core.modules.session.models import SESSION_TTL, SessionId
from memberauth.core.modules.user.models import LoginRequest, SignupRequest
from memberauth.web.deps import SESSION_COOKIE, AppDep, ConfigDep, SessionIdDep
from memberauth.web.error_handlers import auth_failure_response
from memberauth.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class SessionUserResponse(BaseModel):
    """User of the session just opened."""

    name: str = Field(..., description="Display name")


def set_session_cookie(response: Response, session_id: SessionId, secure: bool) -> None:
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_id,
        httponly=True,
        samesite="lax",
        secure=secure,
        max_age=int(SESSION_TTL.total_seconds()),  # match session TTL
    )


@router.post(
    "/auth/signup",
    summary="Create account",
    description="Register with name, email and password. Opens a session on success.",
    operation_id="signup",
    response_model=SessionUserResponse,
    responses={
        200: {"description": "Account created, session cookie set"},
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def signup(
    signup_data: SignupRequest, app: AppDep, config: ConfigDep, response: Response
) -> SessionUserResponse | JSONResponse:
    result = await app.signup(signup_data)
    if isinstance(result, AuthFailure):
        return auth_failure_response(result)

    set_session_cookie(response, result.session_id, secure=config.cookie_secure)
    return SessionUserResponse(name=result.user.name)


@router.post(
    "/auth/login",
    summary="Authenticate user",
    description="Authenticate with email and password. Opens a session on success.",
    operation_id="login",
    response_model=SessionUserResponse,
    responses={
        200: {"description": "Successfully authenticated, session cookie set"},
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    login_data: LoginRequest, app: AppDep, config: ConfigDep, response: Response
) -> SessionUserResponse | JSONResponse:
    result = await app.login(login_data)
    if isinstance(result, AuthFailure):
        return auth_failure_response(result)

    set_session_cookie(response, result.session_id, secure=config.cookie_secure)
    return SessionUserResponse(name=result.user.name)


@router.post(
    "/auth/logout",
    summary="End session",
    description="Destroy the current session, if any. Always succeeds.",
    operation_id="logout",
    status_code=204,
    responses={204: {"description": "Logged out"}},
)
async def logout(app: AppDep, session_id: SessionIdDep) -> Response:
    await app.logout(session_id)
    response = Response(status_code=204)
    response.delete_cookie(SESSION_COOKIE)
    return response

