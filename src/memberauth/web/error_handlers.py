import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from memberauth.core.modules.auth.models import AuthFailure
from memberauth.errors import AuthenticationError, AuthError, AuthErrorKind

logger = structlog.get_logger(__name__)

AUTH_FAILURE_STATUS = {
    AuthErrorKind.MISSING_FIELDS: 400,
    AuthErrorKind.VALIDATION_ERROR: 400,
    AuthErrorKind.DUPLICATE_EMAIL: 409,
    AuthErrorKind.INVALID_CREDENTIALS: 401,
}


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


def auth_failure_response(failure: AuthFailure) -> JSONResponse:
    """Render a failed signup or login for display."""
    return create_json_error_response(
        status_code=AUTH_FAILURE_STATUS[failure.kind], message=failure.message, error_type=failure.kind.value
    )


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    if isinstance(exc, AuthError):
        return auth_failure_response(AuthFailure.from_error(exc))

    if isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    else:
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type)


async def http_exception_handler(_: Request, exc: Exception) -> Response:
    """Render routing errors (unknown path, wrong method) in the common format."""
    assert isinstance(exc, StarletteHTTPException)
    if exc.status_code == 404:
        return create_json_error_response(status_code=404, message="Page not found", error_type="not_found")
    return create_json_error_response(status_code=exc.status_code, message=str(exc.detail), error_type="http_error")


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )


async def request_validation_handler(_: Request, exc: Exception) -> Response:
    """Reject bodies that are not a JSON object of strings."""
    assert isinstance(exc, RequestValidationError)
    return create_json_error_response(
        status_code=400, message="Request body must be a JSON object of strings.", error_type="bad_request"
    )
