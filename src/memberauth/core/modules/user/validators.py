import re

from email_validator import EmailNotValidError, validate_email

from memberauth.core.modules.user.models import LoginRequest, SignupRequest
from memberauth.errors import MissingFieldsError, ValidationError

ALPHANUM_RE = re.compile(r"^[a-zA-Z0-9]+$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 5
PASSWORD_MAX_LENGTH = 50


def _validate_length(field: str, value: str, min_length: int, max_length: int) -> None:
    if len(value) < min_length:
        raise ValidationError(f'"{field}" length must be at least {min_length} characters long')
    if len(value) > max_length:
        raise ValidationError(f'"{field}" length must be less than or equal to {max_length} characters long')


def validate_name(name: str) -> None:
    """Validate display name: ASCII letters and digits, 2-30 characters.

    Raises:
        ValidationError: If name doesn't meet requirements
    """
    if not ALPHANUM_RE.fullmatch(name):
        raise ValidationError('"name" must only contain alpha-numeric characters')
    _validate_length("name", name, NAME_MIN_LENGTH, NAME_MAX_LENGTH)


def validate_email_address(email: str) -> None:
    """Validate email syntax only, no DNS lookups."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError('"email" must be a valid email') from e


def validate_password(password: str) -> None:
    """Validate password length. Any characters are allowed."""
    _validate_length("password", password, PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH)


def validate_signup(request: SignupRequest) -> tuple[str, str, str]:
    """Check presence, then structure, of signup fields.

    The first violated rule wins, in field order: name, email, password.

    Returns:
        The (name, email, password) triple, guaranteed present and valid.

    Raises:
        MissingFieldsError: If any field is absent or empty
        ValidationError: If a field is present but malformed
    """
    if not request.name or not request.email or not request.password:
        raise MissingFieldsError("Please fill in all fields.")

    validate_name(request.name)
    validate_email_address(request.email)
    validate_password(request.password)
    return request.name, request.email, request.password


def validate_login(request: LoginRequest) -> tuple[str, str]:
    """Check presence, then structure, of login fields. Name is not involved."""
    if not request.email or not request.password:
        raise MissingFieldsError("Please enter both email and password.")

    validate_email_address(request.email)
    validate_password(request.password)
    return request.email, request.password
