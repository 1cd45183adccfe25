"""Field validation for the three forms.

Every rule for a mode runs before returning, so the user sees all of the
problems with a form at once. Within one field the "required" message
always wins over format or length messages.
"""
import re

from ..config import MIN_PASSWORD_LENGTH
from .models import (
    Buffer,
    FormMode,
    RegisterBuffer,
    ResetBuffer,
    SignInBuffer,
)

# local@domain.tld with no whitespace anywhere; used with fullmatch()
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

TERMS_KEY = "terms"

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
CONFIRM_REQUIRED = "Please confirm your password"
PASSWORDS_MISMATCH = "Passwords do not match"
FIRST_NAME_REQUIRED = "First name is required"
LAST_NAME_REQUIRED = "Last name is required"
TERMS_REQUIRED = "You must agree to the Terms of Service and Privacy Policy"


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def _check_email(email: str, errors: dict[str, str]) -> None:
    if not email:
        errors["email"] = EMAIL_REQUIRED
    elif not is_valid_email(email):
        errors["email"] = EMAIL_INVALID


def validate_sign_in(buffer: SignInBuffer) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_email(buffer.email, errors)
    # No strength rule: existing accounts may predate it
    if not buffer.password:
        errors["password"] = PASSWORD_REQUIRED
    return errors


def validate_register(buffer: RegisterBuffer, terms_accepted: bool) -> dict[str, str]:
    errors: dict[str, str] = {}

    if not buffer.first_name.strip():
        errors["first_name"] = FIRST_NAME_REQUIRED
    if not buffer.last_name.strip():
        errors["last_name"] = LAST_NAME_REQUIRED

    _check_email(buffer.email, errors)

    if not buffer.password:
        errors["password"] = PASSWORD_REQUIRED
    elif len(buffer.password) < MIN_PASSWORD_LENGTH:
        errors["password"] = PASSWORD_TOO_SHORT

    if not buffer.confirm_password:
        errors["confirm_password"] = CONFIRM_REQUIRED
    elif buffer.password != buffer.confirm_password:
        errors["confirm_password"] = PASSWORDS_MISMATCH

    if not terms_accepted:
        errors[TERMS_KEY] = TERMS_REQUIRED

    return errors


def validate_reset(buffer: ResetBuffer) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_email(buffer.email, errors)
    return errors


def validate(mode: FormMode, buffer: Buffer, terms_accepted: bool = False) -> dict[str, str]:
    """Return the error set for `buffer` under `mode`'s rules.

    An empty dict means the form may be submitted. `terms_accepted` only
    matters for registration.

    Raises:
        TypeError: if `buffer` is not the buffer type `mode` owns
    """
    if mode == FormMode.SIGN_IN and isinstance(buffer, SignInBuffer):
        return validate_sign_in(buffer)
    if mode == FormMode.REGISTER and isinstance(buffer, RegisterBuffer):
        return validate_register(buffer, terms_accepted)
    if mode == FormMode.RESET_REQUEST and isinstance(buffer, ResetBuffer):
        return validate_reset(buffer)
    raise TypeError(f"{type(buffer).__name__} is not the buffer for {mode.value}")
