"""Local form validation rules, evaluated before any remote call."""

from typing import Dict

MIN_PASSWORD_LENGTH = 6

FieldErrors = Dict[str, str]


def validate_sign_in(email: str, password: str) -> FieldErrors:
    # Sign-in is validated by the auth service only.
    return {}


def validate_sign_up(
    first_name: str,
    last_name: str,
    username: str,
    email: str,
    password: str,
    confirm_password: str,
) -> FieldErrors:
    """Run every sign-up rule and report all failures together."""
    errors: FieldErrors = {}

    if not first_name:
        errors["first_name"] = "First name is required"
    if not last_name:
        errors["last_name"] = "Last name is required"
    if not username:
        errors["username"] = "Username is required"
    if not email:
        errors["email"] = "Email is required"
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if password != confirm_password:
        errors["confirm_password"] = "Passwords do not match"

    return errors


def validate_reset(email: str) -> FieldErrors:
    if not email:
        return {"email": "Email is required"}
    return {}
