"""Application layer contracts for orchestrating the authentication flow."""

from .auth_flow import AuthFlow, NavigationGuardError, SubmitResult, SubmitStatus
from .form_models import FormState, ResetFormState, SignInFormState, SignUpFormState, apply_field_edit, new_form
from .navigation import NavigationController
from .request_runner import AsyncRequestRunner, RequestOutcome
from .session_models import Screen, Session, SignInResult, SignUpPayload, User, is_authenticated
from .session_store import SessionStore
from .validation import validate_reset, validate_sign_in, validate_sign_up

__all__ = [
    "AsyncRequestRunner",
    "AuthFlow",
    "FormState",
    "NavigationController",
    "NavigationGuardError",
    "RequestOutcome",
    "ResetFormState",
    "Screen",
    "Session",
    "SessionStore",
    "SignInFormState",
    "SignInResult",
    "SignUpFormState",
    "SignUpPayload",
    "SubmitResult",
    "SubmitStatus",
    "User",
    "apply_field_edit",
    "is_authenticated",
    "new_form",
    "validate_reset",
    "validate_sign_in",
    "validate_sign_up",
]
