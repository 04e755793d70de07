"""Per-screen form state. Every edit produces a new, fully specified form value."""

from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, Optional, Tuple, Union

from .session_models import Screen


def _check_error_keys(form, errors: Dict[str, str]) -> None:
    unknown = set(errors) - set(form.FIELDS)
    if unknown:
        raise ValueError(f"{type(form).__name__} has no field(s): {', '.join(sorted(unknown))}")


@dataclass(frozen=True)
class SignInFormState:
    FIELDS: ClassVar[Tuple[str, ...]] = ("email", "password")

    email: str = ""
    password: str = ""
    field_errors: Dict[str, str] = field(default_factory=dict)
    general_error: Optional[str] = None

    def __post_init__(self) -> None:
        _check_error_keys(self, self.field_errors)


@dataclass(frozen=True)
class SignUpFormState:
    FIELDS: ClassVar[Tuple[str, ...]] = (
        "first_name",
        "last_name",
        "username",
        "email",
        "password",
        "confirm_password",
    )

    first_name: str = ""
    last_name: str = ""
    username: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    field_errors: Dict[str, str] = field(default_factory=dict)
    general_error: Optional[str] = None
    # Account created, waiting for the user to acknowledge before leaving.
    succeeded: bool = False

    def __post_init__(self) -> None:
        _check_error_keys(self, self.field_errors)


@dataclass(frozen=True)
class ResetFormState:
    FIELDS: ClassVar[Tuple[str, ...]] = ("email",)

    email: str = ""
    error: Optional[str] = None
    succeeded: bool = False


FormState = Union[SignInFormState, SignUpFormState, ResetFormState]

_FORMS_BY_SCREEN = {
    Screen.SIGN_IN: SignInFormState,
    Screen.SIGN_UP: SignUpFormState,
    Screen.RESET: ResetFormState,
}


def new_form(screen: Screen) -> Optional[FormState]:
    """Fresh, empty form for a screen. The dashboard has none."""
    form_cls = _FORMS_BY_SCREEN.get(Screen(screen))
    return form_cls() if form_cls is not None else None


def apply_field_edit(form: FormState, field_name: str, value: str) -> FormState:
    """Return a copy of ``form`` with one field replaced and its error cleared."""
    if field_name not in form.FIELDS:
        raise ValueError(f"{type(form).__name__} has no field {field_name!r}")

    if isinstance(form, ResetFormState):
        return replace(form, **{field_name: value, "error": None})

    errors = {k: v for k, v in form.field_errors.items() if k != field_name}
    return replace(form, **{field_name: value, "field_errors": errors})
