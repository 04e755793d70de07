import pytest

from use_cases.form_models import (
    ResetFormState,
    SignInFormState,
    SignUpFormState,
    apply_field_edit,
    new_form,
)
from use_cases.session_models import Screen


def test_new_form_per_screen():
    assert new_form(Screen.SIGN_IN) == SignInFormState()
    assert new_form(Screen.SIGN_UP) == SignUpFormState()
    assert new_form(Screen.RESET) == ResetFormState()
    assert new_form(Screen.DASHBOARD) is None


def test_apply_field_edit_returns_new_form_and_clears_field_error():
    form = SignUpFormState(
        field_errors={"email": "Email is required", "username": "Username is required"},
        general_error="User already exists",
    )
    edited = apply_field_edit(form, "email", "ada@example.com")

    assert edited is not form
    assert edited.email == "ada@example.com"
    assert edited.field_errors == {"username": "Username is required"}
    assert edited.general_error == "User already exists"
    # original untouched
    assert form.email == ""
    assert "email" in form.field_errors


def test_apply_field_edit_on_reset_clears_error():
    form = ResetFormState(error="Email is required")
    edited = apply_field_edit(form, "email", "ada@example.com")
    assert edited == ResetFormState(email="ada@example.com")


def test_apply_field_edit_rejects_unknown_field():
    with pytest.raises(ValueError):
        apply_field_edit(SignInFormState(), "username", "ada")


def test_field_errors_must_name_form_fields():
    with pytest.raises(ValueError):
        SignInFormState(field_errors={"first_name": "First name is required"})
