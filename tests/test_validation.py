import pytest

from use_cases.validation import validate_reset, validate_sign_in, validate_sign_up


def _sign_up(**overrides):
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "username": "ada",
        "email": "ada@example.com",
        "password": "secret1",
        "confirm_password": "secret1",
    }
    fields.update(overrides)
    return validate_sign_up(**fields)


def test_valid_sign_up_has_no_errors():
    assert _sign_up() == {}


def test_all_empty_sign_up_reports_every_required_field():
    errors = validate_sign_up("", "", "", "", "", "")
    assert errors == {
        "first_name": "First name is required",
        "last_name": "Last name is required",
        "username": "Username is required",
        "email": "Email is required",
        "password": "Password is required",
    }


@pytest.mark.parametrize("field_name", ["first_name", "last_name", "username", "email"])
def test_single_empty_required_field(field_name):
    errors = _sign_up(**{field_name: ""})
    assert list(errors) == [field_name]
    assert errors[field_name].endswith("is required")


def test_short_matching_password_only_reports_length():
    errors = _sign_up(password="abc", confirm_password="abc")
    assert errors == {"password": "Password must be at least 6 characters"}


def test_password_length_boundary():
    assert "password" not in _sign_up(password="abcdef", confirm_password="abcdef")
    assert "password" in _sign_up(password="abcde", confirm_password="abcde")


def test_mismatch_only_on_confirm_password():
    errors = _sign_up(password="abcdef", confirm_password="abcxyz")
    assert errors == {"confirm_password": "Passwords do not match"}


def test_empty_password_keeps_required_message():
    errors = _sign_up(password="", confirm_password="")
    assert errors == {"password": "Password is required"}


def test_empty_password_with_confirmation_reports_both():
    errors = _sign_up(password="", confirm_password="something")
    assert errors["password"] == "Password is required"
    assert errors["confirm_password"] == "Passwords do not match"


def test_reset_requires_email():
    assert validate_reset("") == {"email": "Email is required"}
    assert validate_reset("a@b.c") == {}


def test_sign_in_has_no_local_rules():
    assert validate_sign_in("", "") == {}
