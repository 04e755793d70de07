import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

import auth
from infrastructure.identity.mock_auth_service import DEMO_USER, MockAuthService
from use_cases.auth_flow import AuthFlow, NavigationGuardError
from use_cases.form_models import ResetFormState, SignInFormState, SignUpFormState
from use_cases.session_models import Screen, SignInResult


def _fake_service():
    service = MagicMock()
    service.sign_in = AsyncMock(return_value=SignInResult(user=DEMO_USER, token="t"))
    service.sign_up = AsyncMock(return_value=None)
    service.reset_password = AsyncMock(return_value=None)
    return service


def _fill(flow, **fields):
    for name, value in fields.items():
        flow.edit_field(name, value)


VALID_SIGN_UP = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "username": "ada",
    "email": "ada@example.com",
    "password": "secret1",
    "confirm_password": "secret1",
}


def test_starts_on_sign_in_with_fresh_form():
    flow = AuthFlow(_fake_service())
    assert flow.current_screen() is Screen.SIGN_IN
    assert flow.form == SignInFormState()
    assert flow.session.current_user() is None


def test_sign_in_success_opens_dashboard():
    flow = AuthFlow(MockAuthService(delay=0))
    _fill(flow, email="demo@morse.app", password="demo123")

    result = asyncio.run(flow.submit_sign_in())

    assert result.status == "DONE"
    assert flow.session.current_user() == DEMO_USER
    assert flow.current_screen() is Screen.DASHBOARD
    assert flow.is_loading() is False


def test_sign_in_failure_sets_general_error():
    flow = AuthFlow(MockAuthService(delay=0))
    _fill(flow, email="demo@morse.app", password="wrong")

    result = asyncio.run(flow.submit_sign_in())

    assert result.status == "FAILED"
    assert flow.form.general_error == "Invalid credentials"
    assert flow.form.field_errors == {}
    assert flow.current_screen() is Screen.SIGN_IN
    assert flow.session.current_user() is None
    assert flow.is_loading() is False


def test_empty_sign_in_is_forwarded_to_service():
    service = _fake_service()
    service.sign_in.side_effect = auth.InvalidCredentialsError("Invalid credentials")
    flow = AuthFlow(service)

    asyncio.run(flow.submit_sign_in())

    service.sign_in.assert_awaited_once_with("", "")


def test_sign_up_with_empty_fields_never_calls_service():
    service = _fake_service()
    flow = AuthFlow(service)
    flow.navigate(Screen.SIGN_UP)
    _fill(flow, first_name="Ada", email="ada@example.com")

    result = asyncio.run(flow.submit_sign_up())

    assert result.status == "INVALID"
    assert set(flow.form.field_errors) == {"last_name", "username", "password"}
    service.sign_up.assert_not_called()


def test_sign_up_existing_account_sets_general_error():
    flow = AuthFlow(MockAuthService(delay=0))
    flow.navigate(Screen.SIGN_UP)
    _fill(flow, **dict(VALID_SIGN_UP, email="test@example.com"))

    result = asyncio.run(flow.submit_sign_up())

    assert result.status == "FAILED"
    assert flow.form.general_error == "User already exists"
    assert flow.form.succeeded is False


def test_sign_up_success_waits_for_acknowledgment():
    service = _fake_service()
    flow = AuthFlow(service)
    flow.navigate(Screen.SIGN_UP)
    _fill(flow, **VALID_SIGN_UP)

    result = asyncio.run(flow.submit_sign_up())

    assert result.status == "DONE"
    assert flow.current_screen() is Screen.SIGN_UP
    assert flow.form.succeeded is True
    payload = service.sign_up.await_args.args[0]
    assert payload.email == "ada@example.com"

    assert flow.acknowledge_sign_up() is True
    assert flow.current_screen() is Screen.SIGN_IN
    assert flow.form == SignInFormState()


def test_acknowledge_without_success_does_nothing():
    flow = AuthFlow(_fake_service())
    flow.navigate(Screen.SIGN_UP)
    assert flow.acknowledge_sign_up() is False
    assert flow.current_screen() is Screen.SIGN_UP


def test_reset_with_empty_email_is_local_error():
    service = _fake_service()
    flow = AuthFlow(service)
    flow.navigate(Screen.RESET)

    result = asyncio.run(flow.submit_reset())

    assert result.status == "INVALID"
    assert flow.form.error == "Email is required"
    service.reset_password.assert_not_called()


def test_reset_calls_service_once_and_succeeds():
    service = _fake_service()
    flow = AuthFlow(service)
    flow.navigate(Screen.RESET)
    flow.edit_field("email", "ada@example.com")

    result = asyncio.run(flow.submit_reset())

    assert result.status == "DONE"
    service.reset_password.assert_awaited_once_with("ada@example.com")
    assert flow.form == ResetFormState(email="ada@example.com", succeeded=True)


def test_reset_failure_reported_on_form():
    service = _fake_service()
    service.reset_password.side_effect = auth.AuthServiceError("HTTP 500")
    flow = AuthFlow(service)
    flow.navigate(Screen.RESET)
    flow.edit_field("email", "ada@example.com")

    result = asyncio.run(flow.submit_reset())

    assert result.status == "FAILED"
    assert flow.form.error == "HTTP 500"
    assert flow.form.succeeded is False


def test_navigation_recreates_forms():
    flow = AuthFlow(_fake_service())
    flow.edit_field("email", "ada@example.com")
    flow.navigate(Screen.RESET)
    flow.navigate(Screen.SIGN_IN)
    assert flow.form == SignInFormState()


def test_navigate_to_same_screen_is_idempotent():
    flow = AuthFlow(_fake_service())
    flow.edit_field("email", "ada@example.com")
    session_before = flow.session.snapshot()

    flow.navigate(Screen.SIGN_IN)
    flow.navigate(Screen.SIGN_IN)

    assert flow.current_screen() is Screen.SIGN_IN
    assert flow.form.email == "ada@example.com"
    assert flow.session.snapshot() == session_before


def test_dashboard_requires_user():
    flow = AuthFlow(_fake_service())
    with pytest.raises(NavigationGuardError):
        flow.navigate(Screen.DASHBOARD)
    assert flow.current_screen() is Screen.SIGN_IN


def test_sign_out_clears_session_and_returns_to_sign_in():
    flow = AuthFlow(MockAuthService(delay=0))
    _fill(flow, email="demo@morse.app", password="demo123")
    asyncio.run(flow.submit_sign_in())

    flow.sign_out()

    assert flow.session.current_user() is None
    assert flow.current_screen() is Screen.SIGN_IN
    assert flow.form == SignInFormState()


def test_submit_ignored_while_loading():
    service = _fake_service()
    flow = AuthFlow(service)
    flow.session.set_loading(True)

    result = asyncio.run(flow.submit_sign_in())

    assert result.status == "BUSY"
    service.sign_in.assert_not_called()


def test_outcome_dropped_when_user_navigated_away():
    service = _fake_service()
    flow = AuthFlow(service)

    async def navigate_mid_flight(email, password):
        flow.navigate(Screen.RESET)
        return SignInResult(user=DEMO_USER, token="t")

    service.sign_in.side_effect = navigate_mid_flight
    result = asyncio.run(flow.submit_sign_in())

    assert result.status == "STALE"
    assert flow.session.current_user() is None
    assert flow.current_screen() is Screen.RESET
    assert flow.form == ResetFormState()
    assert flow.is_loading() is False


def test_outcome_dropped_after_leaving_and_returning():
    service = _fake_service()
    flow = AuthFlow(service)
    flow.navigate(Screen.RESET)
    flow.edit_field("email", "ada@example.com")

    async def round_trip(email):
        flow.navigate(Screen.SIGN_IN)
        flow.navigate(Screen.RESET)
        raise auth.AuthServiceError("HTTP 500")

    service.reset_password.side_effect = round_trip
    result = asyncio.run(flow.submit_reset())

    assert result.status == "STALE"
    assert flow.form == ResetFormState()


def test_submit_on_wrong_screen_is_rejected():
    flow = AuthFlow(_fake_service())
    with pytest.raises(RuntimeError):
        asyncio.run(flow.submit_reset())


def test_edit_on_dashboard_is_rejected():
    flow = AuthFlow(MockAuthService(delay=0))
    _fill(flow, email="demo@morse.app", password="demo123")
    asyncio.run(flow.submit_sign_in())
    with pytest.raises(ValueError):
        flow.edit_field("email", "x")
