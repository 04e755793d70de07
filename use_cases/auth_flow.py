"""Authentication flow orchestration (application layer).

``AuthFlow`` is the composing caller for the core components: it owns the
session, the navigation state machine, the active screen's form and the
request runner, and turns user actions into state transitions.

Guarantees provided here rather than by the components themselves:

* the dashboard is entered only while the session holds a user;
* no request is dispatched while another one is in flight;
* a request outcome is applied only if the screen visit that dispatched it
  is still the active one.
"""

import logging
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Literal, Optional, Type, TypeVar, Union

from .form_models import (
    FormState,
    ResetFormState,
    SignInFormState,
    SignUpFormState,
    apply_field_edit,
    new_form,
)
from .navigation import NavigationController
from .request_runner import AsyncRequestRunner, RequestOutcome
from .session_models import Screen, SignUpPayload, is_authenticated
from .session_store import SessionStore
from .validation import validate_reset, validate_sign_in, validate_sign_up

log = logging.getLogger(__name__)

SubmitStatus = Literal["DONE", "INVALID", "FAILED", "BUSY", "STALE"]

F = TypeVar("F", SignInFormState, SignUpFormState, ResetFormState)
T = TypeVar("T")


class NavigationGuardError(RuntimeError):
    """Raised when the dashboard is requested without a signed-in user."""


@dataclass(frozen=True)
class SubmitResult:
    """Result contract for a form submission."""

    status: SubmitStatus
    reason: str = ""


BUSY = SubmitResult(status="BUSY", reason="request_in_flight")
STALE = SubmitResult(status="STALE", reason="screen_changed")


class AuthFlow:
    def __init__(
        self,
        service,
        session: Optional[SessionStore] = None,
        navigation: Optional[NavigationController] = None,
    ) -> None:
        self.service = service
        self.session = session if session is not None else SessionStore()
        self.navigation = navigation if navigation is not None else NavigationController()
        self.runner = AsyncRequestRunner(self.session)
        self._form: Optional[FormState] = new_form(self.navigation.current_screen())
        self._visit = 0

    # ------------------------------------------------------------------ state
    @property
    def form(self) -> Optional[FormState]:
        return self._form

    def current_screen(self) -> Screen:
        return self.navigation.current_screen()

    def is_loading(self) -> bool:
        return self.session.is_loading()

    # ------------------------------------------------------------- navigation
    def navigate(self, screen: Union[Screen, str]) -> None:
        target = Screen(screen)
        if target is Screen.DASHBOARD and not is_authenticated(self.session.snapshot()):
            raise NavigationGuardError("Dashboard requires a signed-in user")
        if target is self.navigation.current_screen():
            return
        self._show(target)

    def _show(self, screen: Screen) -> None:
        self.navigation.navigate_to(screen)
        self._form = new_form(screen)
        self._visit += 1

    def sign_out(self) -> None:
        self.session.clear()
        self._show(Screen.SIGN_IN)

    # ----------------------------------------------------------------- edits
    def edit_field(self, field_name: str, value: str) -> None:
        if self._form is None:
            raise ValueError(f"Screen {self.current_screen().value!r} has no form")
        self._form = apply_field_edit(self._form, field_name, value)

    def _active_form(self, form_cls: Type[F]) -> F:
        if not isinstance(self._form, form_cls):
            raise RuntimeError(
                f"{form_cls.__name__} is not active on screen {self.current_screen().value!r}"
            )
        return self._form

    # -------------------------------------------------------------- requests
    def _busy(self) -> bool:
        if self.session.is_loading():
            log.warning("Submit ignored: a request is already in flight")
            return True
        return False

    async def _dispatch(self, operation: Callable[[], Awaitable[T]]) -> Optional[RequestOutcome[T]]:
        """Run ``operation``; ``None`` when the dispatching screen visit has ended."""
        dispatched_on = (self.navigation.current_screen(), self._visit)
        outcome = await self.runner.run(operation)

        if (self.navigation.current_screen(), self._visit) != dispatched_on:
            log.info("Dropping outcome for %s: screen is no longer active", dispatched_on[0].value)
            return None
        return outcome

    async def submit_sign_in(self) -> SubmitResult:
        form = self._active_form(SignInFormState)
        if self._busy():
            return BUSY

        self._form = replace(form, field_errors=validate_sign_in(form.email, form.password), general_error=None)
        email, password = form.email, form.password
        outcome = await self._dispatch(lambda: self.service.sign_in(email, password))
        if outcome is None:
            return STALE

        if not outcome.ok:
            self._form = replace(self._form, general_error=outcome.error_message)
            return SubmitResult(status="FAILED", reason=outcome.error_message)

        self.session.set_user(outcome.result.user)
        self._show(Screen.DASHBOARD)
        return SubmitResult(status="DONE", reason="signed_in")

    async def submit_sign_up(self) -> SubmitResult:
        form = self._active_form(SignUpFormState)
        if self._busy():
            return BUSY

        errors = validate_sign_up(
            form.first_name,
            form.last_name,
            form.username,
            form.email,
            form.password,
            form.confirm_password,
        )
        self._form = replace(form, field_errors=errors, general_error=None, succeeded=False)
        if errors:
            return SubmitResult(status="INVALID", reason="validation_failed")

        payload = SignUpPayload(
            first_name=form.first_name,
            last_name=form.last_name,
            username=form.username,
            email=form.email,
            password=form.password,
        )
        outcome = await self._dispatch(lambda: self.service.sign_up(payload))
        if outcome is None:
            return STALE

        if not outcome.ok:
            self._form = replace(self._form, general_error=outcome.error_message)
            return SubmitResult(status="FAILED", reason=outcome.error_message)

        self._form = replace(self._form, succeeded=True)
        return SubmitResult(status="DONE", reason="account_created")

    def acknowledge_sign_up(self) -> bool:
        """Leave the sign-up screen for sign-in once the user saw the confirmation."""
        if not (isinstance(self._form, SignUpFormState) and self._form.succeeded):
            return False
        self._show(Screen.SIGN_IN)
        return True

    async def submit_reset(self) -> SubmitResult:
        form = self._active_form(ResetFormState)
        if self._busy():
            return BUSY

        errors = validate_reset(form.email)
        if errors:
            self._form = replace(form, error=errors["email"], succeeded=False)
            return SubmitResult(status="INVALID", reason="validation_failed")

        self._form = replace(form, error=None)
        email = form.email
        outcome = await self._dispatch(lambda: self.service.reset_password(email))
        if outcome is None:
            return STALE

        if not outcome.ok:
            self._form = replace(self._form, error=outcome.error_message)
            return SubmitResult(status="FAILED", reason=outcome.error_message)

        self._form = replace(self._form, succeeded=True)
        return SubmitResult(status="DONE", reason="reset_requested")
