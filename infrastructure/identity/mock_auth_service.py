import asyncio
import logging

import auth
from use_cases.session_models import SignInResult, SignUpPayload, User

log = logging.getLogger(__name__)

DEMO_EMAIL = "demo@morse.app"
DEMO_PASSWORD = "demo123"
DEMO_USER = User(id=1, email=DEMO_EMAIL, first_name="John", last_name="Doe", username="johndoe")
DEMO_TOKEN = "mock-jwt-token"
REGISTERED_EMAILS = frozenset({"test@example.com"})


class MockAuthService:
    """In-process stand-in for the auth backend with a fixed demo account."""

    def __init__(self, delay: float = 1.0):
        self.delay = delay

    async def _latency(self):
        if self.delay > 0:
            await asyncio.sleep(self.delay)

    async def sign_up(self, payload: SignUpPayload) -> None:
        await self._latency()
        if payload.email in REGISTERED_EMAILS:
            raise auth.AccountExistsError("User already exists")
        log.info(f"Demo account created for {payload.username}")

    async def sign_in(self, email: str, password: str) -> SignInResult:
        await self._latency()
        if email == DEMO_EMAIL and password == DEMO_PASSWORD:
            return SignInResult(user=DEMO_USER, token=DEMO_TOKEN)
        raise auth.InvalidCredentialsError("Invalid credentials")

    async def reset_password(self, email: str) -> None:
        await self._latency()
        log.info("Demo password reset requested")
