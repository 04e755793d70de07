import logging
import os
from typing import Protocol

import streamlit as st

from use_cases.session_models import SignInResult, SignUpPayload

log = logging.getLogger(__name__)


class AuthServiceError(Exception):
    pass


class AccountExistsError(AuthServiceError):
    pass


class InvalidCredentialsError(AuthServiceError):
    pass


DEFAULT_API_TIMEOUT = 10
DEFAULT_MOCK_DELAY = 1.0


class AuthServiceClient(Protocol):
    async def sign_up(self, payload: SignUpPayload) -> None:
        ...

    async def sign_in(self, email: str, password: str) -> SignInResult:
        ...

    async def reset_password(self, email: str) -> None:
        ...


def get_secret(key):
    try:
        value = st.secrets.get(key)
    except FileNotFoundError:
        value = None
    if value is None:
        value = os.getenv(key)
    return value


def parse_float(key, raw, default):
    if raw in (None, ""):
        return default
    try:
        return float(raw)
    except (TypeError, ValueError):
        log.warning("Ignoring invalid %s=%r, using %s", key, raw, default)
        return default


def _float_setting(key, default):
    return parse_float(key, get_secret(key), default)


def build_auth_service() -> AuthServiceClient:
    """HTTP client when AUTH_API_URL is configured, demo service otherwise."""
    base_url = get_secret("AUTH_API_URL")
    if base_url:
        from infrastructure.identity.http_auth_service import HttpAuthService

        timeout = _float_setting("AUTH_API_TIMEOUT", DEFAULT_API_TIMEOUT)
        log.info("Using HTTP auth service at %s", base_url)
        return HttpAuthService(base_url, timeout=timeout)

    from infrastructure.identity.mock_auth_service import MockAuthService

    delay = _float_setting("AUTH_MOCK_DELAY", DEFAULT_MOCK_DELAY)
    log.info("AUTH_API_URL not set. Using demo auth service (delay %.1fs)", delay)
    return MockAuthService(delay=delay)


@st.cache_resource
def get_auth_service() -> AuthServiceClient:
    # one client per server process, shared by browser sessions
    return build_auth_service()
