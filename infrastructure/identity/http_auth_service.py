import asyncio
import logging
from typing import Any, Dict

import requests

import auth
from use_cases.session_models import SignInResult, SignUpPayload, User

log = logging.getLogger(__name__)


class HttpAuthService:
    """JSON-over-HTTP client for the auth backend.

    requests is blocking, so every call runs in a worker thread and the
    event loop stays free while the request is in flight.
    """

    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _post(self, path: str, payload: Dict[str, Any]) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            return requests.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"Network error while calling {url}: {e}")
            raise auth.AuthServiceError(f"Network error: {e}") from e

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"HTTP {resp.status_code}"

    def _sign_up_sync(self, payload: SignUpPayload) -> None:
        resp = self._post("/auth/signup", payload.to_api())
        if resp.status_code == 409:
            raise auth.AccountExistsError(self._error_message(resp))
        if not resp.ok:
            raise auth.AuthServiceError(self._error_message(resp))

    def _sign_in_sync(self, email: str, password: str) -> SignInResult:
        resp = self._post("/auth/signin", {"email": email, "password": password})
        if resp.status_code in (401, 403):
            raise auth.InvalidCredentialsError(self._error_message(resp))
        if not resp.ok:
            raise auth.AuthServiceError(self._error_message(resp))
        try:
            data = resp.json()
            return SignInResult(user=User.from_api(data["user"]), token=data["token"])
        except (ValueError, KeyError, TypeError) as e:
            log.error(f"Malformed sign-in response: {e}")
            raise auth.AuthServiceError("Unexpected response from auth service") from e

    def _reset_password_sync(self, email: str) -> None:
        resp = self._post("/auth/reset-password", {"email": email})
        if not resp.ok:
            raise auth.AuthServiceError(self._error_message(resp))

    async def sign_up(self, payload: SignUpPayload) -> None:
        await asyncio.to_thread(self._sign_up_sync, payload)

    async def sign_in(self, email: str, password: str) -> SignInResult:
        return await asyncio.to_thread(self._sign_in_sync, email, password)

    async def reset_password(self, email: str) -> None:
        await asyncio.to_thread(self._reset_password_sync, email)
