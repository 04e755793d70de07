"""Loading/error lifecycle around every call to the auth service."""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from .session_store import SessionStore

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RequestOutcome(Generic[T]):
    """Either a result (``ok``) or a user-facing error message."""

    result: Optional[T] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_message is None


def _message_of(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class AsyncRequestRunner:
    """Runs one operation with the session loading flag raised.

    The flag is lowered on every exit path. Failures are turned into an
    error message and never re-raised. There is no retry, timeout or
    de-duplication: callers must not dispatch while the session is loading.
    """

    def __init__(self, session: SessionStore) -> None:
        self._session = session

    async def run(self, operation: Callable[[], Awaitable[T]]) -> RequestOutcome[T]:
        self._session.set_loading(True)
        try:
            result: Any = await operation()
        except Exception as exc:
            log.warning("Auth request failed: %s", _message_of(exc))
            return RequestOutcome(error_message=_message_of(exc))
        finally:
            self._session.set_loading(False)
        log.debug("Auth request completed")
        return RequestOutcome(result=result)
