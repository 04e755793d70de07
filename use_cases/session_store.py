"""In-memory session: the authenticated user and the global loading flag."""

import logging
from typing import Optional

from .session_models import Session, User

log = logging.getLogger(__name__)


class SessionStore:
    """Holds the current session. Created empty, replaced or cleared wholesale."""

    def __init__(self) -> None:
        self._user: Optional[User] = None
        self._loading = False

    def set_user(self, user: User) -> None:
        self._user = user
        log.info("Session opened for user id=%s", user.id)

    def clear(self) -> None:
        if self._user is not None:
            log.info("Session closed for user id=%s", self._user.id)
        self._user = None
        self._loading = False

    def current_user(self) -> Optional[User]:
        return self._user

    def is_loading(self) -> bool:
        return self._loading

    def set_loading(self, loading: bool) -> None:
        self._loading = loading

    def snapshot(self) -> Session:
        return Session(user=self._user, loading=self._loading)
