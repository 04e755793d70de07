"""Screen navigation state machine."""

import logging
from typing import Union

from .session_models import Screen

log = logging.getLogger(__name__)


class NavigationController:
    """Tracks the single active screen. Starts on sign-in; every screen is reachable.

    The dashboard guard (only after a user is signed in) belongs to the caller.
    """

    def __init__(self, initial: Screen = Screen.SIGN_IN) -> None:
        self._screen = Screen(initial)

    def navigate_to(self, screen: Union[Screen, str]) -> None:
        try:
            target = Screen(screen)
        except ValueError:
            raise ValueError(f"Unknown screen: {screen!r}") from None
        if target is not self._screen:
            log.debug("Navigate %s -> %s", self._screen.value, target.value)
        self._screen = target

    def current_screen(self) -> Screen:
        return self._screen
