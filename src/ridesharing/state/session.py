"""Session holder for the currently authenticated user."""

from __future__ import annotations

import logging

from ridesharing.models.user import UserData
from ridesharing.state._observable import Observable

_logger = logging.getLogger(__name__)


class SessionStore(Observable["SessionStore"]):
    """Holds the latest user record handed over by the auth flow.

    There is no validation and no lifecycle beyond holding the value;
    consumers must tolerate ``user`` being ``None`` at any time.
    """

    def __init__(self, user: UserData | None = None) -> None:
        super().__init__()
        self._user = user

    @property
    def user(self) -> UserData | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def set_user(self, user: UserData) -> None:
        self._user = user
        _logger.debug("Session user set id=%s", user.id)
        self._notify()

    def clear_user(self) -> None:
        self._user = None
        _logger.debug("Session user cleared")
        self._notify()

    def reset(self) -> None:
        self.clear_user()
