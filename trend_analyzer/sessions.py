"""Login state and role-based routing."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .accounts import Account, AccountStore, Role
from .errors import InvalidCredentials
from .logger import get_logger

LOGGER = get_logger(__name__)


class Surface(str, Enum):
    """Which part of the interface the current session may see."""

    LOGIN = "login"
    QUERY = "query"
    ADMIN = "admin"


def route(role: Optional[Role]) -> Surface:
    """Map a session role to its surface."""
    if role is None:
        return Surface.LOGIN
    if role is Role.ADMIN:
        return Surface.ADMIN
    return Surface.QUERY


class SessionController:
    """
    Tracks the single active session.

    ``account`` is None while anonymous. The role is read from the account
    captured at login time.
    """

    def __init__(self, store: AccountStore) -> None:
        self.store = store
        self.account: Optional[Account] = None
        self._role: Optional[Role] = None

    @property
    def is_authenticated(self) -> bool:
        return self.account is not None

    def login(self, username: str, password: str) -> Account:
        """
        Authenticate and start a session.

        Username comparison ignores case, password comparison is exact. Both
        inputs are trimmed first.

        Raises:
            InvalidCredentials: If no account matches; the session state is
                not touched.
        """
        trimmed_username = username.strip()
        account = self.store.find(trimmed_username)

        if account is None or account.password != password.strip():
            LOGGER.warning("Failed login attempt for '%s'", trimmed_username)
            raise InvalidCredentials()

        self.account = account
        self._role = account.role
        LOGGER.info("User '%s' logged in (role=%s)", account.username, account.role.value)
        return account

    def logout(self) -> None:
        if self.account is not None:
            LOGGER.info("User '%s' logged out", self.account.username)
        self.account = None
        self._role = None

    def current_role(self) -> Optional[Role]:
        return self._role

    def surface(self) -> Surface:
        return route(self._role)


__all__ = ["Surface", "route", "SessionController"]
