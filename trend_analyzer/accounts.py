"""In-memory account registry and the admin operations layered on it.

Accounts live only for the lifetime of the process. Passwords are stored
and compared in plain text.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from .constants import (
    EMPTY_ACCOUNT_FIELDS_MESSAGE,
    EMPTY_PASSWORD_CHANGE_MESSAGE,
    NOTICE_TTL_SECONDS,
    PASSWORD_UPDATED_MESSAGE,
)
from .errors import AlreadyExists, ValidationError
from .logger import get_logger

LOGGER = get_logger(__name__)


class Role(str, Enum):
    STANDARD = "standard"
    ADMIN = "admin"


@dataclass
class Account:
    username: str
    password: str
    role: Role = Role.STANDARD


def _normalize(username: str) -> str:
    return username.strip().lower()


class AccountStore:
    """Registry of accounts keyed by case-insensitive username."""

    def __init__(self, accounts: Optional[Iterable[Account]] = None) -> None:
        self._accounts: List[Account] = []
        for account in accounts or []:
            self.add(account)

    def find(self, username: str) -> Optional[Account]:
        """
        Look up ``username`` ignoring case and surrounding whitespace.

        Both the argument and stored names are trimmed before comparing, so
        lookups agree with the trimmed login and duplicate checks.
        """
        key = _normalize(username)
        for account in self._accounts:
            if _normalize(account.username) == key:
                return account
        return None

    def add(self, account: Account) -> Account:
        """Append ``account``.

        Raises:
            AlreadyExists: If a username matching case-insensitively is stored.
        """
        if self.find(account.username) is not None:
            raise AlreadyExists()
        self._accounts.append(account)
        return account

    def set_password(self, username: str, new_password: str) -> None:
        """Replace the password of ``username``; unknown usernames are ignored."""
        account = self.find(username)
        if account is None:
            LOGGER.debug("Password change skipped, no account named %s", username)
            return
        account.password = new_password

    def list(self) -> List[Account]:
        return list(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)


@dataclass
class PasswordChangeNotice:
    """Confirmation shown after a password change, visible for a short while."""

    username: str
    message: str
    issued_at: float = field(default_factory=time.monotonic)
    ttl: float = NOTICE_TTL_SECONDS

    def is_expired(self, now: Optional[float] = None) -> bool:
        now = time.monotonic() if now is None else now
        return now - self.issued_at >= self.ttl


class AccountAdminOperations:
    """Account mutations available to administrators."""

    def __init__(self, store: AccountStore) -> None:
        self.store = store

    def add_account(self, username: str, password: str, role: Role = Role.STANDARD) -> Account:
        """
        Create a new account.

        Raises:
            ValidationError: If username or password is blank.
            AlreadyExists: If the username is taken (case-insensitive).
        """
        if not username.strip() or not password.strip():
            raise ValidationError(EMPTY_ACCOUNT_FIELDS_MESSAGE)

        account = self.store.add(Account(username=username, password=password, role=Role(role)))
        LOGGER.info("Account created: %s (role=%s)", account.username, account.role.value)
        return account

    def change_password(self, username: str, new_password: str) -> PasswordChangeNotice:
        """
        Set a new password for ``username``.

        Returns a transient confirmation notice. Unknown usernames are a
        silent no-op on the store but still produce the notice.

        Raises:
            ValidationError: If either argument is empty.
        """
        if not username or not new_password:
            raise ValidationError(EMPTY_PASSWORD_CHANGE_MESSAGE)

        self.store.set_password(username, new_password)
        LOGGER.info("Password updated for %s", username)
        return PasswordChangeNotice(
            username=username,
            message=PASSWORD_UPDATED_MESSAGE.format(username=username),
        )


__all__ = [
    "Role",
    "Account",
    "AccountStore",
    "PasswordChangeNotice",
    "AccountAdminOperations",
]
