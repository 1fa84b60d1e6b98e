"""Per-process application state and the operations the UI layers call."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from .accounts import Account, AccountAdminOperations, AccountStore, PasswordChangeNotice, Role
from .config import AppConfig
from .constants import DEFAULT_MODEL
from .errors import AccessDenied
from .logger import get_logger
from .prompts import FilterSet
from .query import QueryExecutor, QueryResult
from .sessions import SessionController, Surface

LOGGER = get_logger(__name__)


@dataclass
class AppState:
    store: AccountStore
    session: SessionController
    admin: AccountAdminOperations
    executor: QueryExecutor
    notice: Optional[PasswordChangeNotice] = None
    filters: FilterSet = field(default_factory=FilterSet)
    # Shared by every blocking query on this state
    _loop: Optional[asyncio.AbstractEventLoop] = field(default=None, repr=False)

    @classmethod
    def build(
        cls,
        accounts: Iterable[Account],
        client: Any,
        *,
        model: str = DEFAULT_MODEL,
        grounding: bool = True,
    ) -> "AppState":
        """Wire a fresh store, session, admin layer and executor together."""
        store = AccountStore(accounts)
        if not len(store):
            raise ValueError("At least one account is required")
        return cls(
            store=store,
            session=SessionController(store),
            admin=AccountAdminOperations(store),
            executor=QueryExecutor(client, model=model, grounding=grounding),
        )

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "AppState":
        config = config or AppConfig.get()
        return cls.build(
            config.seed_accounts,
            config.client,
            model=config.model,
            grounding=config.grounding,
        )

    # --- Session ---

    def login(self, username: str, password: str) -> Account:
        return self.session.login(username, password)

    def logout(self) -> None:
        self.session.logout()
        self.notice = None
        self.executor.result = None
        self.executor.error = None

    def current_role(self) -> Optional[Role]:
        return self.session.current_role()

    def current_account(self) -> Optional[Account]:
        return self.session.account

    def surface(self) -> Surface:
        return self.session.surface()

    def _require(self, surface: Surface) -> None:
        if self.session.surface() is not surface:
            LOGGER.warning(
                "Denied %s action for role=%s", surface.value,
                getattr(self.current_role(), "value", None),
            )
            raise AccessDenied()

    # --- Admin ---

    def list_accounts(self) -> List[Account]:
        self._require(Surface.ADMIN)
        return self.store.list()

    def add_account(self, username: str, password: str, role: Role = Role.STANDARD) -> Account:
        self._require(Surface.ADMIN)
        return self.admin.add_account(username, password, role)

    def change_password(self, username: str, new_password: str) -> PasswordChangeNotice:
        self._require(Surface.ADMIN)
        self.notice = self.admin.change_password(username, new_password)
        return self.notice

    def active_notice(self) -> Optional[PasswordChangeNotice]:
        """Return the password-change notice until it expires, then drop it."""
        if self.notice is not None and self.notice.is_expired():
            self.notice = None
        return self.notice

    # --- Query ---

    async def run_query(self, filters: FilterSet) -> QueryResult:
        self._require(Surface.QUERY)
        self.filters = filters
        return await self.executor.run(filters)

    def run_query_blocking(self, filters: FilterSet) -> QueryResult:
        """
        Run a query from synchronous code such as a Streamlit script.

        All calls share one event loop, the loop the Gemini client opens its
        async connection pool on.
        """
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop.run_until_complete(self.run_query(filters))


__all__ = ["AppState"]
