"""FastAPI dependency injection for the shared AppState."""

from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, Request, status

from trend_analyzer.accounts import Account
from trend_analyzer.sessions import Surface
from trend_analyzer.state import AppState

logger = logging.getLogger(__name__)


async def get_app_state(request: Request) -> AppState:
    """Return the AppState built during startup.

    There is a single session per process, so every request sees the same
    state object.
    """
    return request.app.state.trend_state


async def get_current_account(
    app_state: AppState = Depends(get_app_state),
) -> Account:
    """Return the logged-in account.

    Raises:
        HTTPException 401: If nobody is logged in.
    """
    account = app_state.current_account()
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return account


def _require_surface(app_state: AppState, surface: Surface, detail: str) -> None:
    if app_state.surface() is not surface:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


async def require_admin(
    account: Account = Depends(get_current_account),
    app_state: AppState = Depends(get_app_state),
) -> Account:
    """Dependency that enforces the admin role.

    Use on account management endpoints:
        async def admin_route(account: Account = Depends(require_admin)):
    """
    _require_surface(app_state, Surface.ADMIN, "Admin access required")
    return account


async def require_standard(
    account: Account = Depends(get_current_account),
    app_state: AppState = Depends(get_app_state),
) -> Account:
    """Dependency that restricts trend queries to standard accounts."""
    _require_surface(app_state, Surface.QUERY, "Trend analysis is available to standard users only")
    return account
