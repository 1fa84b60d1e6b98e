"""Authentication routes."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from trend_analyzer.accounts import Account
from trend_analyzer.errors import InvalidCredentials
from trend_analyzer.state import AppState
from trend_api.dependencies import get_app_state, get_current_account

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


class LoginRequest(BaseModel):
    username: str
    password: str


class SessionInfo(BaseModel):
    username: Optional[str] = None
    role: Optional[str] = None
    surface: str


def _session_info(app_state: AppState) -> SessionInfo:
    account = app_state.current_account()
    return SessionInfo(
        username=account.username if account else None,
        role=account.role.value if account else None,
        surface=app_state.surface().value,
    )


@router.post("/login", response_model=SessionInfo)
async def login(
    request: LoginRequest,
    app_state: AppState = Depends(get_app_state),
):
    """Authenticate and open the process-wide session.

    The response tells the client which surface (query or admin) to show.
    """
    try:
        app_state.login(request.username, request.password)
    except InvalidCredentials as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.message,
        )

    return _session_info(app_state)


@router.get("/me", response_model=SessionInfo)
async def get_current_session(
    account: Account = Depends(get_current_account),
    app_state: AppState = Depends(get_app_state),
):
    """Return the logged-in account and its surface."""
    return _session_info(app_state)


@router.post("/logout", response_model=SessionInfo)
async def logout(app_state: AppState = Depends(get_app_state)):
    """End the session. Always succeeds."""
    app_state.logout()
    return _session_info(app_state)
