"""Admin-only endpoints for account management."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from trend_analyzer.accounts import Account, Role
from trend_analyzer.errors import AlreadyExists, ValidationError
from trend_analyzer.state import AppState
from trend_api.dependencies import get_app_state, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


class AccountInfo(BaseModel):
    username: str
    role: Role


class AccountListResponse(BaseModel):
    accounts: List[AccountInfo]
    count: int


class AddAccountRequest(BaseModel):
    username: str
    password: str
    role: Role = Role.STANDARD


class ChangePasswordRequest(BaseModel):
    new_password: str


class PasswordChangeResponse(BaseModel):
    username: str
    message: str
    expires_in: float = Field(..., description="Seconds the confirmation should stay visible.")


@router.get("/accounts", response_model=AccountListResponse)
async def list_accounts(
    admin: Account = Depends(require_admin),
    app_state: AppState = Depends(get_app_state),
):
    """List accounts in creation order. Passwords are never returned."""
    accounts = [AccountInfo(username=a.username, role=a.role) for a in app_state.list_accounts()]
    return AccountListResponse(accounts=accounts, count=len(accounts))


@router.post("/accounts", response_model=AccountInfo, status_code=status.HTTP_201_CREATED)
async def add_account(
    request: AddAccountRequest,
    admin: Account = Depends(require_admin),
    app_state: AppState = Depends(get_app_state),
):
    """Create a standard or admin account."""
    try:
        account = app_state.add_account(request.username, request.password, request.role)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.message,
        )
    except AlreadyExists as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=exc.message,
        )

    logger.info("Account '%s' added by %s", account.username, admin.username)
    return AccountInfo(username=account.username, role=account.role)


@router.put("/accounts/{username}/password", response_model=PasswordChangeResponse)
async def change_password(
    username: str,
    request: ChangePasswordRequest,
    admin: Account = Depends(require_admin),
    app_state: AppState = Depends(get_app_state),
):
    """Replace an account's password.

    Unknown usernames are accepted and leave the account list unchanged.
    """
    try:
        notice = app_state.change_password(username, request.new_password)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.message,
        )

    return PasswordChangeResponse(
        username=notice.username,
        message=notice.message,
        expires_in=notice.ttl,
    )
