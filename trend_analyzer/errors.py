"""Recoverable error types raised by the session, account and query layers."""

from __future__ import annotations

from typing import Optional

from .constants import (
    ACCESS_DENIED_MESSAGE,
    ACCOUNT_EXISTS_MESSAGE,
    ANALYSIS_FAILED_MESSAGE,
    EMPTY_ACCOUNT_FIELDS_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
)


class TrendAnalyzerError(Exception):
    """Base class; ``message`` is always safe to show to the end user."""

    default_message = "Something went wrong."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentials(TrendAnalyzerError):
    default_message = INVALID_CREDENTIALS_MESSAGE


class ValidationError(TrendAnalyzerError):
    default_message = EMPTY_ACCOUNT_FIELDS_MESSAGE


class AlreadyExists(TrendAnalyzerError):
    default_message = ACCOUNT_EXISTS_MESSAGE


class ExecutionError(TrendAnalyzerError):
    default_message = ANALYSIS_FAILED_MESSAGE


class AccessDenied(TrendAnalyzerError):
    default_message = ACCESS_DENIED_MESSAGE


__all__ = [
    "TrendAnalyzerError",
    "InvalidCredentials",
    "ValidationError",
    "AlreadyExists",
    "ExecutionError",
    "AccessDenied",
]
