"""
Core components of the AI Trend Analyzer.

Accounts, sessions, prompt composition and query execution live here; the
Streamlit UI (``ui``) and the FastAPI service (``trend_api``) sit on top.
"""

from __future__ import annotations

__all__ = [
    "accounts",
    "config",
    "constants",
    "errors",
    "logger",
    "prompts",
    "query",
    "sessions",
    "state",
    "ui",
]  # pragma: no cover
