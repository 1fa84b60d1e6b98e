"""Environment configuration and seed accounts."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from google import genai

from .accounts import Account, Role
from .constants import DEFAULT_MODEL
from .logger import get_logger

DEFAULT_ACCOUNTS = (
    ("admin", "admin123", Role.ADMIN),
    ("user", "user123", Role.STANDARD),
)

LOGGER = get_logger(__name__)


def load_api_key() -> str:
    """Retrieve the Gemini API key or raise a helpful error."""
    key = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
    if not key:
        raise RuntimeError(
            "GOOGLE_API_KEY environment variable is required (GEMINI_API_KEY or API_KEY also accepted)."
        )
    return key


def default_accounts() -> List[Account]:
    return [Account(username=u, password=p, role=r) for u, p, r in DEFAULT_ACCOUNTS]


def _required_field(entry: Dict[str, Any], name: str) -> str:
    """Return ``entry[name]`` as text; null or blank values are rejected."""
    value = entry[name]
    if value is None or not str(value).strip():
        raise ValueError(f"{name} must not be empty")
    return str(value)


def load_seed_accounts(path: Optional[Path] = None) -> List[Account]:
    """
    Load the accounts available at startup.

    Reads ``TREND_ANALYZER_ACCOUNTS`` when no path is given. Without a file
    the built-in admin and user accounts are returned.

    Raises:
        ValueError: If the file is malformed or lists no accounts.
    """
    if path is None:
        env_path = os.getenv("TREND_ANALYZER_ACCOUNTS")
        if not env_path:
            return default_accounts()
        path = Path(env_path).expanduser()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in accounts file: {e}")

    entries = data.get("accounts") if isinstance(data, dict) else None
    if not entries:
        raise ValueError(f"Accounts file {path} must list at least one account")

    accounts = []
    seen = set()
    for entry in entries:
        try:
            username = _required_field(entry, "username")
            password = _required_field(entry, "password")
            role = Role(entry.get("role", Role.STANDARD.value))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid account entry in {path}: {entry!r} ({e})")

        key = username.strip().lower()
        if key in seen:
            raise ValueError(f"Duplicate username in {path}: {username!r}")
        seen.add(key)
        accounts.append(Account(username=username, password=password, role=role))

    LOGGER.debug("Loaded %d seed accounts from %s", len(accounts), path)
    return accounts


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() == "true"


class AppConfig:
    """Singleton-like accessor around shared configuration."""

    _instance: Optional["AppConfig"] = None

    def __init__(self, client: Any = None) -> None:
        self.api_key = load_api_key()
        self.model = os.getenv("TREND_ANALYZER_MODEL", DEFAULT_MODEL)
        self.grounding = _env_flag("TREND_ANALYZER_GROUNDING", True)
        self.client = client if client is not None else genai.Client(api_key=self.api_key)
        self.seed_accounts = load_seed_accounts()

        LOGGER.debug(
            "Configuration initialised: model=%s grounding=%s accounts=%d",
            self.model, self.grounding, len(self.seed_accounts),
        )

    @classmethod
    def get(cls) -> "AppConfig":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


__all__ = ["AppConfig", "default_accounts", "load_api_key", "load_seed_accounts"]
