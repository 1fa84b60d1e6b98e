"""Shared test fixtures."""

import os

# AppConfig reads the key at construction time; make sure one is present
# before any trend_analyzer module is imported by the collector.
os.environ.setdefault("GOOGLE_API_KEY", "test-key")

from types import SimpleNamespace
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from trend_analyzer.accounts import Account, Role
from trend_analyzer.state import AppState


def make_response(text: str = "Trending now", chunks: Optional[List[SimpleNamespace]] = None) -> SimpleNamespace:
    """Build an object shaped like a google-genai GenerateContentResponse."""
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(
        text=text,
        candidates=[SimpleNamespace(grounding_metadata=metadata)],
    )


def web_chunk(uri: str, title: Optional[str] = None) -> SimpleNamespace:
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))


@pytest.fixture
def accounts() -> List[Account]:
    return [
        Account(username="admin", password="admin123", role=Role.ADMIN),
        Account(username="user", password="user123", role=Role.STANDARD),
    ]


@pytest.fixture
def genai_client() -> MagicMock:
    """Gemini client whose async generate_content is an AsyncMock."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=make_response())
    return client


@pytest.fixture
def app_state(accounts, genai_client) -> AppState:
    return AppState.build(accounts, genai_client)
