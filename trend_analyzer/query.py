"""Execution of trend analysis requests against Gemini."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from google.genai import types

from .constants import DEFAULT_MODEL
from .errors import ExecutionError
from .logger import get_logger
from .prompts import FilterSet, compose

LOGGER = get_logger(__name__)


class QueryStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Citation:
    uri: str
    title: Optional[str] = None

    @property
    def label(self) -> str:
        return self.title or self.uri


@dataclass
class QueryResult:
    text: str
    citations: List[Citation] = field(default_factory=list)


def extract_citations(response: Any) -> List[Citation]:
    """
    Pull web grounding sources out of a generate_content response.

    Only the first candidate is inspected. Chunks without a ``web`` source
    are dropped, and a missing title falls back to the URI. Any missing level
    of the response yields an empty list.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    citations: List[Citation] = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None:
            continue
        uri = getattr(web, "uri", None) or ""
        title = getattr(web, "title", None) or uri
        citations.append(Citation(uri=uri, title=title))
    return citations


class QueryExecutor:
    """
    Runs analyses and tracks the loading/result/error lifecycle.

    Overlapping ``run`` calls are allowed; whichever settles last owns
    ``result`` and ``error``. ``status`` only returns to IDLE once no call is
    in flight. ``outcome`` records how the most recent call settled.
    """

    def __init__(self, client: Any, model: str = DEFAULT_MODEL, grounding: bool = True) -> None:
        self.client = client
        self.model = model
        self.grounding = grounding
        self.status = QueryStatus.IDLE
        self.outcome: Optional[QueryStatus] = None
        self.result: Optional[QueryResult] = None
        self.error: Optional[str] = None
        self._in_flight = 0

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.LOADING

    def _generation_config(self) -> Optional[types.GenerateContentConfig]:
        if not self.grounding:
            return None
        return types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
        )

    async def run(self, filters: FilterSet) -> QueryResult:
        """
        Analyze trends for ``filters``.

        Raises:
            ExecutionError: On any failure of the Gemini call or its response.
                The message is fixed; the cause is only logged.
        """
        self._in_flight += 1
        self.status = QueryStatus.LOADING
        self.result = None
        self.error = None

        prompt = compose(filters)
        LOGGER.info("Analyzing trends: %s", filters)
        LOGGER.debug("Prompt: %s", prompt)

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._generation_config(),
            )
            text = response.text or ""
            result = QueryResult(text=text, citations=extract_citations(response))
        except Exception as exc:
            LOGGER.exception("Error analyzing trends: %s", exc)
            failure = ExecutionError()
            self.result = None
            self.error = failure.message
            self.outcome = QueryStatus.FAILED
            raise failure from exc
        else:
            self.result = result
            self.error = None
            self.outcome = QueryStatus.SUCCEEDED
            LOGGER.info("Analysis complete: %d chars, %d sources", len(text), len(result.citations))
            return result
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self.status = QueryStatus.IDLE


__all__ = [
    "QueryStatus",
    "Citation",
    "QueryResult",
    "QueryExecutor",
    "extract_citations",
]
