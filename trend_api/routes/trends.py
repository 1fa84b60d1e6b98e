"""Trend analysis endpoints."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from trend_analyzer.accounts import Account
from trend_analyzer.constants import (
    CATEGORY_OPTIONS,
    CATEGORY_PUBLICATIONS,
    DEFAULT_CATEGORY,
    DEFAULT_LANGUAGE,
    LANGUAGE_OPTIONS,
)
from trend_analyzer.errors import ExecutionError
from trend_analyzer.prompts import FilterSet
from trend_analyzer.state import AppState
from trend_api.dependencies import get_app_state, require_standard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/trends", tags=["trends"])


# --- Request / Response Models ---

class AnalyzeRequest(BaseModel):
    country: str = ""
    state: str = ""
    district: str = ""
    city: str = ""
    language: str = Field(default=DEFAULT_LANGUAGE, description="Passed to the model verbatim.")
    category: str = Field(default=DEFAULT_CATEGORY)

    def to_filters(self) -> FilterSet:
        return FilterSet(
            country=self.country,
            state=self.state,
            district=self.district,
            city=self.city,
            language=self.language,
            category=self.category,
        )


class CitationInfo(BaseModel):
    uri: str
    title: Optional[str] = None


class AnalyzeResponse(BaseModel):
    text: str
    citations: List[CitationInfo] = []
    num_citations: int = 0


class OptionsResponse(BaseModel):
    languages: Dict[str, str]
    categories: Dict[str, str]
    publications: Dict[str, str]


# --- Endpoints ---

@router.get("/options", response_model=OptionsResponse)
async def get_options(account: Account = Depends(require_standard)):
    """Languages and categories offered by the filter form."""
    return OptionsResponse(
        languages=LANGUAGE_OPTIONS,
        categories=CATEGORY_OPTIONS,
        publications=CATEGORY_PUBLICATIONS,
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest,
    account: Account = Depends(require_standard),
    app_state: AppState = Depends(get_app_state),
):
    """Run one trend analysis for the given filters.

    Failures of the model call come back as 502 with a fixed message; the
    cause is only written to the server log.
    """
    if request.category and request.category not in CATEGORY_OPTIONS:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown category: {request.category}",
        )

    logger.info("API analyze: user=%s filters=%s", account.username, request.model_dump())

    try:
        result = await app_state.run_query(request.to_filters())
    except ExecutionError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=exc.message,
        )

    citations = [CitationInfo(uri=c.uri, title=c.title) for c in result.citations]
    return AnalyzeResponse(
        text=result.text,
        citations=citations,
        num_citations=len(citations),
    )
