"""FastAPI application entry point with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trend_analyzer.config import AppConfig
from trend_analyzer.state import AppState

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle.

    Startup:
        1. Initialize AppConfig (API key, Gemini client, seed accounts).
           A missing API key aborts startup here.
        2. Build the AppState and store it on app.state.
    """
    logger.info("Starting AI Trend Analyzer API...")

    config = AppConfig.get()
    app.state.trend_state = AppState.from_config(config)

    logger.info(
        "Startup complete: model=%s grounding=%s accounts=%d",
        config.model, config.grounding, len(config.seed_accounts),
    )

    yield

    logger.info("Shutting down AI Trend Analyzer API.")


app = FastAPI(
    title="AI Trend Analyzer API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from trend_api.routes.admin import router as admin_router
from trend_api.routes.auth import router as auth_router
from trend_api.routes.trends import router as trends_router

app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(trends_router)


@app.get("/api/v1/health")
async def health():
    """Report whether startup completed and the session's current surface."""
    trend_state = getattr(app.state, "trend_state", None)
    return {
        "status": "ok" if trend_state is not None else "degraded",
        "surface": trend_state.surface().value if trend_state is not None else None,
        "query_status": trend_state.executor.status.value if trend_state is not None else None,
    }
