"""FastAPI application for the faithgate moderation service.

Provides REST API endpoints wrapping the faithgate package for:
- Text validation (the AI validation service used by the gate)
- Screening posts, comments and prayer requests before they are saved
- Caption checks for embedded media
- The moderation decision log and review queue
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the faithgate package is importable by adding the project root to sys.path.
_project_root = str(Path(__file__).resolve().parents[3])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from faithgate import __version__
from web.backend.app.routers import moderation

app = FastAPI(
    title="faithgate API",
    description=(
        "REST API for faith-alignment content moderation. "
        "Provides endpoints for text validation, content screening, "
        "caption checks and the moderation decision log."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(moderation.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "faithgate API",
        "version": __version__,
        "description": "Faith-alignment content moderation REST API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
