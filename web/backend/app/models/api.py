"""Pydantic models for API request/response serialization.

These models mirror the faithgate dataclasses and provide JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Text validation
# ---------------------------------------------------------------------------


class ValidateContentRequest(BaseModel):
    """Body accepted by the text-validation endpoint."""

    text: str = ""


class ModerationResultResponse(BaseModel):
    """Mirrors faithgate.moderation.models.ModerationResult (public fields)."""

    allowed: bool
    reason: Optional[str] = None
    confidence: float


# ---------------------------------------------------------------------------
# Content screening
# ---------------------------------------------------------------------------


class ModerateRequest(BaseModel):
    """User-authored content about to be persisted."""

    title: str = ""
    body: str = ""
    content_type: str = Field(default="post", description="post, comment, prayer, ...")
    author: str = "anonymous"


class ModerateResponse(BaseModel):
    """Outcome for content that may be persisted."""

    allowed: bool
    confidence: float
    needs_review: bool = False


class CaptionCheckRequest(BaseModel):
    caption: str = ""


class CaptionCheckResponse(BaseModel):
    ok: bool = True
    faith_check: str = "fail"  # "pass" | "fail"


# ---------------------------------------------------------------------------
# Decision log
# ---------------------------------------------------------------------------


class DecisionEntryResponse(BaseModel):
    """Mirrors faithgate.security.audit_log.DecisionEntry."""

    id: str
    timestamp: str
    actor: str
    content_type: str
    snippet: str
    allowed: bool
    confidence: float
    reason: Optional[str] = None
    source: str = "rules"
    needs_review: bool = False
