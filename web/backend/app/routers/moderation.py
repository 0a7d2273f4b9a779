"""Moderation router -- text validation, content screening and the decision log.

``/api/validate-content`` is the AI validation service the gate calls.
``/api/moderate`` is what content-creation flows call before persisting a
post, comment or prayer request.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from faithgate.llm.classifier import LLMContentClassifier
from faithgate.moderation.gate import validate_content_with_ai
from faithgate.moderation.moderator import (
    MIN_FAITH_CONTENT_LENGTH,
    combine_fields,
    moderate_content,
    requires_review,
)
from faithgate.security.audit_log import ModerationAuditLog
from web.backend.app.models.api import (
    CaptionCheckRequest,
    CaptionCheckResponse,
    DecisionEntryResponse,
    ModerateRequest,
    ModerateResponse,
    ModerationResultResponse,
    ValidateContentRequest,
)

router = APIRouter(prefix="/api", tags=["moderation"])

# ---------------------------------------------------------------------------
# Shared singletons
# ---------------------------------------------------------------------------

_classifier = LLMContentClassifier()
_gate = None  # process default gate unless replaced
_audit: Optional[ModerationAuditLog] = None

CAPTION_REQUIRED_REASON = "Please add a short Christ-centered caption"


def get_audit_log() -> ModerationAuditLog:
    """Return the singleton decision log."""
    global _audit
    if _audit is None:
        _audit = ModerationAuditLog()
    return _audit


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post(
    "/validate-content",
    response_model=ModerationResultResponse,
    summary="Classify a text with the LLM validator",
)
def validate_content(request: ValidateContentRequest):
    """Return an allow/deny verdict for ``text``.

    Uses the LLM when ``ANTHROPIC_API_KEY`` is set and the keyword rules
    otherwise.  The model call blocks, so this runs in the threadpool.
    """
    result = _classifier.classify_text(request.text)
    return ModerationResultResponse(**result.to_dict())


@router.post(
    "/moderate",
    response_model=ModerateResponse,
    summary="Screen user content before it is saved",
)
async def moderate(request: ModerateRequest):
    """Screen title and body together.

    Rejected content returns 400 with the reason to show the author.  Allowed
    content reports whether it should go to the review queue.
    """
    text = combine_fields(request.title, request.body)
    result = await validate_content_with_ai(text, gate=_gate)
    get_audit_log().record_decision(
        actor=request.author,
        content_type=request.content_type,
        text=text,
        result=result,
    )

    if not result.allowed:
        raise HTTPException(status_code=400, detail={"reason": result.reason})

    return ModerateResponse(
        allowed=True,
        confidence=result.confidence,
        needs_review=requires_review(result),
    )


@router.post(
    "/validate-caption",
    response_model=CaptionCheckResponse,
    summary="Check the caption required on embedded media",
)
async def validate_caption(request: CaptionCheckRequest):
    """Embeds need a caption of at least a few characters that passes the rules."""
    caption = request.caption.strip()
    if len(caption) < MIN_FAITH_CONTENT_LENGTH:
        raise HTTPException(
            status_code=400,
            detail={"ok": False, "code": "CAPTION_REQUIRED", "reason": CAPTION_REQUIRED_REASON},
        )

    result = moderate_content(caption)
    return CaptionCheckResponse(ok=True, faith_check="pass" if result.allowed else "fail")


@router.get(
    "/moderation/decisions",
    response_model=list[DecisionEntryResponse],
    summary="List recorded moderation decisions",
)
async def list_decisions(
    actor: Optional[str] = Query(None),
    content_type: Optional[str] = Query(None),
    allowed: Optional[bool] = Query(None),
    needs_review: Optional[bool] = Query(None, description="Only the review queue"),
    limit: int = Query(200, ge=1, le=1000),
):
    """Return decisions newest first; ``needs_review=true`` gives the review queue."""
    entries = get_audit_log().get_entries(
        actor=actor,
        content_type=content_type,
        allowed=allowed,
        needs_review=needs_review,
        limit=limit,
    )
    return [DecisionEntryResponse(**asdict(e)) for e in entries]
