"""Moderation decision log.

Records every decision a content-creation flow acts on as newline-delimited
JSON in daily files under ``~/.faithgate/audit_logs/`` (override with
``FAITHGATE_AUDIT_DIR``).
"""

from __future__ import annotations

import json
import os
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from faithgate.moderation.models import ModerationResult
from faithgate.moderation.moderator import requires_review

_SNIPPET_LENGTH = 100


@dataclass
class DecisionEntry:
    """A single recorded moderation decision."""

    id: str
    timestamp: str
    actor: str
    content_type: str  # "post" | "comment" | "prayer" | "caption" | ...
    snippet: str
    allowed: bool
    confidence: float
    reason: Optional[str] = None
    source: str = "rules"
    needs_review: bool = False


class ModerationAuditLog:
    """File-based JSON decision log."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        if base_dir is None:
            env_dir = os.environ.get("FAITHGATE_AUDIT_DIR", "")
            base_dir = Path(env_dir) if env_dir else Path.home() / ".faithgate" / "audit_logs"
        self._base_dir = Path(base_dir)
        self._base_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _current_log_file(self) -> Path:
        return self._base_dir / f"{datetime.now(timezone.utc).strftime('%Y-%m-%d')}.jsonl"

    def _read_all_entries(self) -> list[DecisionEntry]:
        entries: list[DecisionEntry] = []
        for path in sorted(self._base_dir.glob("*.jsonl")):
            for line in path.read_text(encoding="utf-8").splitlines():
                if not line.strip():
                    continue
                try:
                    entries.append(DecisionEntry(**json.loads(line)))
                except (json.JSONDecodeError, TypeError):
                    continue
        return entries

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def record_decision(
        self,
        actor: str,
        content_type: str,
        text: str,
        result: ModerationResult,
    ) -> DecisionEntry:
        """Append a decision and return the created entry."""
        snippet = text[:_SNIPPET_LENGTH] + ("..." if len(text) > _SNIPPET_LENGTH else "")
        entry = DecisionEntry(
            id=uuid.uuid4().hex[:16],
            timestamp=datetime.now(timezone.utc).isoformat(),
            actor=actor,
            content_type=content_type,
            snippet=snippet,
            allowed=result.allowed,
            confidence=result.confidence,
            reason=result.reason,
            source=result.source,
            needs_review=requires_review(result),
        )
        with self._current_log_file().open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(asdict(entry)) + "\n")
        return entry

    def get_entries(
        self,
        *,
        actor: Optional[str] = None,
        content_type: Optional[str] = None,
        allowed: Optional[bool] = None,
        needs_review: Optional[bool] = None,
        limit: int = 200,
    ) -> list[DecisionEntry]:
        """Return filtered decisions, newest first."""
        entries = self._read_all_entries()

        if actor:
            entries = [e for e in entries if e.actor == actor]
        if content_type:
            entries = [e for e in entries if e.content_type == content_type]
        if allowed is not None:
            entries = [e for e in entries if e.allowed == allowed]
        if needs_review is not None:
            entries = [e for e in entries if e.needs_review == needs_review]

        entries.sort(key=lambda e: e.timestamp, reverse=True)
        return entries[:limit]
