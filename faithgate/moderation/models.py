"""Data models for the content moderation system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def _normalize_phrases(phrases) -> tuple[str, ...]:
    """Lower-case *phrases* and drop duplicates, keeping first-seen order."""
    return tuple(dict.fromkeys(str(p).lower() for p in phrases))


@dataclass(frozen=True)
class ModerationConfig:
    """Read-only term tables consulted by the rule-based classifier."""

    blocked_terms: tuple[str, ...] = ()
    christian_terms: tuple[str, ...] = ()
    contextual_allowed_phrases: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocked_terms", _normalize_phrases(self.blocked_terms))
        object.__setattr__(self, "christian_terms", _normalize_phrases(self.christian_terms))
        object.__setattr__(
            self,
            "contextual_allowed_phrases",
            _normalize_phrases(self.contextual_allowed_phrases),
        )


@dataclass(frozen=True)
class ModerationResult:
    """Result of a content moderation check."""

    allowed: bool
    confidence: float
    reason: Optional[str] = None
    source: str = field(default="rules", compare=False)  # "rules" | "ai"

    def to_dict(self) -> dict[str, Any]:
        """Public shape of the result, without the internal ``source`` tag."""
        return {
            "allowed": self.allowed,
            "reason": self.reason,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class FaithValidation:
    """Outcome of the stricter faith-content check used by posting forms."""

    is_valid: bool
    reason: str = ""
