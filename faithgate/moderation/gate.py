"""Moderation gate: AI classification with a rule-based fallback.

Content-creation flows call :func:`validate_content_with_ai` and branch on
``result.allowed``.  The gate always resolves with a result: if the AI tier
fails for any reason the same text is classified by the deterministic rules.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional, Protocol

from faithgate.moderation.ai_client import AIClassifier
from faithgate.moderation.models import ModerationResult
from faithgate.moderation.moderator import RuleBasedClassifier
from faithgate.moderation.terms import load_config

logger = logging.getLogger(__name__)

FallbackHook = Callable[[str, BaseException], None]


class ClassifierStrategy(Protocol):
    """Anything that can turn text into a moderation decision."""

    async def classify(self, text: str) -> ModerationResult: ...


class FallbackClassifier:
    """Try *primary*; on any error answer with *fallback*.

    ``on_fallback(text, exc)`` is called every time the fallback tier is used,
    so callers can count or report the event without changing the result.
    """

    def __init__(
        self,
        primary: ClassifierStrategy,
        fallback: ClassifierStrategy,
        on_fallback: Optional[FallbackHook] = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self.on_fallback = on_fallback

    @classmethod
    def from_env(cls, on_fallback: Optional[FallbackHook] = None) -> "FallbackClassifier":
        """Build the AI → rules gate from ``FAITHGATE_*`` environment variables."""
        terms_file = os.environ.get("FAITHGATE_TERMS_FILE", "")
        config = load_config(terms_file) if terms_file else None
        return cls(
            primary=AIClassifier(),
            fallback=RuleBasedClassifier(config),
            on_fallback=on_fallback,
        )

    async def classify(self, text: str) -> ModerationResult:
        try:
            return await self.primary.classify(text)
        except Exception as exc:
            logger.warning(
                "Primary classifier failed (%s: %s); using fallback",
                type(exc).__name__,
                exc,
            )
            self._notify(text, exc)
        return await self.fallback.classify(text)

    def _notify(self, text: str, exc: BaseException) -> None:
        if self.on_fallback is None:
            return
        try:
            self.on_fallback(text, exc)
        except Exception:
            logger.exception("on_fallback hook raised")


_default_gate: Optional[ClassifierStrategy] = None


def get_default_gate() -> ClassifierStrategy:
    """Return the process-wide gate, building it on first use.

    A bad ``FAITHGATE_*`` setting is logged once and the default keyword
    rules answer on their own.
    """
    global _default_gate
    if _default_gate is None:
        try:
            _default_gate = FallbackClassifier.from_env()
        except ValueError as exc:
            logger.error("Invalid moderation settings (%s); using keyword rules only", exc)
            _default_gate = RuleBasedClassifier()
    return _default_gate


async def validate_content_with_ai(
    text: str, gate: Optional[ClassifierStrategy] = None
) -> ModerationResult:
    """Classify *text* with the AI service, falling back to the keyword rules."""
    return await (gate or get_default_gate()).classify(text)
