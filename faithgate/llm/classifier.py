"""LLM-backed implementation of the text-validation service."""

from __future__ import annotations

import json
import logging
import re
from typing import Optional

from faithgate.llm.client import LLMClient
from faithgate.llm.prompts import CLASSIFICATION_PROMPT, CLASSIFICATION_SYSTEM_PROMPT
from faithgate.moderation.ai_client import ClassifierUnavailable, result_from_payload
from faithgate.moderation.models import ModerationConfig, ModerationResult
from faithgate.moderation.moderator import RuleBasedClassifier

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def parse_verdict(content: str) -> ModerationResult:
    """Extract the JSON verdict from a model reply.

    Models sometimes wrap the object in prose or code fences, so the first
    ``{...}`` span is used.
    """
    match = _JSON_OBJECT.search(content)
    if not match:
        raise ClassifierUnavailable("No JSON object in model reply")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise ClassifierUnavailable(f"Model reply is not valid JSON: {exc}") from exc
    return result_from_payload(data, source="ai")


class LLMContentClassifier:
    """Classify text with an LLM, answering from the keyword rules when it can't."""

    def __init__(
        self,
        client: Optional[LLMClient] = None,
        config: Optional[ModerationConfig] = None,
    ) -> None:
        self.client = client or LLMClient()
        self.rules = RuleBasedClassifier(config)

    def classify_text(self, text: str) -> ModerationResult:
        if not self.client.configured:
            return self.rules.moderate(text)

        try:
            response = self.client.complete(
                CLASSIFICATION_PROMPT.format(text=text),
                system_prompt=CLASSIFICATION_SYSTEM_PROMPT,
            )
            return parse_verdict(response.content)
        except Exception as exc:
            logger.warning("LLM classification failed (%s); using keyword rules", exc)
            return self.rules.moderate(text)
