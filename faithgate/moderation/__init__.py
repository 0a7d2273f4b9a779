"""Faith-alignment moderation.

Rule-based screening against configurable term tables, an adapter for an
external AI validation service, and the gate that composes the two.
"""

from faithgate.moderation.ai_client import AIClassifier, ClassifierUnavailable
from faithgate.moderation.gate import (
    ClassifierStrategy,
    FallbackClassifier,
    validate_content_with_ai,
)
from faithgate.moderation.models import FaithValidation, ModerationConfig, ModerationResult
from faithgate.moderation.moderator import (
    RuleBasedClassifier,
    combine_fields,
    moderate_content,
    requires_review,
    validate_faith_content,
)
from faithgate.moderation.terms import DEFAULT_CONFIG, ConfigError, load_config

__all__ = [
    "AIClassifier",
    "ClassifierStrategy",
    "ClassifierUnavailable",
    "ConfigError",
    "DEFAULT_CONFIG",
    "FaithValidation",
    "FallbackClassifier",
    "ModerationConfig",
    "ModerationResult",
    "RuleBasedClassifier",
    "combine_fields",
    "load_config",
    "moderate_content",
    "requires_review",
    "validate_content_with_ai",
    "validate_faith_content",
]
