"""Rule-based faith-alignment moderation.

Screens text against the configured term tables:

1. a contextual (testimonial) phrase allows the text outright,
2. any blocked term rejects it,
3. otherwise the text is allowed with a confidence raised by each distinct
   Christian term it mentions.

Matching is plain case-insensitive substring containment; there is no
word-boundary handling, so ``"thor"`` also matches inside ``"author"``.
"""

from __future__ import annotations

import re
from typing import Optional

from faithgate.moderation.models import FaithValidation, ModerationConfig, ModerationResult
from faithgate.moderation.terms import DEFAULT_CONFIG

# ---------------------------------------------------------------------------
# Scoring constants
# ---------------------------------------------------------------------------

REDIRECT_REASON = "This community is Christ-centered. Please direct prayers to Jesus."

CONTEXTUAL_CONFIDENCE = 0.8
BLOCKED_CONFIDENCE = 0.9
BASELINE_CONFIDENCE = 0.5
CHRISTIAN_TERM_BOOST = 0.1
MAX_CONFIDENCE = 0.95

REVIEW_THRESHOLD = 0.6

MIN_FAITH_CONTENT_LENGTH = 6
MISSING_FAITH_REASON = "Please include a Christ-centered message"
TOO_SHORT_REASON = f"Please write at least {MIN_FAITH_CONTENT_LENGTH} characters"

_BIBLE_BOOKS = (
    "genesis", "exodus", "leviticus", "numbers", "deuteronomy", "joshua",
    "judges", "ruth", r"[12] samuel", r"[12] kings", r"[12] chronicles", "ezra",
    "nehemiah", "esther", "job", "psalms?", "proverbs", "ecclesiastes",
    "song of solomon", "isaiah", "jeremiah", "lamentations", "ezekiel",
    "daniel", "hosea", "joel", "amos", "obadiah", "jonah", "micah", "nahum",
    "habakkuk", "zephaniah", "haggai", "zechariah", "malachi",
    "matthew", "mark", "luke", "john", "acts", "romans", r"[12] corinthians",
    "galatians", "ephesians", "philippians", "colossians",
    r"[12] thessalonians", r"[12] timothy", "titus", "philemon", "hebrews",
    "james", r"[12] peter", r"[123] john", "jude", "revelation",
)

# "Psalm 23", "John 3:16", "Romans 8:28-30"
_BIBLE_REFERENCE = re.compile(
    r"\b(?:" + "|".join(_BIBLE_BOOKS) + r")\s+\d{1,3}(?::\d{1,3}(?:-\d{1,3})?)?\b",
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------


class RuleBasedClassifier:
    """Deterministic keyword classifier.  Stateless and safe to share."""

    source = "rules"

    def __init__(self, config: Optional[ModerationConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def moderate(self, text: str) -> ModerationResult:
        """Classify *text*.  Never raises; performs no I/O."""
        lower_text = text.lower()

        if self.has_contextual_allowance(lower_text):
            return ModerationResult(allowed=True, confidence=CONTEXTUAL_CONFIDENCE)

        if self.blocked_terms_in(lower_text):
            return ModerationResult(
                allowed=False,
                reason=REDIRECT_REASON,
                confidence=BLOCKED_CONFIDENCE,
            )

        matches = len(self.christian_terms_in(lower_text))
        confidence = min(MAX_CONFIDENCE, BASELINE_CONFIDENCE + CHRISTIAN_TERM_BOOST * matches)
        return ModerationResult(allowed=True, confidence=confidence)

    async def classify(self, text: str) -> ModerationResult:
        return self.moderate(text)

    # -- matching ------------------------------------------------------------
    # Each helper lower-cases its input, so callers may pass raw text.

    def has_contextual_allowance(self, text: str) -> bool:
        """Return *True* if *text* contains a testimonial phrase."""
        lower_text = text.lower()
        return any(phrase in lower_text for phrase in self.config.contextual_allowed_phrases)

    def blocked_terms_in(self, text: str) -> list[str]:
        """Return the blocked terms found in *text*, in table order."""
        lower_text = text.lower()
        return [term for term in self.config.blocked_terms if term in lower_text]

    def christian_terms_in(self, text: str) -> list[str]:
        """Return the Christian terms found in *text*, in table order."""
        lower_text = text.lower()
        return [term for term in self.config.christian_terms if term in lower_text]


_default_classifier = RuleBasedClassifier()


def _classifier_for(config: Optional[ModerationConfig]) -> RuleBasedClassifier:
    if config is None:
        return _default_classifier
    return RuleBasedClassifier(config)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def moderate_content(text: str, config: Optional[ModerationConfig] = None) -> ModerationResult:
    """Screen *text* with the rule-based classifier."""
    return _classifier_for(config).moderate(text)


def requires_review(result: ModerationResult) -> bool:
    """Return *True* for allowed content whose confidence is borderline."""
    return result.allowed and result.confidence < REVIEW_THRESHOLD


def combine_fields(*fields: Optional[str]) -> str:
    """Join user-authored fields so they are screened as one text."""
    return "\n".join(f for f in fields if f)


def validate_faith_content(
    text: str, config: Optional[ModerationConfig] = None
) -> FaithValidation:
    """Stricter check for short devotional fields (comments, prayer requests).

    Besides passing the rule-based screen, the text must be long enough and
    either match a testimonial phrase, mention a Christian term, or cite a
    Bible reference.  A testimony needs no Christian term of its own:
    ``"I converted from buddhism"`` is valid.
    """
    if len(text.strip()) < MIN_FAITH_CONTENT_LENGTH:
        return FaithValidation(is_valid=False, reason=TOO_SHORT_REASON)

    classifier = _classifier_for(config)
    result = classifier.moderate(text)
    if not result.allowed:
        return FaithValidation(is_valid=False, reason=result.reason or REDIRECT_REASON)

    if (
        classifier.has_contextual_allowance(text)
        or classifier.christian_terms_in(text)
        or _BIBLE_REFERENCE.search(text)
    ):
        return FaithValidation(is_valid=True)

    return FaithValidation(is_valid=False, reason=MISSING_FAITH_REASON)
