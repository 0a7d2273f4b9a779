"""Term tables for faith-alignment moderation.

The built-in tables can be replaced by a YAML file with any of the keys
``blocked_terms``, ``christian_terms`` and ``contextual_allowed_phrases``.
Keys left out of the file keep their built-in lists.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from faithgate.moderation.models import ModerationConfig

# ---------------------------------------------------------------------------
# Built-in tables
# ---------------------------------------------------------------------------

# Non-Christian religious practices, figures and rituals
BLOCKED_TERMS: tuple[str, ...] = (
    "allah", "muhammad", "quran", "mosque", "islamic prayer",
    "vishnu", "shiva", "krishna", "brahma", "hindu gods", "hindu prayer",
    "buddha as deity", "buddhist prayer", "dharma prayer", "meditation prayer",
    "athena", "zeus", "thor", "odin", "apollo", "greek gods",
    "gaia worship", "mother earth prayer", "nature deity",
    "tarot reading", "horoscope prayer", "astrology prayer",
    "ouija", "séance", "spirit guide", "channeling spirits",
    "witchcraft", "spell casting", "magic ritual", "wiccan",
    "occult invocation", "pagan ritual", "wiccan prayer",
    "ancestral worship", "ancestor spirits",
    "chakra alignment prayer", "crystal healing prayer",
    "new age spirituality", "universe prayer",
    "hail mary", "virgin mary prayer", "mother mary intercession",
    "saint intercession", "pray to saints", "rosary prayer",
    "catholic saints", "our lady of", "blessed virgin",
    "pope blessing", "papal prayer", "mass prayer",
    "purgatory prayer", "saint joseph prayer", "saint michael prayer",
    "immaculate conception", "assumption of mary",
    "sacred heart of mary", "queen of heaven",
)

# Terms that raise confidence in Christian content
CHRISTIAN_TERMS: tuple[str, ...] = (
    "jesus", "christ", "lord jesus", "savior",
    "god the father", "heavenly father", "abba father",
    "holy spirit", "holy ghost", "comforter",
    "bible", "scripture", "word of god",
    "matthew", "mark", "luke", "john", "psalms", "proverbs",
    "romans", "corinthians", "ephesians", "philippians",
    "christian", "christianity", "gospel", "salvation",
    "cross", "crucifixion", "resurrection", "easter",
    "christmas", "nativity", "bethlehem", "calvary",
    "church", "pastor", "minister", "congregation",
    "baptism", "communion", "eucharist",
    "prayer in jesus name", "amen", "hallelujah", "praise god",
)

# Testimonial / educational phrases allowed even when other religions are named
CONTEXTUAL_ALLOWED_PHRASES: tuple[str, ...] = (
    "came from islam to christ",
    "left hinduism for jesus",
    "testimony about leaving",
    "discussion about other religions",
    "sharing the gospel with",
    "missionary work among",
    "converted from",
    "used to practice but now",
)

DEFAULT_CONFIG = ModerationConfig(
    blocked_terms=BLOCKED_TERMS,
    christian_terms=CHRISTIAN_TERMS,
    contextual_allowed_phrases=CONTEXTUAL_ALLOWED_PHRASES,
)

_KEYS = ("blocked_terms", "christian_terms", "contextual_allowed_phrases")


class ConfigError(ValueError):
    """Raised when a term file cannot be loaded."""


# ---------------------------------------------------------------------------
# Loading / dumping
# ---------------------------------------------------------------------------


def load_config(path: str | Path) -> ModerationConfig:
    """Load term tables from a YAML file, falling back per key to the defaults."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Term file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    unknown = sorted(set(data) - set(_KEYS))
    if unknown:
        raise ConfigError(f"{path}: unknown keys: {', '.join(unknown)}")

    tables = config_to_dict(DEFAULT_CONFIG)
    for key in _KEYS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"{path}: '{key}' must be a list of strings")
        tables[key] = value

    return ModerationConfig(**tables)


def config_to_dict(config: ModerationConfig) -> dict[str, list[str]]:
    """Return the tables of *config* as plain lists, keyed like the YAML file."""
    return {key: list(getattr(config, key)) for key in _KEYS}
