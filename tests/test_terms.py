"""Tests for term tables and the YAML term loader."""

import dataclasses

import pytest
import yaml

from faithgate.moderation.models import ModerationConfig
from faithgate.moderation.terms import (
    DEFAULT_CONFIG,
    ConfigError,
    config_to_dict,
    load_config,
)


def _write_yaml(tmp_path, data, name="terms.yaml"):
    path = tmp_path / name
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path


def test_default_tables_are_lowercase():
    for key, terms in config_to_dict(DEFAULT_CONFIG).items():
        assert terms, key
        assert all(t == t.lower() for t in terms)


def test_config_normalizes_and_dedupes():
    config = ModerationConfig(blocked_terms=["Zeus", "zeus", "ODIN"])
    assert config.blocked_terms == ("zeus", "odin")


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.blocked_terms = ()


def test_load_full_file(tmp_path):
    path = _write_yaml(
        tmp_path,
        {
            "blocked_terms": ["Idol Feast"],
            "christian_terms": ["grace"],
            "contextual_allowed_phrases": ["once attended"],
        },
    )
    config = load_config(path)
    assert config.blocked_terms == ("idol feast",)
    assert config.christian_terms == ("grace",)
    assert config.contextual_allowed_phrases == ("once attended",)


def test_missing_keys_keep_defaults(tmp_path):
    path = _write_yaml(tmp_path, {"blocked_terms": ["séance"]})
    config = load_config(path)
    assert config.blocked_terms == ("séance",)
    assert config.christian_terms == DEFAULT_CONFIG.christian_terms
    assert config.contextual_allowed_phrases == DEFAULT_CONFIG.contextual_allowed_phrases


def test_empty_file_is_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


def test_round_trip_through_dump(tmp_path):
    path = _write_yaml(tmp_path, config_to_dict(DEFAULT_CONFIG))
    assert load_config(path) == DEFAULT_CONFIG


def test_file_not_found(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("{{invalid yaml::: [")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)


def test_non_list_value(tmp_path):
    path = _write_yaml(tmp_path, {"blocked_terms": "zeus"})
    with pytest.raises(ConfigError, match="list of strings"):
        load_config(path)


def test_unknown_key(tmp_path):
    path = _write_yaml(tmp_path, {"blocked_words": ["zeus"]})
    with pytest.raises(ConfigError, match="unknown keys"):
        load_config(path)


def test_top_level_must_be_mapping(tmp_path):
    path = _write_yaml(tmp_path, ["zeus"])
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)
