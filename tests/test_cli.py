"""Tests for the faithgate CLI."""

import yaml
from click.testing import CliRunner

from faithgate.cli import main


def test_check_allowed():
    result = CliRunner().invoke(main, ["check", "--rules-only", "Jesus is Lord"])
    assert result.exit_code == 0
    assert "allowed" in result.output
    assert "0.60" in result.output


def test_check_rejected():
    result = CliRunner().invoke(main, ["check", "--rules-only", "I pray to allah"])
    assert result.exit_code == 2
    assert "rejected" in result.output


def test_check_with_custom_terms(tmp_path):
    terms = tmp_path / "terms.yaml"
    terms.write_text("blocked_terms:\n  - idol feast\n")
    result = CliRunner().invoke(
        main, ["check", "--rules-only", "--terms", str(terms), "allah"]
    )
    assert result.exit_code == 0


def test_check_bad_terms_file(tmp_path):
    result = CliRunner().invoke(
        main, ["check", "--rules-only", "--terms", str(tmp_path / "nope.yaml"), "hello"]
    )
    assert result.exit_code == 1


def test_terms_dump():
    result = CliRunner().invoke(main, ["terms"])
    assert result.exit_code == 0
    data = yaml.safe_load(result.output)
    assert "hail mary" in data["blocked_terms"]
    assert "jesus" in data["christian_terms"]


def test_validate_terms(tmp_path):
    good = tmp_path / "good.yaml"
    good.write_text("christian_terms:\n  - grace\n")
    bad = tmp_path / "bad.yaml"
    bad.write_text("christian_terms: grace\n")

    runner = CliRunner()
    assert runner.invoke(main, ["validate-terms", str(good)]).exit_code == 0
    assert runner.invoke(main, ["validate-terms", str(bad)]).exit_code == 1
