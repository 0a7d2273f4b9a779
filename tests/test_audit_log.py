"""Tests for the moderation decision log."""

from faithgate.moderation.models import ModerationResult
from faithgate.moderation.moderator import REDIRECT_REASON
from faithgate.security.audit_log import ModerationAuditLog


def test_record_and_read_back(tmp_path):
    log = ModerationAuditLog(base_dir=tmp_path)
    entry = log.record_decision(
        actor="ruth",
        content_type="post",
        text="Happy birthday to my friend",
        result=ModerationResult(allowed=True, confidence=0.5),
    )
    assert entry.needs_review
    assert entry.source == "rules"

    entries = log.get_entries()
    assert len(entries) == 1
    assert entries[0] == entry


def test_snippet_truncated(tmp_path):
    log = ModerationAuditLog(base_dir=tmp_path)
    entry = log.record_decision(
        actor="ruth",
        content_type="comment",
        text="a" * 150,
        result=ModerationResult(allowed=True, confidence=0.9),
    )
    assert entry.snippet == "a" * 100 + "..."


def test_filters(tmp_path):
    log = ModerationAuditLog(base_dir=tmp_path)
    log.record_decision("ruth", "post", "hello", ModerationResult(allowed=True, confidence=0.5))
    log.record_decision(
        "boaz",
        "comment",
        "allah",
        ModerationResult(allowed=False, confidence=0.9, reason=REDIRECT_REASON),
    )
    log.record_decision(
        "ruth", "prayer", "jesus", ModerationResult(allowed=True, confidence=0.7, source="ai")
    )

    assert [e.actor for e in log.get_entries(allowed=False)] == ["boaz"]
    assert len(log.get_entries(actor="ruth")) == 2
    assert [e.content_type for e in log.get_entries(needs_review=True)] == ["post"]
    assert log.get_entries(content_type="prayer")[0].source == "ai"
    assert len(log.get_entries(limit=1)) == 1


def test_unreadable_lines_skipped(tmp_path):
    log = ModerationAuditLog(base_dir=tmp_path)
    log.record_decision("ruth", "post", "hello", ModerationResult(allowed=True, confidence=0.5))
    with open(tmp_path / "2000-01-01.jsonl", "w", encoding="utf-8") as f:
        f.write("not json\n{\"unexpected\": 1}\n\n")
    assert len(log.get_entries()) == 1


def test_base_dir_from_environment(monkeypatch, tmp_path):
    target = tmp_path / "audit"
    monkeypatch.setenv("FAITHGATE_AUDIT_DIR", str(target))
    ModerationAuditLog()
    assert target.is_dir()
