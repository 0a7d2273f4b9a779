"""Tests for the LLM-backed validation service."""

import pytest

from faithgate.llm.classifier import LLMContentClassifier, parse_verdict
from faithgate.llm.client import LLMClient, LLMResponse
from faithgate.moderation.ai_client import ClassifierUnavailable
from faithgate.moderation.moderator import moderate_content


class FakeLLMClient:
    """Stands in for LLMClient; returns a canned reply."""

    def __init__(self, content="", configured=True, error=None):
        self.content = content
        self.configured = configured
        self.error = error
        self.prompts = []

    def complete(self, prompt, system_prompt=None, **kwargs):
        self.prompts.append((prompt, system_prompt))
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, model="fake")


def test_unconfigured_client_uses_rules(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    client = LLMClient()
    assert not client.configured
    classifier = LLMContentClassifier(client=client)
    assert classifier.classify_text("Please say hail mary") == moderate_content(
        "Please say hail mary"
    )


def test_unconfigured_complete_raises(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(RuntimeError, match="not configured"):
        LLMClient().complete("hello")


def test_sdk_client_is_time_bounded(monkeypatch):
    monkeypatch.setenv("FAITHGATE_LLM_TIMEOUT", "3.5")
    client = LLMClient(api_key="sk-test")
    assert client.timeout == 3.5
    assert client._client.timeout == 3.5
    assert client._client.max_retries == 0


def test_default_timeout_is_below_gate_deadline(monkeypatch):
    from faithgate.llm.client import DEFAULT_TIMEOUT
    from faithgate.moderation.ai_client import DEFAULT_TIMEOUT as GATE_TIMEOUT

    monkeypatch.delenv("FAITHGATE_LLM_TIMEOUT", raising=False)
    assert LLMClient(api_key="sk-test").timeout == DEFAULT_TIMEOUT < GATE_TIMEOUT


def test_model_verdict_used():
    client = FakeLLMClient('{"allowed": false, "reason": "Not Christ-centered", "confidence": 0.8}')
    result = LLMContentClassifier(client=client).classify_text("Happy birthday")
    assert not result.allowed
    assert result.reason == "Not Christ-centered"
    assert result.source == "ai"
    prompt, system_prompt = client.prompts[0]
    assert "Happy birthday" in prompt
    assert system_prompt


def test_fenced_reply_parsed():
    content = 'Here you go:\n```json\n{"allowed": true, "confidence": 0.9}\n```'
    result = parse_verdict(content)
    assert result.allowed
    assert result.confidence == 0.9


@pytest.mark.parametrize("content", ["I cannot help with that.", "{not: json}", '{"allowed": "maybe"}'])
def test_parse_verdict_rejects_bad_replies(content):
    with pytest.raises(ClassifierUnavailable):
        parse_verdict(content)


def test_unusable_reply_uses_rules():
    classifier = LLMContentClassifier(client=FakeLLMClient("no idea"))
    assert classifier.classify_text("Jesus is Lord") == moderate_content("Jesus is Lord")


def test_client_error_uses_rules():
    classifier = LLMContentClassifier(client=FakeLLMClient(error=ConnectionError("down")))
    result = classifier.classify_text("Jesus is Lord")
    assert result == moderate_content("Jesus is Lord")
    assert result.source == "rules"
