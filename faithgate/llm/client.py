"""LLM client wrapper for faithgate.

Provides a small interface to the Anthropic API.  Callers check
:attr:`LLMClient.configured` before asking for a completion.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import anthropic

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"

# Shorter than the gate's default deadline so the validation endpoint can
# still answer from the keyword rules when the model is slow.
DEFAULT_TIMEOUT = 4.0

_NOT_CONFIGURED_MSG = "LLM not configured. Set ANTHROPIC_API_KEY."


# ---------------------------------------------------------------------------
# Response dataclass
# ---------------------------------------------------------------------------


@dataclass
class LLMResponse:
    """Structured response from an LLM call."""

    content: str
    model: str = ""


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class LLMClient:
    """Thin wrapper around the Anthropic Python SDK.

    Parameters
    ----------
    model : str | None
        Model identifier.  Falls back to ``FAITHGATE_LLM_MODEL``, then
        :data:`DEFAULT_MODEL`.
    api_key : str | None
        Anthropic API key.  Falls back to the ``ANTHROPIC_API_KEY``
        environment variable when *None*.
    timeout : float | None
        Seconds allowed for one completion, retries disabled.  Falls back to
        ``FAITHGATE_LLM_TIMEOUT``, then :data:`DEFAULT_TIMEOUT`.
    """

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.model = model or os.environ.get("FAITHGATE_LLM_MODEL", DEFAULT_MODEL)
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY", "")
        if timeout is None:
            timeout = float(os.environ.get("FAITHGATE_LLM_TIMEOUT", DEFAULT_TIMEOUT))
        self.timeout = timeout
        self._configured = bool(self.api_key)

        if self._configured:
            self._client = anthropic.Anthropic(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,
            )
        else:
            self._client = None  # type: ignore[assignment]

    @property
    def configured(self) -> bool:
        """Return *True* if an API key is available."""
        return self._configured

    def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int = 256,
        temperature: float = 0.0,
    ) -> LLMResponse:
        """Send a completion request and return an :class:`LLMResponse`."""
        if not self._configured:
            raise RuntimeError(_NOT_CONFIGURED_MSG)

        kwargs: dict = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            kwargs["system"] = system_prompt

        response = self._client.messages.create(**kwargs)
        return LLMResponse(
            content=response.content[0].text if response.content else "",
            model=self.model,
        )
