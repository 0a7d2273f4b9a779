"""HTTP adapter for the external text-validation service.

Posts ``{"text": ...}`` to the validation endpoint and normalizes the
response into a :class:`ModerationResult`.  Every failure is raised as
:class:`ClassifierUnavailable`; deciding what to do about it is the gate's job.
"""

from __future__ import annotations

import asyncio
import os
from typing import Any, Optional

import httpx

from faithgate.moderation.models import ModerationResult

DEFAULT_ENDPOINT = "http://localhost:8000/api/validate-content"
DEFAULT_TIMEOUT = 5.0

DEFAULT_AI_ALLOWED = True
DEFAULT_AI_CONFIDENCE = 0.7


class ClassifierUnavailable(RuntimeError):
    """The validation service could not produce a usable decision."""


def result_from_payload(data: Any, source: str = "ai") -> ModerationResult:
    """Normalize a ``{allowed?, reason?, confidence?}`` body.

    Missing (or ``null``) fields take the defaults.  Present fields of the
    wrong type are treated as a malformed response.
    """
    if not isinstance(data, dict):
        raise ClassifierUnavailable(f"Expected a JSON object, got {type(data).__name__}")

    allowed = data.get("allowed")
    if allowed is None:
        allowed = DEFAULT_AI_ALLOWED
    elif not isinstance(allowed, bool):
        raise ClassifierUnavailable("'allowed' must be a boolean")

    confidence = data.get("confidence")
    if confidence is None:
        confidence = DEFAULT_AI_CONFIDENCE
    elif isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise ClassifierUnavailable("'confidence' must be a number")
    elif not 0.0 <= confidence <= 1.0:
        raise ClassifierUnavailable(f"'confidence' out of range: {confidence}")

    reason = data.get("reason")
    if reason is not None and not isinstance(reason, str):
        raise ClassifierUnavailable("'reason' must be a string")

    return ModerationResult(
        allowed=allowed,
        confidence=float(confidence),
        reason=reason,
        source=source,
    )


class AIClassifier:
    """Classifier backed by the remote validation endpoint.

    Parameters
    ----------
    endpoint : str | None
        URL to POST to.  Falls back to ``FAITHGATE_VALIDATE_URL``.
    timeout : float | None
        Seconds before the call is abandoned.  Falls back to
        ``FAITHGATE_VALIDATE_TIMEOUT``.
    transport : httpx.AsyncBaseTransport | None
        Optional transport, mainly for tests.
    """

    source = "ai"

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.endpoint = endpoint or os.environ.get("FAITHGATE_VALIDATE_URL", DEFAULT_ENDPOINT)
        if timeout is None:
            timeout = float(os.environ.get("FAITHGATE_VALIDATE_TIMEOUT", DEFAULT_TIMEOUT))
        self.timeout = timeout
        self._transport = transport

    async def classify(self, text: str) -> ModerationResult:
        """POST *text* to the endpoint.  Raises :class:`ClassifierUnavailable`.

        ``timeout`` is a deadline for the whole call, not a per-read limit.
        """
        try:
            data = await asyncio.wait_for(self._post(text), self.timeout)
        except asyncio.TimeoutError as exc:
            raise ClassifierUnavailable(
                f"Validation service timed out after {self.timeout}s"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise ClassifierUnavailable(
                f"Validation service returned {exc.response.status_code}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise ClassifierUnavailable(
                f"Validation service timed out after {self.timeout}s"
            ) from exc
        except httpx.RequestError as exc:
            raise ClassifierUnavailable(f"Failed to reach validation service: {exc}") from exc
        except ValueError as exc:
            raise ClassifierUnavailable(f"Validation service returned invalid JSON: {exc}") from exc

        return result_from_payload(data, source=self.source)

    async def _post(self, text: str) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(self.endpoint, json={"text": text})
            resp.raise_for_status()
            return resp.json()
