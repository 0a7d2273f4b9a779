"""faithgate LLM integration.

Backs the text-validation endpoint with the Anthropic API.
"""

from faithgate.llm.classifier import LLMContentClassifier, parse_verdict
from faithgate.llm.client import LLMClient, LLMResponse

__all__ = [
    "LLMClient",
    "LLMContentClassifier",
    "LLMResponse",
    "parse_verdict",
]
