"""
Response Envelope Normalization

Providers behind OpenRouter do not all wrap their answer the same way. This
module knows the closed set of envelopes we accept and tries them in a fixed
priority order:

1. OpenAI-style ``{"choices": [{"message": {"content": ...}}]}``
2. Direct ``{"content": ...}``
3. Alternative ``{"response": ...}``

The first envelope that matches decides the outcome. If it matches but holds
no text, that is ProviderEmptyContentError; if none matches, NoMatchingEnvelope.

Dependencies:
- json: For normalizing structured content back into a text payload.
"""
import json
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple
from app.errors.exceptions import NoMatchingEnvelope, ProviderEmptyContentError

def _as_text(content: Any) -> Optional[str]:
    """Normalize message content into a single text payload."""
    if content is None:
        return None
    if isinstance(content, str):
        return content
    if isinstance(content, dict):
        # Some models hand back the JSON object itself
        return json.dumps(content)
    if isinstance(content, list):
        # Content parts: [{"type": "text", "text": "..."}]
        parts = [part.get("text", "") for part in content if isinstance(part, dict)]
        return "".join(parts)
    return str(content)


class ResponseEnvelope(ABC):
    name = "base"

    @abstractmethod
    def matches(self, payload: dict) -> bool:
        """Whether the payload is wrapped in this envelope."""

    @abstractmethod
    def extract(self, payload: dict) -> Any:
        """Return the raw content held by the envelope."""


class ChatChoicesEnvelope(ResponseEnvelope):
    name = "choices"

    def matches(self, payload: dict) -> bool:
        choices = payload.get("choices")
        return isinstance(choices, list) and len(choices) > 0

    def extract(self, payload: dict) -> Any:
        first = payload["choices"][0]
        if not isinstance(first, dict):
            return None
        message = first.get("message") or {}
        if not isinstance(message, dict):
            return None
        return message.get("content")


class DirectContentEnvelope(ResponseEnvelope):
    name = "content"

    def matches(self, payload: dict) -> bool:
        return payload.get("content") is not None

    def extract(self, payload: dict) -> Any:
        return payload["content"]


class ResponseFieldEnvelope(ResponseEnvelope):
    name = "response"

    def matches(self, payload: dict) -> bool:
        return payload.get("response") is not None

    def extract(self, payload: dict) -> Any:
        return payload["response"]


ENVELOPES: Tuple[ResponseEnvelope, ...] = (
    ChatChoicesEnvelope(),
    DirectContentEnvelope(),
    ResponseFieldEnvelope(),
)

def extract_envelope_content(payload: Any) -> Tuple[str, str]:
    """
    Extract the text content from a provider response body.

    Args:
        payload: Decoded JSON body of the provider response

    Returns:
        Tuple[str, str]: The envelope name that matched and its text content

    Raises:
        ProviderEmptyContentError: Null body, or a matched envelope without text
        NoMatchingEnvelope: The body (including an empty object) matches none of the known envelopes
    """
    if payload is None:
        raise ProviderEmptyContentError("Empty response from OpenRouter API")
    if not isinstance(payload, dict):
        raise NoMatchingEnvelope()

    for envelope in ENVELOPES:
        if envelope.matches(payload):
            content = _as_text(envelope.extract(payload))
            if not content or not content.strip():
                raise ProviderEmptyContentError()
            return envelope.name, content

    raise NoMatchingEnvelope()
