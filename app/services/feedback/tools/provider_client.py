"""
Provider Client Module

This module sends chat-completion requests to the text-generation provider
(OpenRouter) and returns the raw text the model produced. The request goes
through the AsyncOpenAI client as a raw HTTP response so that the body can be
inspected without the SDK forcing the OpenAI response shape on it; the
envelope is then normalized by app.services.feedback.tools.response_envelope.

No retries happen here. A failed call raises one of the ProviderError
subclasses and the caller decides what to do with it.

Dependencies:
- openai: For the AsyncOpenAI client and its error types.
- httpx: For the raw response type returned by the client.
- loguru: For logging operations.
"""

from typing import Any, Dict, List, Optional
import httpx
import openai
from loguru import logger
from openai import AsyncOpenAI
from app.errors.exceptions import ProviderFormatError, ProviderHTTPError, ProviderTransportError
from app.services.feedback.tools.response_envelope import extract_envelope_content

class ProviderClient:
    """
    Thin wrapper around an AsyncOpenAI client for chat-completion calls.

    Attributes:
        client (AsyncOpenAI): Client configured with the provider base URL and credential.
    """

    def __init__(self, client: AsyncOpenAI, log=None):
        self.client = client
        self.logger = log or logger.bind(component="provider_client")

    async def complete(
        self,
        messages: List[Dict[str, str]],
        *,
        model: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Request a chat completion and return its text content.

        Args:
            messages: Chat messages in provider order
            model: Provider model identifier
            temperature: Sampling temperature, provider default when None
            max_tokens: Output length bound, provider default when None
            response_format: Structured output request, e.g. {"type": "json_object"}

        Returns:
            str: The text content of the first completion

        Raises:
            ProviderHTTPError: Non-success HTTP status
            ProviderTransportError: Network or timeout failure
            ProviderFormatError: Body is not JSON or matches no known envelope
            ProviderEmptyContentError: Envelope matched but holds no text
        """
        body: Dict[str, Any] = {"model": model, "messages": messages}
        if response_format is not None:
            body["response_format"] = response_format
        if temperature is not None:
            body["temperature"] = temperature
        if max_tokens is not None:
            body["max_tokens"] = max_tokens

        self.logger.info(f"Calling provider model {model} with {len(messages)} messages")
        try:
            response: httpx.Response = await self.client.post(
                "/chat/completions",
                cast_to=httpx.Response,
                body=body,
            )
        except openai.APIStatusError as e:
            body_text = e.response.text if e.response is not None else str(e.body or "")
            self.logger.error(f"Provider returned HTTP {e.status_code}: {body_text}")
            raise ProviderHTTPError(e.status_code, body_text) from e
        except openai.APIConnectionError as e:
            self.logger.error(f"Provider transport failure: {e}")
            raise ProviderTransportError(str(e)) from e
        except openai.APIError as e:
            self.logger.error(f"Provider client error: {e}")
            raise ProviderFormatError() from e

        self.logger.info(f"Provider response status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            self.logger.error(f"Provider response is not JSON: {response.text[:200]}")
            raise ProviderFormatError() from e

        envelope_name, content = extract_envelope_content(payload)
        self.logger.debug(f"Extracted {len(content)} chars from '{envelope_name}' envelope")
        return content
