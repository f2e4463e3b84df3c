"""Async client for OpenAI-compatible chat completion APIs."""

import json
import re
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

import config
from src.logger import get_logger
from src.models import (
    MeaningResponse,
    PhrasesResponse,
    ProviderSettings,
    TranslationResponse,
)

T = TypeVar("T", bound=BaseModel)


class ServiceError(Exception):
    """Raised when a generation request fails."""

    pass


class ServiceResponseError(ServiceError):
    """Raised when a generation response cannot be parsed or has the wrong shape."""

    pass


def extract_json_from_response(content: str) -> dict:
    """
    Extract a JSON object from a model reply.

    The reply might contain markdown code blocks or other text.

    Args:
        content: Raw message content

    Returns:
        Parsed JSON dictionary
    """
    try:
        data = json.loads(content)
        if isinstance(data, dict):
            return data
    except (json.JSONDecodeError, TypeError):
        pass

    # Look for ```json ... ``` blocks
    json_match = re.search(r"```(?:json)?\s*(\{[\s\S]*?\})\s*```", content)
    if json_match:
        try:
            return json.loads(json_match.group(1))
        except json.JSONDecodeError:
            pass

    # Look for raw JSON object
    json_match = re.search(r"\{[\s\S]*\}", content)
    if json_match:
        try:
            return json.loads(json_match.group(0))
        except json.JSONDecodeError:
            pass

    raise ServiceResponseError(f"Could not extract JSON from response: {content[:500]}...")


class LLMClient:
    """Structured text generation against one provider."""

    def __init__(
        self,
        provider: ProviderSettings,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            provider: Provider settings, including the credential
            http_client: Optional preconfigured client (used by tests)
        """
        self.provider = provider
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.LLM_TIMEOUT)

    async def __aenter__(self) -> "LLMClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _complete(self, prompt: str) -> str:
        """Send one chat completion request and return the message content."""
        url = f"{self.provider.base_url.rstrip('/')}/chat/completions"
        payload = {
            "model": self.provider.model,
            "messages": [{"role": "user", "content": prompt}],
            "response_format": {"type": "json_object"},
        }
        headers = {"Authorization": f"Bearer {self.provider.api_key}"}

        try:
            response = await self._http.post(url, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ServiceError(
                f"{self.provider.name} API error {e.response.status_code}: {e.response.text[:500]}"
            ) from e
        except httpx.HTTPError as e:
            raise ServiceError(f"{self.provider.name} request failed: {e!r}") from e

        try:
            body = response.json()
            content = body["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ServiceResponseError(
                f"Unexpected {self.provider.name} response: {response.text[:500]}"
            ) from e

        if not isinstance(content, str):
            raise ServiceResponseError(f"{self.provider.name} returned no message content")
        return content

    async def generate_object(self, prompt: str, schema: type[T]) -> T:
        """
        Generate a JSON object and validate it against a schema.

        Args:
            prompt: The prompt to send
            schema: Pydantic model the reply must match

        Returns:
            Validated instance of schema

        Raises:
            ServiceError: If the request fails
            ServiceResponseError: If the reply is not a matching JSON object
        """
        content = await self._complete(prompt)
        data = extract_json_from_response(content)
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise ServiceResponseError(
                f"Response does not match {schema.__name__}: {e.errors()}"
            ) from e

    async def meaning_of(self, word: str) -> str:
        prompt = config.MEANING_PROMPT.format(word=word)
        result = await self.generate_object(prompt, MeaningResponse)
        return result.meaning

    async def generate_phrases(self, word: str, count: int) -> list[str]:
        """Generate up to count example phrases using word."""
        prompt = config.PHRASES_PROMPT.format(word=word, count=count)
        result = await self.generate_object(prompt, PhrasesResponse)
        phrases = [p.strip() for p in result.phrases if p.strip()]
        if len(phrases) > count:
            get_logger().debug(
                f"Got {len(phrases)} phrases for '{word}', keeping the first {count}"
            )
        return phrases[:count]

    async def translate(self, phrase: str) -> str:
        prompt = config.TRANSLATION_PROMPT.format(
            phrase=phrase, language=config.TARGET_LANGUAGE
        )
        result = await self.generate_object(prompt, TranslationResponse)
        return result.translation
