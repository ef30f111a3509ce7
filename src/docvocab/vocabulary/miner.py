"""Vocabulary extraction through a single chat-completions request."""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx
from pydantic import ValidationError

from docvocab.config import Settings, resolve_settings
from docvocab.errors import (
    APIError,
    EmptyResponseError,
    MiningError,
    ResponseFormatError,
    TermsParseError,
    TransportError,
)
from docvocab.telemetry import emit_vocabulary_error, emit_vocabulary_request, emit_vocabulary_result

from .models import ChatCompletionRequest, ChatCompletionResponse, ExtractedVocabulary
from .prompt_builder import build_request

LOGGER = logging.getLogger(__name__)


class VocabularyMiner:
    """Turn document text into an :class:`ExtractedVocabulary`.

    Each call sends exactly one POST request; nothing is retried and no state
    is kept between calls, so one instance may serve concurrent callers.

    Args:
        settings: Endpoint, model and limits. Defaults to the environment.
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``
            in tests. ``None`` uses the default network transport.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = resolve_settings(settings)
        self._transport = transport

    def build_request(self, text: str) -> ChatCompletionRequest:
        return build_request(
            text,
            model=self.settings.model,
            max_tokens=self.settings.max_tokens,
            max_input_chars=self.settings.max_input_chars,
            prompt_version=self.settings.prompt_version,
        )

    async def extract_terms(self, text: str, api_key: str) -> ExtractedVocabulary:
        """Send ``text`` to the model and parse its categorised reply."""

        request = self.build_request(text)
        emit_vocabulary_request(
            model=request.model,
            input_chars=len(text),
            sent_chars=min(len(text), self.settings.max_input_chars),
            max_tokens=request.max_tokens,
        )

        start = time.perf_counter()
        try:
            response = await self._post(request, api_key)
            vocabulary = self._parse(response)
        except MiningError as error:
            emit_vocabulary_error(
                model=request.model,
                error=error,
                duration_ms=(time.perf_counter() - start) * 1000.0,
                status_code=getattr(error, "status_code", None),
            )
            raise

        emit_vocabulary_result(
            model=request.model,
            duration_ms=(time.perf_counter() - start) * 1000.0,
            categories=len(vocabulary.categories),
            terms=vocabulary.term_count,
        )
        return vocabulary

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, request: ChatCompletionRequest, api_key: str) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                return await client.post(
                    self.settings.api_url,
                    json=request.model_dump(mode="json"),
                    headers=self._headers(api_key),
                )
            except httpx.HTTPError as exc:
                raise TransportError(f"Request failed: {exc}", cause=exc) from exc
            except UnicodeEncodeError as exc:
                # The encoder message quotes the offending credential character.
                raise TransportError(
                    "Request failed: API key contains characters that are not valid in an HTTP header",
                    cause=exc,
                ) from exc

    def _parse(self, response: httpx.Response) -> ExtractedVocabulary:
        if not response.is_success:
            raise APIError(response.status_code, response.reason_phrase, response.text)

        try:
            envelope = ChatCompletionResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseFormatError(f"Failed to parse response: {exc}", cause=exc) from exc

        if not envelope.choices:
            raise EmptyResponseError()

        content = envelope.choices[0].message.content
        try:
            return ExtractedVocabulary.model_validate_json(content)
        except ValidationError as exc:
            raise TermsParseError(f"Failed to parse terms: {exc}", cause=exc) from exc


async def extract_vocabulary_terms(
    text: str,
    api_key: str,
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ExtractedVocabulary:
    """Extract categorised domain vocabulary from ``text`` using ``api_key``.

    Raises a subclass of :class:`docvocab.errors.MiningError` on any failure.
    """

    return await VocabularyMiner(settings, transport=transport).extract_terms(text, api_key)


__all__ = ["VocabularyMiner", "extract_vocabulary_terms"]
