"""Gemini ``generateContent`` exchange over plain HTTPS.

One prompt in, one text out. Failures are *returned* as one of the
:mod:`cvassist.llm.errors` kinds rather than raised, so callers handle an
explicit outcome; :func:`unwrap` turns it back into raise-or-return.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from cvassist.llm.config import (
    API_KEY_HEADER,
    MAX_OUTPUT_TOKENS,
    SAFETY_CATEGORIES,
    SAFETY_THRESHOLD,
    TEMPERATURE,
    GeminiConfig,
)
from cvassist.llm.errors import AssistantError, MalformedResponseError, RemoteServiceError

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Failed to communicate with Gemini API"
MALFORMED_MESSAGE = "Invalid response format from Gemini API"


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratedText:
    text: str


GenerationOutcome = GeneratedText | AssistantError


def unwrap(outcome: GenerationOutcome) -> str:
    """Return the generated text, or raise the error the outcome carries."""
    if isinstance(outcome, AssistantError):
        raise outcome
    return outcome.text


# ---------------------------------------------------------------------------
# Wire models (only the fields we read)
# ---------------------------------------------------------------------------

class _Part(BaseModel):
    text: str | None = None


class _Content(BaseModel):
    parts: list[_Part] | None = None


class _Candidate(BaseModel):
    content: _Content | None = None


class GenerateContentResponse(BaseModel):
    candidates: list[_Candidate] | None = None

    def first_text(self) -> str | None:
        """``candidates[0].content.parts[0].text``, or None if any level is missing."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


class _ErrorDetail(BaseModel):
    code: int | None = None
    message: str | None = None
    status: str | None = None


class ErrorEnvelope(BaseModel):
    error: _ErrorDetail | None = None


# ---------------------------------------------------------------------------
# Request / response helpers
# ---------------------------------------------------------------------------

def build_request_body(prompt: str) -> dict[str, Any]:
    """The JSON body for a single-turn, single-part generateContent call."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": TEMPERATURE,
            "maxOutputTokens": MAX_OUTPUT_TOKENS,
        },
        "safetySettings": [
            {"category": category, "threshold": SAFETY_THRESHOLD}
            for category in SAFETY_CATEGORIES
        ],
    }


def _parse_error_envelope(response: httpx.Response) -> ErrorEnvelope:
    try:
        return ErrorEnvelope.model_validate(response.json())
    except (ValueError, ValidationError):
        return ErrorEnvelope()


def error_from_response(response: httpx.Response) -> RemoteServiceError:
    """Classify a non-success response, preferring the service's own message."""
    detail = _parse_error_envelope(response).error
    status = detail.status if detail else None
    logger.error(
        "Gemini API error: status_code=%d, status=%s, message=%s",
        response.status_code,
        status,
        detail.message if detail else None,
    )
    if detail and detail.message:
        message = detail.message
    else:
        message = (
            f"API request failed with status {response.status_code}: "
            f"{status or 'Unknown error'}"
        )
    return RemoteServiceError(message, status_code=response.status_code, status=status)


def parse_generated_text(payload: Any) -> GenerationOutcome:
    """Extract the generated text from a decoded success body."""
    try:
        parsed = GenerateContentResponse.model_validate(payload)
    except ValidationError:
        logger.error("Unexpected Gemini response shape: %r", payload)
        return MalformedResponseError(MALFORMED_MESSAGE)
    text = parsed.first_text()
    if not text:
        logger.error("Gemini response has no candidate text: %r", payload)
        return MalformedResponseError(MALFORMED_MESSAGE)
    return GeneratedText(text)


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class GeminiClient:
    """Sends prompts to the ``generateContent`` endpoint described by *config*.

    Pass *http_client* to reuse a connection pool (or a mock transport in
    tests); otherwise a short-lived client is opened per call. No timeout
    is applied.
    """

    def __init__(
        self,
        config: GeminiConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._http = http_client

    async def _post(self, body: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        if self._http is not None:
            return await self._http.post(self.config.endpoint, json=body, headers=headers)
        async with httpx.AsyncClient(timeout=None) as client:
            return await client.post(self.config.endpoint, json=body, headers=headers)

    async def _exchange(self, prompt: str, headers: dict[str, str]) -> GenerationOutcome:
        response = await self._post(build_request_body(prompt), headers)

        if not response.is_success:
            return error_from_response(response)

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Gemini returned an undecodable body: %s", exc)
            return RemoteServiceError(str(exc) or FALLBACK_ERROR_MESSAGE)

        logger.debug("Gemini response: status_code=%d", response.status_code)
        return parse_generated_text(payload)

    async def generate_content(self, prompt: str, api_key: str) -> GenerationOutcome:
        """Send *prompt* authenticated with *api_key*; never raises for remote failures."""
        headers = {
            "Content-Type": "application/json",
            API_KEY_HEADER: api_key,
        }
        logger.debug(
            "Gemini call: model=%s, prompt_len=%d", self.config.model, len(prompt)
        )
        try:
            return await self._exchange(prompt, headers)
        except httpx.HTTPError as exc:
            logger.error("Gemini request failed: %s", exc)
            return RemoteServiceError(str(exc) or FALLBACK_ERROR_MESSAGE)
        except Exception as exc:
            logger.exception("Unexpected error during Gemini request")
            return RemoteServiceError(str(exc) or FALLBACK_ERROR_MESSAGE)
