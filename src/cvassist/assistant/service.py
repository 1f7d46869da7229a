"""The CV assistant — turns a CV snapshot plus a request into generated advice.

Build one :class:`CVAssistant` at startup and hand it to whatever needs it.
Every entry point is a single stateless request; errors from
:mod:`cvassist.llm.errors` propagate unchanged.
"""

from __future__ import annotations

import logging

import httpx

from cvassist.assistant.prompts import (
    INTERVIEW_QUESTIONS_PROMPT,
    SKILL_SUGGESTIONS_PROMPT,
    build_prompt,
    cover_letter_prompt,
    improve_section_prompt,
)
from cvassist.core.formatting import format_cv
from cvassist.core.models import CVDocument
from cvassist.llm.config import GeminiConfig
from cvassist.llm.credentials import CREDENTIAL_KEY, CredentialStore, resolve_credential
from cvassist.llm.errors import ConfigurationError
from cvassist.llm.gemini import GeminiClient, GenerationOutcome, unwrap

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "Gemini API key not configured. Please add your API key in settings."
)


class CVAssistant:
    """Owns the API key and funnels every task through :meth:`generate`.

    Parameters
    ----------
    store:
        Durable key/value store holding the API key under ``gemini_api_key``.
    config:
        Endpoint settings; ``config.api_key`` is the fallback when the store
        has no key.
    default_credential:
        Last-resort key when neither the store nor *config* supplies one.
    http_client:
        Optional ``httpx.AsyncClient`` reused for every request.
    """

    def __init__(
        self,
        store: CredentialStore,
        config: GeminiConfig | None = None,
        *,
        default_credential: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or GeminiConfig()
        self._store = store
        self._client = GeminiClient(self.config, http_client=http_client)
        self._credential = resolve_credential(
            store, self.config.api_key, default_credential
        )

    # -- credential ---------------------------------------------------------

    def has_credential(self) -> bool:
        return bool(self._credential)

    def set_credential(self, token: str) -> None:
        """Use *token* from now on and persist it, replacing any stored key."""
        self._credential = token
        self._store.set(CREDENTIAL_KEY, token)
        logger.info("API key updated")

    # -- generation ---------------------------------------------------------

    async def try_generate(
        self, user_message: str, cv: CVDocument | None
    ) -> GenerationOutcome:
        """Like :meth:`generate`, but returns failures instead of raising them."""
        api_key = self._credential
        if not api_key:
            return ConfigurationError(MISSING_KEY_MESSAGE)
        prompt = build_prompt(user_message, format_cv(cv))
        return await self._client.generate_content(prompt, api_key)

    async def generate(self, user_message: str, cv: CVDocument | None) -> str:
        """Answer *user_message* in the context of *cv*; returns the text as-is."""
        return unwrap(await self.try_generate(user_message, cv))

    async def generate_cover_letter(
        self,
        cv: CVDocument | None,
        job_description: str | None = None,
        company_name: str | None = None,
    ) -> str:
        return await self.generate(
            cover_letter_prompt(job_description, company_name), cv
        )

    async def improve_section(
        self, cv: CVDocument | None, section_type: str, current_content: str
    ) -> str:
        return await self.generate(
            improve_section_prompt(section_type, current_content), cv
        )

    async def generate_interview_questions(self, cv: CVDocument | None) -> str:
        return await self.generate(INTERVIEW_QUESTIONS_PROMPT, cv)

    async def suggest_skills(self, cv: CVDocument | None) -> str:
        return await self.generate(SKILL_SUGGESTIONS_PROMPT, cv)
