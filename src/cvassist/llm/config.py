"""LLM configuration — loads the Gemini API key and endpoint settings from environment.

On import, this module loads the project's ``.env`` file (if present) so that
keys set there are available via ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from cvassist.core.paths import find_project_root

logger = logging.getLogger(__name__)

# Load .env from the project root.  ``override=False`` means existing env vars win.
_env_path = find_project_root() / ".env"
load_dotenv(_env_path, override=False)
logger.debug("Loaded .env from %s (exists=%s)", _env_path, _env_path.exists())

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash-exp"

API_KEY_HEADER = "x-goog-api-key"

# Sampling and safety settings sent with every request.
TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 2048
SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"
SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


@dataclass(frozen=True)
class GeminiConfig:
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    api_key: str | None = None

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


def load_config() -> GeminiConfig:
    """Build a GeminiConfig from ``GEMINI_*`` environment variables.

    A missing ``GEMINI_API_KEY`` is not an error here: the key may still come
    from the persisted credential store.
    """
    api_key = os.environ.get("GEMINI_API_KEY", "") or None
    logger.debug("GEMINI_API_KEY present: %s", bool(api_key))
    return GeminiConfig(
        base_url=os.environ.get("GEMINI_BASE_URL", "") or DEFAULT_BASE_URL,
        model=os.environ.get("GEMINI_MODEL", "") or DEFAULT_MODEL,
        api_key=api_key,
    )
