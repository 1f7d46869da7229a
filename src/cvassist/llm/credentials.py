"""API key storage and resolution.

The key lives in a small key/value store injected by the application. The
CLI uses :class:`YamlCredentialStore` under ``data/``; tests and embedders
can pass a :class:`MemoryCredentialStore`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import yaml

from cvassist.core.paths import get_data_dir

logger = logging.getLogger(__name__)

CREDENTIAL_KEY = "gemini_api_key"


class CredentialStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryCredentialStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class YamlCredentialStore:
    """Durable store backed by a flat YAML mapping on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Credential file is not a mapping: {self.path}")
        return data

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return str(value) if value is not None else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        logger.debug("Stored %s in %s", key, self.path)


def get_default_credentials_path() -> Path:
    """Return ``data/credentials.yaml`` relative to the project root."""
    return get_data_dir() / "credentials.yaml"


def resolve_credential(
    store: CredentialStore,
    configured: str | None = None,
    default: str | None = None,
) -> str | None:
    """Pick the API key: persisted value, then configured value, then *default*.

    The first non-empty source wins; ``None`` when all are empty.
    """
    for source, value in (
        ("store", store.get(CREDENTIAL_KEY)),
        ("config", configured),
        ("default", default),
    ):
        if value:
            logger.debug("API key resolved from %s", source)
            return value
    logger.debug("No API key found in store, config or default")
    return None
