"""Project path resolution — single source of truth for finding the project root."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path


@lru_cache(maxsize=1)
def find_project_root() -> Path:
    """Walk up from this source file to find the directory containing pyproject.toml."""
    for parent in Path(__file__).resolve().parents:
        if (parent / "pyproject.toml").exists():
            return parent
    # Fallback: assume src/cvassist/core/paths.py → 3 levels up
    return Path(__file__).resolve().parents[3]


def get_data_dir() -> Path:
    """Return ``data/`` under the project root (CV files, stored credentials)."""
    return find_project_root() / "data"
