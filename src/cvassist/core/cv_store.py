from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from cvassist.core.models import CVDocument
from cvassist.core.paths import get_data_dir

logger = logging.getLogger(__name__)


def load_cv(path: Path) -> CVDocument:
    """Read a YAML or JSON file and return a validated CVDocument."""
    logger.debug("Loading CV from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)
    if data is None:
        raise ValueError(f"CV file is empty: {path}")
    return CVDocument.model_validate(data)


def get_default_cv_path() -> Path:
    """Return ``data/cv.yaml`` relative to the project root."""
    return get_data_dir() / "cv.yaml"
