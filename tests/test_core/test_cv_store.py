from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from cvassist.core.cv_store import get_default_cv_path, load_cv
from cvassist.core.formatting import format_cv
from cvassist.core.models import CVDocument


def _write_yaml(document: CVDocument, path: Path) -> None:
    path.write_text(
        yaml.safe_dump(document.model_dump(mode="json", exclude_none=True), sort_keys=False),
        encoding="utf-8",
    )


class TestLoad:
    def test_yaml_preserves_context(self, tmp_path: Path, sample_cv: CVDocument):
        path = tmp_path / "cv.yaml"
        _write_yaml(sample_cv, path)
        loaded = load_cv(path)
        assert loaded.title == sample_cv.title
        assert len(loaded.sections) == len(sample_cv.sections)
        assert format_cv(loaded) == format_cv(sample_cv)

    def test_hand_written_yaml_with_camel_case_keys(self, tmp_path: Path):
        path = tmp_path / "cv.yaml"
        path.write_text(
            "title: Hand Written\n"
            "sections:\n"
            "  - type: contact\n"
            "    title: Contact\n"
            "    data:\n"
            "      fullName: Ada Lovelace\n"
            "      email: ada@example.com\n"
            "  - type: experience\n"
            "    title: Experience\n"
            "    data:\n"
            "      items:\n"
            "        - position: Engineer\n"
            "          company: Analytical Engines\n"
            "          startDate: 2019-01-01\n"
            "          endDate: null\n"
            "          current: true\n",
            encoding="utf-8",
        )
        text = format_cv(load_cv(path))
        assert "- Name: Ada Lovelace\n" in text
        assert "  Period: 2019-01-01 - Present\n" in text

    def test_load_json(self, tmp_path: Path):
        path = tmp_path / "cv.json"
        path.write_text(json.dumps({
            "title": "JSON CV",
            "sections": [
                {"type": "skills", "title": "Skills", "visible": True,
                 "data": {"items": ["Python"]}},
            ],
        }))
        doc = load_cv(path)
        assert doc.title == "JSON CV"
        assert "Python" in format_cv(doc)

    def test_empty_file_raises(self, tmp_path: Path):
        path = tmp_path / "cv.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="empty"):
            load_cv(path)


def test_default_path_is_under_data():
    path = get_default_cv_path()
    assert path.name == "cv.yaml"
    assert path.parent.name == "data"
