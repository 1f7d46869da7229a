from __future__ import annotations

import enum
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _Payload(BaseModel):
    """Base for section payloads — accepts both ``start_date`` and ``startDate``."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Upstream editors send null for unset fields; fall back to defaults.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ---------------------------------------------------------------------------
# Section payloads (parsed from CVSection.data according to its type tag)
# ---------------------------------------------------------------------------

class ContactData(_Payload):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    website: str | None = None
    linkedin: str | None = None
    github: str | None = None


class SummaryData(_Payload):
    content: str | None = None


class ExperienceItem(_Payload):
    id: str | None = None
    position: str = ""
    company: str = ""
    location: str = ""
    start_date: str | date = ""
    end_date: str | date = ""
    current: bool = False
    description: str = ""


class EducationItem(_Payload):
    id: str | None = None
    degree: str = ""
    field: str = ""
    institution: str = ""
    location: str = ""
    start_date: str | date = ""
    end_date: str | date = ""
    gpa: str | None = None
    description: str | None = None


class ExperienceData(_Payload):
    items: list[ExperienceItem] = Field(default_factory=list)


class EducationData(_Payload):
    items: list[EducationItem] = Field(default_factory=list)


class SkillsData(_Payload):
    items: list[str] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _skip_null_entries(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [str(item) for item in v if item is not None]
        return v


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class SectionType(str, enum.Enum):
    CONTACT = "contact"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    OTHER = "other"


class CVSection(BaseModel):
    id: str | None = None
    # Unknown tags are kept as plain strings so they still reach the formatter.
    type: SectionType | str
    title: str
    visible: bool = True
    data: dict[str, Any] = Field(default_factory=dict)


class CVDocument(BaseModel):
    id: str | None = None
    title: str
    sections: list[CVSection] = Field(default_factory=list)

    def visible_sections(self) -> list[CVSection]:
        """Sections that may appear in generated context, in document order."""
        return [s for s in self.sections if s.visible]
