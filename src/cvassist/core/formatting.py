"""CV-to-prompt formatting — renders a CV document as a plain-text context block.

The output is fed verbatim into LLM prompts, so it must be deterministic:
the same document always yields byte-identical text.
"""

from __future__ import annotations

import json

from cvassist.core.models import (
    ContactData,
    CVDocument,
    CVSection,
    EducationData,
    ExperienceData,
    SectionType,
    SkillsData,
    SummaryData,
)

NO_CV_DATA = "No CV data available."
NOT_PROVIDED = "Not provided"


def _format_contact(data: ContactData) -> list[str]:
    lines = [
        f"- Name: {data.full_name or NOT_PROVIDED}",
        f"- Email: {data.email or NOT_PROVIDED}",
        f"- Phone: {data.phone or NOT_PROVIDED}",
        f"- Location: {data.location or NOT_PROVIDED}",
    ]
    if data.website:
        lines.append(f"- Website: {data.website}")
    if data.linkedin:
        lines.append(f"- LinkedIn: {data.linkedin}")
    if data.github:
        lines.append(f"- GitHub: {data.github}")
    return lines


def _format_summary(data: SummaryData) -> list[str]:
    return [data.content or "No summary provided"]


def _format_experience(data: ExperienceData) -> list[str]:
    if not data.items:
        return ["No experience entries"]
    lines: list[str] = []
    for item in data.items:
        end = "Present" if item.current else item.end_date
        lines.extend([
            f"- {item.position} at {item.company}",
            f"  Location: {item.location}",
            f"  Period: {item.start_date} - {end}",
            f"  Description: {item.description}",
            "",
        ])
    return lines


def _format_education(data: EducationData) -> list[str]:
    if not data.items:
        return ["No education entries"]
    lines: list[str] = []
    for item in data.items:
        lines.extend([
            f"- {item.degree} in {item.field}",
            f"  Institution: {item.institution}",
            f"  Location: {item.location}",
            f"  Period: {item.start_date} - {item.end_date}",
        ])
        if item.gpa:
            lines.append(f"  GPA: {item.gpa}")
        if item.description:
            lines.append(f"  Description: {item.description}")
        lines.append("")
    return lines


def _format_skills(data: SkillsData) -> list[str]:
    if not data.items:
        return ["No skills listed"]
    return [", ".join(data.items)]


def _format_section_body(section: CVSection) -> list[str]:
    """Render one section's payload according to its type tag."""
    kind = section.type
    if kind == SectionType.CONTACT:
        return _format_contact(ContactData.model_validate(section.data))
    if kind == SectionType.SUMMARY:
        return _format_summary(SummaryData.model_validate(section.data))
    if kind == SectionType.EXPERIENCE:
        return _format_experience(ExperienceData.model_validate(section.data))
    if kind == SectionType.EDUCATION:
        return _format_education(EducationData.model_validate(section.data))
    if kind == SectionType.SKILLS:
        return _format_skills(SkillsData.model_validate(section.data))
    # Unknown / "other" sections: readable dump so nothing is silently dropped.
    return [json.dumps(section.data, indent=2, ensure_ascii=False, default=str)]


def format_cv(document: CVDocument | None) -> str:
    """Render *document* as the context block used in every prompt.

    Invisible sections are skipped. Each visible section is emitted as
    ``"<title>:"`` followed by its body and a blank separator line.
    """
    if document is None:
        return NO_CV_DATA

    lines = [f"CV Title: {document.title}", ""]
    for section in document.visible_sections():
        lines.append(f"{section.title}:")
        lines.extend(_format_section_body(section))
        lines.append("")
    return "\n".join(lines) + "\n"
