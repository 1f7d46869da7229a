"""Shared test fixtures — DRY helpers available to all test modules."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from cvassist.core.models import CVDocument, CVSection, SectionType
from cvassist.llm.credentials import MemoryCredentialStore


@pytest.fixture
def sample_cv() -> CVDocument:
    return CVDocument(
        id="cv-1",
        title="Backend Developer CV",
        sections=[
            CVSection(
                type=SectionType.CONTACT,
                title="Contact Information",
                data={
                    "fullName": "Alice Martin",
                    "email": "alice@example.com",
                    "phone": "+1-555-0100",
                    "location": "Montreal, QC",
                    "github": "github.com/alicem",
                },
            ),
            CVSection(
                type=SectionType.SUMMARY,
                title="Professional Summary",
                data={"content": "Backend developer with 8 years of Python."},
            ),
            CVSection(
                type=SectionType.EXPERIENCE,
                title="Work Experience",
                data={
                    "items": [
                        {
                            "position": "Senior Developer",
                            "company": "Acme Corp",
                            "location": "Montreal",
                            "startDate": "2020-01",
                            "endDate": "",
                            "current": True,
                            "description": "Built REST APIs.",
                        },
                        {
                            "position": "Developer",
                            "company": "Initech",
                            "location": "Toronto",
                            "startDate": "2016-05",
                            "endDate": "2019-12",
                            "current": False,
                            "description": "Maintained billing system.",
                        },
                    ]
                },
            ),
            CVSection(
                type=SectionType.EDUCATION,
                title="Education",
                data={
                    "items": [
                        {
                            "degree": "BSc",
                            "field": "Computer Science",
                            "institution": "McGill University",
                            "location": "Montreal",
                            "startDate": "2012-09",
                            "endDate": "2016-05",
                            "gpa": "3.8",
                        }
                    ]
                },
            ),
            CVSection(
                type=SectionType.SKILLS,
                title="Skills",
                data={"items": ["Python", "SQL"]},
            ),
            CVSection(
                type=SectionType.SUMMARY,
                title="Private Notes",
                visible=False,
                data={"content": "Do not share: salary expectations"},
            ),
        ],
    )


@pytest.fixture
def memory_store() -> MemoryCredentialStore:
    return MemoryCredentialStore()


@pytest.fixture
def mock_http() -> Callable[..., httpx.AsyncClient]:
    """Factory for an ``httpx.AsyncClient`` whose requests go to *handler*."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make

