"""CV assistant CLI commands — one per generation entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cvassist.cli import build_assistant, console, load_cv_option, run_generation
from cvassist.core.formatting import format_cv

_CV_HELP = "CV file (YAML or JSON). Defaults to data/cv.yaml."


def context_command(
    cv: Optional[Path] = typer.Option(None, "--cv", help=_CV_HELP),
) -> None:
    """Print the CV context exactly as it is sent to the model."""
    console.print(format_cv(load_cv_option(cv)), markup=False, highlight=False)


def ask_command(
    question: str = typer.Argument(help="Your question about the CV."),
    cv: Optional[Path] = typer.Option(None, "--cv", help=_CV_HELP),
) -> None:
    """Ask a free-form question about your CV."""
    document = load_cv_option(cv)
    run_generation(build_assistant().generate(question, document), "Advice")


def cover_letter_command(
    cv: Optional[Path] = typer.Option(None, "--cv", help=_CV_HELP),
    job_description: Optional[str] = typer.Option(
        None, "--job-description", "-j", help="Job description to target."
    ),
    company: Optional[str] = typer.Option(
        None, "--company", "-c", help="Company name."
    ),
) -> None:
    """Generate a cover letter from your CV."""
    document = load_cv_option(cv)
    run_generation(
        build_assistant().generate_cover_letter(document, job_description, company),
        "Cover Letter",
    )


def improve_command(
    section_type: str = typer.Argument(help="Section type, e.g. 'summary'."),
    content: str = typer.Argument(help="Current text of the section."),
    cv: Optional[Path] = typer.Option(None, "--cv", help=_CV_HELP),
) -> None:
    """Get suggestions and a rewrite for one CV section."""
    document = load_cv_option(cv)
    run_generation(
        build_assistant().improve_section(document, section_type, content),
        f"Improve: {section_type}",
    )


def interview_command(
    cv: Optional[Path] = typer.Option(None, "--cv", help=_CV_HELP),
) -> None:
    """Generate likely interview questions with answering tips."""
    document = load_cv_option(cv)
    run_generation(
        build_assistant().generate_interview_questions(document),
        "Interview Questions",
    )


def skills_command(
    cv: Optional[Path] = typer.Option(None, "--cv", help=_CV_HELP),
) -> None:
    """Suggest skills that would make your CV more competitive."""
    document = load_cv_option(cv)
    run_generation(build_assistant().suggest_skills(document), "Skill Suggestions")
