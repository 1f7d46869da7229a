"""CLI shared utilities — composition root and helpers used across all commands."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from cvassist.assistant import CVAssistant
from cvassist.core.cv_store import get_default_cv_path, load_cv
from cvassist.core.models import CVDocument
from cvassist.llm.config import load_config
from cvassist.llm.credentials import YamlCredentialStore, get_default_credentials_path
from cvassist.llm.errors import AssistantError

console = Console()


def cli_error(message: str) -> NoReturn:
    """Print a red error message and exit with code 1."""
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def build_assistant() -> CVAssistant:
    """Construct the single assistant instance the CLI works with."""
    return CVAssistant(
        YamlCredentialStore(get_default_credentials_path()),
        load_config(),
    )


def load_cv_option(path: Path | None) -> CVDocument | None:
    """Load the CV at *path* (or the default path).

    An explicit path that does not exist is an error; a missing default file
    just means no CV.
    """
    if path is None:
        path = get_default_cv_path()
        if not path.exists():
            return None
    elif not path.exists():
        cli_error(f"CV file not found: {path}")
    try:
        return load_cv(path)
    except Exception as exc:
        cli_error(f"Error loading CV: {exc}")


def run_generation(call: Coroutine[Any, Any, str], title: str) -> None:
    """Await a generation call and print the answer, or exit on failure."""
    try:
        text = asyncio.run(call)
    except AssistantError as exc:
        cli_error(exc.message)
    console.print(Panel(Markdown(text), title=title, border_style="green"))
