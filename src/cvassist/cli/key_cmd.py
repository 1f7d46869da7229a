"""API key management CLI commands."""

from __future__ import annotations

import typer

from cvassist.cli import build_assistant, cli_error, console
from cvassist.llm.credentials import get_default_credentials_path

key_app = typer.Typer(
    name="key",
    help="Manage the Gemini API key.",
    no_args_is_help=True,
)


@key_app.command("set")
def key_set(
    token: str = typer.Argument(help="Gemini API key to store."),
) -> None:
    """Store an API key; it takes precedence over GEMINI_API_KEY."""
    if not token.strip():
        cli_error("API key must not be empty.")
    build_assistant().set_credential(token.strip())
    console.print(
        f"[green]API key saved[/green] to {get_default_credentials_path()}"
    )


@key_app.command("status")
def key_status() -> None:
    """Report whether an API key is configured."""
    if build_assistant().has_credential():
        console.print("[green]API key configured.[/green]")
    else:
        console.print(
            "[yellow]No API key configured.[/yellow] "
            "Run [bold]cvassist key set <KEY>[/bold] or set GEMINI_API_KEY."
        )
