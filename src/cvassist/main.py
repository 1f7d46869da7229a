import logging
from importlib.metadata import version as pkg_version
from typing import Optional

import typer

from cvassist.cli.assist_cmd import (
    ask_command,
    context_command,
    cover_letter_command,
    improve_command,
    interview_command,
    skills_command,
)
from cvassist.cli.key_cmd import key_app

app = typer.Typer(
    name="cvassist",
    help="AI-powered CV assistant.",
    no_args_is_help=True,
    invoke_without_command=True,
)

app.add_typer(key_app, name="key")

app.command("context")(context_command)
app.command("ask")(ask_command)
app.command("cover-letter")(cover_letter_command)
app.command("improve")(improve_command)
app.command("interview")(interview_command)
app.command("skills")(skills_command)


def version_callback(value: bool):
    if value:
        typer.echo(f"cvassist {pkg_version('cvassist')}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging.",
    ),
):
    """AI-powered CV assistant."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s: %(message)s")
    logging.getLogger("cvassist").setLevel(level)


if __name__ == "__main__":
    app()
