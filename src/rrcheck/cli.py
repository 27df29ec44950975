"""Main CLI application for rrcheck."""

import typer
from rich.console import Console

from . import __version__

console = Console()
app = typer.Typer(
    name="rrcheck",
    help="Catch client-side application errors through Google's Rich Results Test",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        console.print(f"rrcheck v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """
    rrcheck: Rich Results Test automation.

    Submits a URL to the Rich Results Test in a headless browser, waits for the
    analysis to finish and reports PASS or FAIL depending on whether the
    rendered page shows the Next.js client-side exception screen.
    """


def register_commands() -> None:
    """Register CLI commands."""
    from .commands.check import check_command
    from .commands.init import init_command
    from .commands.probe import probe_command

    app.command("check", help="Run a URL through the Rich Results Test")(check_command)
    app.command("probe", help="Fetch a URL as Googlebot and look for the error string")(probe_command)
    app.command("init", help="Create a default rrcheck.yaml")(init_command)


register_commands()


if __name__ == "__main__":
    app()
