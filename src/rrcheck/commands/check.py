"""Run the Rich Results Test check command."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rrcheck.core.check import RunResult, Verdict, run_check
from rrcheck.core.config.main import RRCheckConfig
from rrcheck.core.outputs import write_outputs
from rrcheck.core.reporter import ConsoleReporter

console = Console()

DEFAULT_OUTPUT_DIR = Path("rich-results-output")


def _summary_table(result: RunResult) -> Table:
    table = Table(title="Reported outputs", show_header=True, header_style="bold")
    table.add_column("Output")
    table.add_column("Value")
    for name, value in result.reported_outputs().items():
        table.add_row(name, value)
    return table


def check_command(
    url: str = typer.Argument(..., envvar="INPUT_URL", help="URL to run through the Rich Results Test"),
    output_dir: Path = typer.Option(
        DEFAULT_OUTPUT_DIR,
        "--output-dir",
        "-o",
        envvar="INPUT_OUTPUT-DIRECTORY",
        help="Directory for the verdict, HTML, screenshot and console log",
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to an rrcheck.yaml file"),
    headed: bool = typer.Option(False, "--headed", help="Show the browser window"),
    fail_on_error: bool = typer.Option(False, "--fail-on-error", help="Exit with code 2 when the verdict is FAIL"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug output"),
) -> None:
    """Check whether a page triggers the client-side application error."""
    cfg = RRCheckConfig.load_config(config_path)
    if headed:
        cfg.browser.headless = False

    reporter = ConsoleReporter(console, verbose=verbose or cfg.verbose)
    result = asyncio.run(run_check(url, output_dir, cfg, reporter))

    console.print(_summary_table(result))
    write_outputs(result.reported_outputs())

    if not result.success:
        console.print(Panel(f"❌ {result.failure}", title="Check failed", border_style="red"))
        raise typer.Exit(1)

    style = "green" if result.verdict is Verdict.PASS else "yellow"
    console.print(
        Panel.fit(
            f"Application Error Check: [bold]{result.verdict}[/bold] ({result.duration_s:.1f}s)",
            title="Result",
            border_style=style,
        )
    )
    if fail_on_error and result.verdict is Verdict.FAIL:
        raise typer.Exit(2)
