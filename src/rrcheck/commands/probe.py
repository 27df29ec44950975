"""Plain HTTP probe command."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from rrcheck.core.config.main import RRCheckConfig
from rrcheck.core.probe import probe_url

console = Console(stderr=True)


def probe_command(
    url: str = typer.Argument(..., help="URL to fetch"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to an rrcheck.yaml file"),
) -> None:
    """Fetch a URL as Googlebot and look for the client-side error string."""
    cfg = RRCheckConfig.load_config(config_path)
    result = probe_url(url, cfg.probe)
    if result.fetch_error is not None:
        console.print(f"[red]Fetch Error:[/red] {result.fetch_error}", highlight=False)
    print(result.model_dump_json())
