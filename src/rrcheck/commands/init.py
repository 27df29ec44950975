"""Initialize rrcheck configuration."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.prompt import Confirm

from rrcheck.core.config.main import RRCheckConfig

console = Console()


def init_command(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing rrcheck.yaml"),
) -> None:
    """Write a default rrcheck.yaml to the current directory."""
    config_path = RRCheckConfig.get_config_path()
    if config_path.exists() and not force and not Confirm.ask(f"{config_path.name} already exists. Overwrite?"):
        console.print("[yellow]Keeping the existing configuration.[/yellow]")
        return

    RRCheckConfig().save(config_path)
