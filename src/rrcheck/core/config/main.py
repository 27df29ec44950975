"""Configuration management for rrcheck."""

from __future__ import annotations

from pathlib import Path
from typing import Self

import typer
import yaml
from pydantic import BaseModel, Field
from rich.console import Console

console = Console()

GOOGLEBOT_SMARTPHONE_UA = (
    "Mozilla/5.0 (Linux; Android 6.0.1; Nexus 5X Build/MMB29P) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Mobile Safari/537.36 "
    "(compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
)


class ViewportConfig(BaseModel):
    """Viewport configuration settings."""

    width: int = 1366
    height: int = 768


class BrowserConfig(BaseModel):
    """Browser launch settings."""

    headless: bool = True
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    args: list[str] = Field(
        default_factory=lambda: [
            "--no-sandbox",
            "--disable-setuid-sandbox",
            "--disable-blink-features=AutomationControlled",
        ]
    )
    user_agent: str | None = None
    channel: str | None = None


class TimeoutsConfig(BaseModel):
    """Waits and settle delays, all in milliseconds."""

    navigation: int = 60000
    obstruction_probe: int = 7000
    obstruction_settle: int = 1000
    url_input: int = 10000
    submit: int = 10000
    submit_settle: int = 500
    terminal_budget: int = 300000
    terminal_poll_interval: int = 2000
    step_wait: int = 5000
    step_settle: int = 1000
    text_settle: int = 500
    view_page_wait: int = 10000
    view_page_settle: int = 2000
    screenshot_image: int = 10000
    console_button_wait: int = 15000
    console_log: int = 30000


class CheckConfig(BaseModel):
    """Settings for the Rich Results Test workflow."""

    tool_url: str = "https://search.google.com/test/rich-results"
    # The bare word "Error" anywhere in the page body ends polling.
    match_generic_error: bool = True


class ProbeConfig(BaseModel):
    """Settings for the plain HTTP probe."""

    user_agent: str = GOOGLEBOT_SMARTPHONE_UA
    timeout_s: float = 15.0


class RRCheckConfig(BaseModel):
    """Main rrcheck configuration."""

    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    timeouts: TimeoutsConfig = Field(default_factory=TimeoutsConfig)
    check: CheckConfig = Field(default_factory=CheckConfig)
    probe: ProbeConfig = Field(default_factory=ProbeConfig)
    verbose: bool = False

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the configuration file."""
        return Path.cwd() / "rrcheck.yaml"

    @classmethod
    def load_config(cls, config_path: Path | None = None) -> Self:
        """Load configuration from rrcheck.yaml, falling back to defaults when it is absent."""
        explicit = config_path is not None
        config_path = config_path or cls.get_config_path()

        if not config_path.exists():
            if explicit:
                console.print(f"[red]Error:[/red] Configuration file {config_path} not found.")
                raise typer.Exit(-1)
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
            return cls(**config_data)
        except (OSError, ValueError, TypeError) as e:
            console.print(f"[red]{e.__class__.__name__} loading configuration:[/red] {e}")
            raise typer.Exit(-1) from e

    def save(self, config_path: Path | None = None) -> Path:
        """Save configuration to rrcheck.yaml."""
        config_path = config_path or self.get_config_path()

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(self.model_dump(), f, sort_keys=False)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error saving configuration:[/red] {e}")
            raise typer.Exit(-1) from e
        else:
            console.print(f"[green]Configuration saved to {config_path}[/green]")

        return config_path
