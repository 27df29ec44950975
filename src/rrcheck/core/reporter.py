"""Progress reporting for check runs."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape


class Reporter(ABC):
    """Observer that receives every log line a run produces."""

    @abstractmethod
    def debug(self, message: str) -> None: ...

    @abstractmethod
    def info(self, message: str) -> None: ...

    @abstractmethod
    def warning(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...


class ConsoleReporter(Reporter):
    """Reporter that renders to a rich console.

    When running inside GitHub Actions, warnings and errors are also emitted as
    workflow commands so they show up as annotations on the job.
    """

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        self.console = console or Console()
        self.verbose = verbose
        self.annotate = os.environ.get("GITHUB_ACTIONS") == "true"

    def debug(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def info(self, message: str) -> None:
        self.console.print(escape(message))

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{escape(message)}[/yellow]")
        if self.annotate:
            print(f"::warning::{_annotation(message)}", flush=True)

    def error(self, message: str) -> None:
        self.console.print(f"[red]{escape(message)}[/red]")
        if self.annotate:
            print(f"::error::{_annotation(message)}", flush=True)


def _annotation(message: str) -> str:
    # Workflow commands are single-line; newlines must be URL-encoded.
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
