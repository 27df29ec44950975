"""Data models for a check run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from PIL.Image import Image

    from .markers import TerminalMarker


class Verdict(StrEnum):
    PASS = "PASS"
    FAIL = "FAIL"


class OutputName(StrEnum):
    """Names under which artifact locations are reported to the caller."""

    CHECK_RESULT = "check-result"
    HTML_PATH = "html-path"
    SCREENSHOT_PATH = "screenshot-path"
    LOGS_PATH = "logs-path"


@dataclass
class ScreenshotArtifact:
    file_name: str
    image: Image


@dataclass
class RunArtifacts:
    """Everything a run accumulates before it is flushed to the output directory."""

    verdict: Verdict | None = None
    html_snapshot: str | None = None
    screenshot: ScreenshotArtifact | None = None
    console_log_text: str | None = None


@dataclass
class RunResult:
    verdict: Verdict | None
    duration_s: float
    failure: str | None = None
    traceback: str | None = None
    marker: TerminalMarker | None = None
    outputs: dict[OutputName, Path] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.failure is None

    def reported_outputs(self) -> dict[str, str]:
        """Flatten verdict and artifact paths into the name/value pairs handed to CI."""
        reported = {name.value: path.as_posix() for name, path in self.outputs.items()}
        if self.verdict is not None:
            reported = {OutputName.CHECK_RESULT.value: self.verdict.value} | reported
        return reported
