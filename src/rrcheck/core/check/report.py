"""Persisting run artifacts to the output directory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rrcheck.core.errors import OutputDirectoryError

from .models import OutputName

if TYPE_CHECKING:
    from PIL.Image import Image

    from rrcheck.core.reporter import Reporter

    from .models import RunArtifacts

RESULT_FILE = "final_result.txt"
CONTENT_FILE = "page_content.html"
LOGS_FILE = "errors.txt"


class ReportWriter:
    """Writes artifacts under ``output_dir``.

    Files are written with absolute paths, while reported locations keep
    ``output_dir`` exactly as the caller passed it.
    """

    def __init__(self, output_dir: Path | str, reporter: Reporter) -> None:
        self.output_dir = Path(output_dir)
        self.resolved_dir = self.output_dir.resolve()
        self.reporter = reporter

    def ensure_directory(self) -> None:
        if self.resolved_dir.is_dir():
            self.reporter.info(f"Output directory already exists: {self.resolved_dir}")
            return
        try:
            self.resolved_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.reporter.error(f"Failed to create output directory: {e}")
            raise OutputDirectoryError(f"Failed to create output directory: {e}") from e
        self.reporter.info(f"Created output directory: {self.resolved_dir}")

    def write_text(self, file_name: str, text: str) -> Path | None:
        """Write ``text`` and return its reported location, or None if it could not be written."""
        target = self.resolved_dir / file_name
        try:
            self.resolved_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            self.reporter.error(f"Failed to write {file_name}: {e}")
            return None
        self.reporter.info(f"Saved {target}")
        return self.output_dir / file_name

    def write_image(self, file_name: str, image: Image) -> Path | None:
        target = self.resolved_dir / file_name
        try:
            self.resolved_dir.mkdir(parents=True, exist_ok=True)
            image.save(target, format="PNG")
        except (OSError, ValueError) as e:
            self.reporter.error(f"Failed to save screenshot {file_name}: {e}")
            return None
        self.reporter.info(f"Screenshot saved to {target}")
        return self.output_dir / file_name

    def flush(self, artifacts: RunArtifacts) -> dict[OutputName, Path]:
        """Write whatever the run produced; each file succeeds or fails on its own."""
        outputs: dict[OutputName, Path] = {}

        if artifacts.verdict is not None:
            self.write_text(RESULT_FILE, artifacts.verdict.value)

        if artifacts.html_snapshot is not None:
            path = self.write_text(CONTENT_FILE, artifacts.html_snapshot)
            if path is not None:
                outputs[OutputName.HTML_PATH] = path

        if artifacts.screenshot is not None:
            path = self.write_image(artifacts.screenshot.file_name, artifacts.screenshot.image)
            if path is not None:
                outputs[OutputName.SCREENSHOT_PATH] = path

        if artifacts.console_log_text is not None:
            path = self.write_text(LOGS_FILE, artifacts.console_log_text)
            if path is not None:
                outputs[OutputName.LOGS_PATH] = path

        return outputs
