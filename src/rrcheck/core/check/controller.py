"""The Rich Results Test workflow for a single target URL."""

from __future__ import annotations

import time
from traceback import format_exc
from typing import TYPE_CHECKING

from rrcheck.core.errors import RunFailure

from .collector import ArtifactCollector
from .interaction import Interactor
from .models import RunArtifacts, RunResult
from .obstruction import clear_obstruction
from .poller import wait_for_terminal_state
from .submission import submit_url
from .verdict import evaluate_verdict

if TYPE_CHECKING:
    from rrcheck.core.config.main import RRCheckConfig
    from rrcheck.core.driver import PageDriver
    from rrcheck.core.reporter import Reporter

    from .markers import TerminalMarker
    from .report import ReportWriter

ERROR_STATE_SCREENSHOT_FILE = "error-state.png"


class RichResultsCheck:
    """Runs one check against an already opened page.

    The order is fixed: navigate, clear the modal, submit, poll for a terminal
    state, judge the content, then collect supporting artifacts. Anything up to
    and including polling can end the run; artifact collection cannot.
    """

    def __init__(self, driver: PageDriver, config: RRCheckConfig, writer: ReportWriter, reporter: Reporter) -> None:
        self.driver = driver
        self.config = config
        self.writer = writer
        self.reporter = reporter
        self.interactor = Interactor(driver, reporter, writer, text_settle_ms=config.timeouts.text_settle)

    async def run(self, target_url: str) -> RunResult:
        start = time.perf_counter()
        artifacts = RunArtifacts()
        marker: TerminalMarker | None = None
        failure: str | None = None
        tb: str | None = None

        self.reporter.info(f"Starting test for URL: {target_url}")
        try:
            marker = await self._reach_terminal_state(target_url)

            self.reporter.info("Ensuring output directory exists...")
            self.writer.ensure_directory()

            artifacts.verdict, artifacts.html_snapshot = await evaluate_verdict(self.driver, self.reporter)
            self.reporter.info(f"[FINAL RESULT] Application Error Check: {artifacts.verdict}")

            await ArtifactCollector(self.interactor, self.config.timeouts).collect(artifacts)
        except RunFailure as e:
            failure = str(e)
            self.reporter.error(f"[FATAL ERROR] {failure}")
            if e.screenshot_name is not None:
                artifacts.screenshot = await self.interactor.capture(e.screenshot_name)
        except Exception as e:  # noqa: BLE001
            failure = f"Main execution failed: {e}"
            tb = format_exc()
            self.reporter.error(f"[ERROR] {failure}")
            self.reporter.error(tb)
            await self.interactor.save_diagnostic(ERROR_STATE_SCREENSHOT_FILE)

        outputs = self.writer.flush(artifacts)

        return RunResult(
            verdict=artifacts.verdict,
            duration_s=time.perf_counter() - start,
            failure=failure,
            traceback=tb,
            marker=marker,
            outputs=outputs,
        )

    async def _reach_terminal_state(self, target_url: str) -> TerminalMarker:
        timeouts = self.config.timeouts

        self.reporter.info("Navigating to base Rich Results Test page...")
        await self.driver.navigate(self.config.check.tool_url, timeouts.navigation)
        self.reporter.info("Base test page loaded.")

        await clear_obstruction(self.interactor, timeouts)
        await submit_url(self.interactor, timeouts, target_url)
        return await wait_for_terminal_state(
            self.driver,
            self.reporter,
            budget_ms=timeouts.terminal_budget,
            interval_ms=timeouts.terminal_poll_interval,
            match_generic_error=self.config.check.match_generic_error,
        )
