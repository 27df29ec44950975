from __future__ import annotations

import time
from traceback import format_exc
from typing import TYPE_CHECKING

from rrcheck.core.driver.playwright import open_page

from .controller import RichResultsCheck
from .models import RunResult
from .report import ReportWriter

if TYPE_CHECKING:
    from pathlib import Path

    from rrcheck.core.config.main import RRCheckConfig
    from rrcheck.core.reporter import Reporter


async def run_check(target_url: str, output_dir: Path | str, config: RRCheckConfig, reporter: Reporter) -> RunResult:
    """Open a browser, run one check, and close the browser whatever the outcome."""
    start = time.perf_counter()
    writer = ReportWriter(output_dir, reporter)
    reporter.info(f"Output directory: {writer.resolved_dir}")

    try:
        async with open_page(config.browser, reporter) as driver:
            return await RichResultsCheck(driver, config, writer, reporter).run(target_url)
    except Exception as e:  # noqa: BLE001
        # Browser launch or teardown failures
        tb = format_exc()
        reporter.error(f"[ERROR] Main execution failed: {e}")
        reporter.error(tb)
        return RunResult(
            verdict=None,
            duration_s=time.perf_counter() - start,
            failure=f"Main execution failed: {e}",
            traceback=tb,
        )
