"""Waiting for the remote analysis to finish."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

from rrcheck.core.errors import DriverError, TerminalStateTimeout

from .markers import match_terminal_marker

if TYPE_CHECKING:
    from rrcheck.core.driver import PageDriver
    from rrcheck.core.reporter import Reporter

    from .markers import TerminalMarker


async def wait_for_terminal_state(
    driver: PageDriver,
    reporter: Reporter,
    budget_ms: int,
    interval_ms: int,
    match_generic_error: bool = True,
) -> TerminalMarker:
    """Poll the page body until a terminal marker shows up.

    Raises ``TerminalStateTimeout`` once ``budget_ms`` has elapsed without one.
    """
    minutes = f"{budget_ms / 60000:g} minutes"
    reporter.info("Waiting for final test results page state (this may take a minute or two)...")
    deadline = time.monotonic() + budget_ms / 1000

    while True:
        try:
            body = await driver.body_text()
        except DriverError as e:
            # The results view re-renders while loading; try again on the next tick.
            reporter.debug(f"Could not read page text while polling: {e}")
            body = ""

        marker = match_terminal_marker(body, match_generic_error)
        if marker is not None:
            reporter.info(f"Final test results page state reached ({marker.name}).")
            return marker

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            reporter.error(f"Timeout: Did not reach final results state within {minutes}.")
            raise TerminalStateTimeout(f"Timeout: Did not reach final results state within {minutes}.")
        await asyncio.sleep(min(interval_ms / 1000, remaining))
