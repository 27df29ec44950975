"""Tests for terminal-state polling."""

import pytest
from conftest import FakeDriver, MemoryReporter

from rrcheck.core.check.markers import TerminalMarker
from rrcheck.core.check.poller import wait_for_terminal_state
from rrcheck.core.errors import DriverError, TerminalStateTimeout


async def test_returns_once_marker_appears(reporter: MemoryReporter) -> None:
    driver = FakeDriver(body_texts=["Testing live URL", "Testing live URL", "URL is not available to Google"])

    marker = await wait_for_terminal_state(driver, reporter, budget_ms=1000, interval_ms=1)

    assert marker is TerminalMarker.URL_NOT_AVAILABLE_TO_GOOGLE
    assert driver.polls == 3


async def test_immediate_match_polls_once(reporter: MemoryReporter) -> None:
    driver = FakeDriver(body_texts=["View tested page"])

    assert await wait_for_terminal_state(driver, reporter, budget_ms=1000, interval_ms=1) is (
        TerminalMarker.VIEW_TESTED_PAGE_AVAILABLE
    )
    assert driver.polls == 1


async def test_budget_elapsing_raises_timeout(reporter: MemoryReporter) -> None:
    driver = FakeDriver(body_texts=["Testing live URL"])

    with pytest.raises(TerminalStateTimeout, match="Did not reach final results state"):
        await wait_for_terminal_state(driver, reporter, budget_ms=20, interval_ms=1)
    assert driver.polls > 1
    assert reporter.messages("error")


async def test_read_errors_are_treated_as_still_loading(reporter: MemoryReporter) -> None:
    driver = FakeDriver(body_texts=[DriverError("Execution context was destroyed"), "Failed to test"])

    marker = await wait_for_terminal_state(driver, reporter, budget_ms=1000, interval_ms=1)

    assert marker is TerminalMarker.FAILED_TO_TEST
    assert any("Execution context was destroyed" in m for m in reporter.messages("debug"))


async def test_generic_error_switch(reporter: MemoryReporter) -> None:
    driver = FakeDriver(body_texts=["Error in widget"])

    with pytest.raises(TerminalStateTimeout):
        await wait_for_terminal_state(driver, reporter, budget_ms=10, interval_ms=1, match_generic_error=False)
