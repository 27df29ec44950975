"""Tests for the browser-owning run entry point."""

from contextlib import asynccontextmanager
from pathlib import Path
from unittest.mock import patch

from conftest import FakeDriver, MemoryReporter

from rrcheck.core.check import Verdict, run_check
from rrcheck.core.config.main import RRCheckConfig


def _open_page_with(driver: FakeDriver, released: list[bool]):
    @asynccontextmanager
    async def fake_open_page(config, reporter):
        try:
            yield driver
        finally:
            released.append(True)

    return fake_open_page


async def test_page_released_after_success(config: RRCheckConfig, output_dir: Path) -> None:
    released: list[bool] = []
    with patch("rrcheck.core.check.run.open_page", _open_page_with(FakeDriver(), released)):
        result = await run_check("https://example.com/", output_dir, config, MemoryReporter())

    assert result.verdict is Verdict.PASS
    assert released == [True]


async def test_page_released_after_fatal_failure(config: RRCheckConfig, output_dir: Path) -> None:
    released: list[bool] = []
    driver = FakeDriver(body_texts=["Still testing"])
    with patch("rrcheck.core.check.run.open_page", _open_page_with(driver, released)):
        result = await run_check("https://example.com/", output_dir, config, MemoryReporter())

    assert not result.success
    assert released == [True]


async def test_launch_failure_becomes_failed_result(config: RRCheckConfig, output_dir: Path) -> None:
    @asynccontextmanager
    async def broken_open_page(config, reporter):
        raise RuntimeError("Executable doesn't exist at /ms-playwright/chromium")
        yield

    reporter = MemoryReporter()
    with patch("rrcheck.core.check.run.open_page", broken_open_page):
        result = await run_check("https://example.com/", output_dir, config, reporter)

    assert result.verdict is None
    assert result.failure == "Main execution failed: Executable doesn't exist at /ms-playwright/chromium"
    assert result.traceback is not None
