"""Playwright implementation of the page driver."""

from __future__ import annotations

from contextlib import asynccontextmanager, contextmanager
from typing import TYPE_CHECKING

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from rrcheck.core.errors import DriverError, DriverTimeoutError

from .base import PageDriver

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

    from playwright.async_api import Page

    from rrcheck.core.config.main import BrowserConfig
    from rrcheck.core.reporter import Reporter


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except PlaywrightTimeoutError as e:
        raise DriverTimeoutError(e.message) from e
    except PlaywrightError as e:
        raise DriverError(e.message) from e


class PlaywrightDriver(PageDriver):
    """Drives a single Playwright page."""

    def __init__(self, page: Page) -> None:
        self.page = page

    async def navigate(self, url: str, timeout_ms: int) -> None:
        with _translate_errors():
            await self.page.goto(url, wait_until="networkidle", timeout=timeout_ms)

    async def wait_for_visible(self, selector: str, timeout_ms: int) -> None:
        with _translate_errors():
            await self.page.wait_for_selector(selector, state="visible", timeout=timeout_ms)

    async def wait_for_attached(self, selector: str, timeout_ms: int) -> None:
        with _translate_errors():
            await self.page.wait_for_selector(selector, state="attached", timeout=timeout_ms)

    async def click(self, selector: str, timeout_ms: int) -> None:
        with _translate_errors():
            await self.page.locator(selector).first.click(timeout=timeout_ms)

    async def type_text(self, selector: str, text: str, timeout_ms: int) -> None:
        with _translate_errors():
            await self.page.locator(selector).first.press_sequentially(text, timeout=timeout_ms)

    async def body_text(self) -> str:
        with _translate_errors():
            return await self.page.evaluate("() => document.body ? document.body.innerText || '' : ''")

    async def text_content(self, selector: str) -> str | None:
        with _translate_errors():
            handle = await self.page.query_selector(selector)
            if handle is None:
                return None
            return await handle.text_content()

    async def content(self) -> str:
        with _translate_errors():
            return await self.page.content()

    async def screenshot(self) -> bytes:
        with _translate_errors():
            return await self.page.screenshot(type="png")

    async def element_screenshot(self, selector: str) -> bytes | None:
        with _translate_errors():
            handle = await self.page.query_selector(selector)
            if handle is None:
                return None
            return await handle.screenshot(type="png")


@asynccontextmanager
async def open_page(config: BrowserConfig, reporter: Reporter) -> AsyncIterator[PlaywrightDriver]:
    """Launch Chromium, yield a driver for a fresh page, and always close the browser."""
    async with async_playwright() as pw:
        reporter.info("Launching browser...")
        browser = await pw.chromium.launch(
            headless=config.headless,
            args=config.args,
            channel=config.channel,
        )
        try:
            context = await browser.new_context(
                viewport={"width": config.viewport.width, "height": config.viewport.height},
                user_agent=config.user_agent,
            )
            page = await context.new_page()
            reporter.info("Browser launched successfully.")
            yield PlaywrightDriver(page)
        finally:
            reporter.info("Closing browser...")
            try:
                await browser.close()
            except PlaywrightError as e:
                reporter.warning(f"Error closing browser: {e.message}")
            else:
                reporter.info("Browser closed successfully.")
