"""Shared fixtures: a scripted page driver and an in-memory reporter."""

from __future__ import annotations

from io import BytesIO
from typing import TYPE_CHECKING

import pytest
from PIL import Image

from rrcheck.core.check import selectors
from rrcheck.core.check.interaction import Interactor
from rrcheck.core.check.report import ReportWriter
from rrcheck.core.config.main import RRCheckConfig, TimeoutsConfig
from rrcheck.core.driver import PageDriver
from rrcheck.core.errors import DriverError, DriverTimeoutError
from rrcheck.core.reporter import Reporter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from rrcheck.core.check.locators import UiTarget


def png_bytes(size: tuple[int, int] = (4, 3)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, "white").save(buffer, format="PNG")
    return buffer.getvalue()


def sel(target: UiTarget, index: int = 0) -> str:
    return target.locators[index].selector


PAGE_SIZE = (8, 6)
ELEMENT_SIZE = (3, 2)

CONSOLE_TEXT = "Uncaught TypeError: Cannot read properties of undefined"

# Everything a clean run clicks, types into or screenshots.
ALL_CONTROLS = frozenset(
    {
        sel(selectors.URL_INPUT),
        sel(selectors.TEST_URL_BUTTON),
        sel(selectors.VIEW_TESTED_PAGE),
        sel(selectors.SCREENSHOT_TAB),
        sel(selectors.MORE_INFO_TAB),
        sel(selectors.CONSOLE_MESSAGES_BUTTON),
        selectors.SCREENSHOT_IMAGE,
    }
)


class FakeDriver(PageDriver):
    """Scripted stand-in for a browser page.

    ``visible`` selectors can be waited for, clicked and typed into; anything else
    times out. ``broken`` selectors are visible but fail when acted on, and
    ``crashing`` ones raise the given exception instead.
    ``body_texts`` are returned one per poll, the last one repeating; an exception
    in the list is raised instead.
    """

    def __init__(
        self,
        visible: Iterable[str] = ALL_CONTROLS,
        *,
        hidden: Iterable[str] = (),
        broken: Iterable[str] = (),
        crashing: dict[str, Exception] | None = None,
        attached: dict[str, str | Exception | None] | None = None,
        body_texts: Iterable[str | Exception] = ("Results  View tested page",),
        content: str = "<html><body>All good</body></html>",
        content_error: str | None = None,
        screenshot_error: str | None = None,
        navigate_error: str | None = None,
    ) -> None:
        self.visible = set(visible) - set(hidden)
        self.broken = set(broken)
        self.crashing = crashing or {}
        self.attached = {selectors.CONSOLE_LOG_CONTAINER: CONSOLE_TEXT} if attached is None else attached
        self.body_texts = list(body_texts)
        self._content = content
        self.content_error = content_error
        self.screenshot_error = screenshot_error
        self.navigate_error = navigate_error

        self.calls: list[tuple[str, str]] = []
        self.typed: dict[str, str] = {}
        self.polls = 0
        self.wait_timeouts: dict[str, int] = {}

    def _record(self, action: str, target: str = "") -> None:
        self.calls.append((action, target))

    def actions(self, action: str) -> list[str]:
        return [target for name, target in self.calls if name == action]

    async def navigate(self, url: str, timeout_ms: int) -> None:
        self._record("navigate", url)
        if self.navigate_error is not None:
            raise DriverError(self.navigate_error)

    async def wait_for_visible(self, selector: str, timeout_ms: int) -> None:
        self._record("wait_for_visible", selector)
        self.wait_timeouts[selector] = timeout_ms
        if selector not in self.visible:
            raise DriverTimeoutError(f"Timeout {timeout_ms}ms exceeded waiting for {selector}")

    async def wait_for_attached(self, selector: str, timeout_ms: int) -> None:
        self._record("wait_for_attached", selector)
        self.wait_timeouts[selector] = timeout_ms
        if selector not in self.attached:
            raise DriverTimeoutError(f"Timeout {timeout_ms}ms exceeded waiting for {selector}")

    async def _act(self, action: str, selector: str, timeout_ms: int) -> None:
        if selector in self.crashing:
            raise self.crashing[selector]
        if selector in self.broken:
            raise DriverError(f"Element {selector} is not interactable")
        if selector not in self.visible:
            raise DriverTimeoutError(f"Timeout {timeout_ms}ms exceeded waiting for {selector}")
        self._record(action, selector)

    async def click(self, selector: str, timeout_ms: int) -> None:
        await self._act("click", selector, timeout_ms)

    async def type_text(self, selector: str, text: str, timeout_ms: int) -> None:
        await self._act("type", selector, timeout_ms)
        self.typed[selector] = text

    async def body_text(self) -> str:
        self.polls += 1
        item = self.body_texts.pop(0) if len(self.body_texts) > 1 else self.body_texts[0]
        if isinstance(item, Exception):
            raise item
        return item

    async def text_content(self, selector: str) -> str | None:
        value = self.attached.get(selector)
        if isinstance(value, Exception):
            raise value
        return value

    async def content(self) -> str:
        self._record("content")
        if self.content_error is not None:
            raise DriverError(self.content_error)
        return self._content

    async def screenshot(self) -> bytes:
        self._record("screenshot")
        if self.screenshot_error is not None:
            raise DriverError(self.screenshot_error)
        return png_bytes(PAGE_SIZE)

    async def element_screenshot(self, selector: str) -> bytes | None:
        self._record("element_screenshot", selector)
        if selector not in self.visible:
            return None
        return png_bytes(ELEMENT_SIZE)


class MemoryReporter(Reporter):
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message in self.records if lvl == level]


def fast_timeouts() -> TimeoutsConfig:
    """Timeouts that keep the real polling and sleeping paths but finish instantly."""
    return TimeoutsConfig(
        obstruction_settle=0,
        submit_settle=0,
        terminal_budget=50,
        terminal_poll_interval=1,
        step_settle=0,
        text_settle=0,
        view_page_settle=0,
    )


@pytest.fixture
def config() -> RRCheckConfig:
    return RRCheckConfig(timeouts=fast_timeouts())


@pytest.fixture
def reporter() -> MemoryReporter:
    return MemoryReporter()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"


@pytest.fixture
def writer(output_dir: Path, reporter: MemoryReporter) -> ReportWriter:
    return ReportWriter(output_dir, reporter)


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def interactor(driver: FakeDriver, reporter: MemoryReporter, writer: ReportWriter) -> Interactor:
    return Interactor(driver, reporter, writer, text_settle_ms=0)
