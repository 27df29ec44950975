"""Browser page capability interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PageDriver(ABC):
    """The operations a check run may perform against one browser page.

    Every timeout is in milliseconds. Waits that elapse raise
    ``DriverTimeoutError``; any other failure raises ``DriverError``.
    """

    @abstractmethod
    async def navigate(self, url: str, timeout_ms: int) -> None:
        """Load ``url`` and wait for the network to go idle."""

    @abstractmethod
    async def wait_for_visible(self, selector: str, timeout_ms: int) -> None:
        """Wait until an element matching ``selector`` is visible."""

    @abstractmethod
    async def wait_for_attached(self, selector: str, timeout_ms: int) -> None:
        """Wait until an element matching ``selector`` is in the DOM."""

    @abstractmethod
    async def click(self, selector: str, timeout_ms: int) -> None:
        """Click the first element matching ``selector``."""

    @abstractmethod
    async def type_text(self, selector: str, text: str, timeout_ms: int) -> None:
        """Type ``text`` into the first element matching ``selector``."""

    @abstractmethod
    async def body_text(self) -> str:
        """Return the rendered text of the page body."""

    @abstractmethod
    async def text_content(self, selector: str) -> str | None:
        """Return the text content of the first match, or None when nothing matches."""

    @abstractmethod
    async def content(self) -> str:
        """Return the full serialized HTML of the page."""

    @abstractmethod
    async def screenshot(self) -> bytes:
        """Return a PNG screenshot of the viewport."""

    @abstractmethod
    async def element_screenshot(self, selector: str) -> bytes | None:
        """Return a PNG screenshot of the first match, or None when nothing matches."""
