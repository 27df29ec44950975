"""Instrumented single-attempt UI actions."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from rrcheck.core.screenshot import screenshot_page

from .models import ScreenshotArtifact

if TYPE_CHECKING:
    from rrcheck.core.driver import PageDriver
    from rrcheck.core.reporter import Reporter

    from .locators import InteractionStep, Locator
    from .report import ReportWriter


async def pause(ms: int) -> None:
    if ms > 0:
        await asyncio.sleep(ms / 1000)


class Interactor:
    """Performs one action per step and reports whether it happened.

    Nothing is retried: a step's alternative locators are tried in order and
    the first one that works wins. When all of them fail, a screenshot named
    after the step and action is saved (unless ``diagnose`` is off because the
    caller takes its own) and ``False`` is returned. No exception escapes.
    """

    def __init__(
        self,
        driver: PageDriver,
        reporter: Reporter,
        writer: ReportWriter,
        text_settle_ms: int = 500,
    ) -> None:
        self.driver = driver
        self.reporter = reporter
        self.writer = writer
        self.text_settle_ms = text_settle_ms

    async def click(self, step: InteractionStep, diagnose: bool = True) -> bool:
        return await self._attempt(step, text=None, diagnose=diagnose)

    async def type_into(self, step: InteractionStep, text: str, diagnose: bool = True) -> bool:
        return await self._attempt(step, text=text, diagnose=diagnose)

    async def _attempt(self, step: InteractionStep, text: str | None, diagnose: bool) -> bool:
        verb = "click" if text is None else "type into"
        locators = step.target.locators
        for index, locator in enumerate(locators):
            self.reporter.info(f"Attempting to {verb} '{step.name}' ({locator.selector})...")
            try:
                await self._act(step, locator, text)
            except Exception as e:  # noqa: BLE001
                if index + 1 < len(locators):
                    self.reporter.warning(
                        f"Failed to {verb} '{step.name}' via {locator.selector}: {e}. Trying next locator..."
                    )
                    continue
                self.reporter.error(f"Failed to {verb} '{step.name}': {e}")
                break
            self.reporter.info(f"Successfully completed {verb} '{step.name}'.")
            return True

        if diagnose:
            action = "click" if text is None else "type"
            await self.save_diagnostic(f"{step.target.slug}-{action}-failure.png")
        return False

    async def _act(self, step: InteractionStep, locator: Locator, text: str | None) -> None:
        if locator.is_text:
            # Text locators are matched at action time; give the UI a moment to settle instead.
            await pause(self.text_settle_ms)
        else:
            self.reporter.debug(f"Waiting for selector '{locator.selector}' with timeout {step.wait_ms}ms")
            await self.driver.wait_for_visible(locator.selector, step.wait_ms)

        if text is None:
            await self.driver.click(locator.selector, step.wait_ms)
        else:
            await self.driver.type_text(locator.selector, text, step.wait_ms)
        await pause(step.settle_ms)

    async def capture(self, file_name: str) -> ScreenshotArtifact | None:
        """Screenshot the whole page; failures are logged and yield None."""
        try:
            image = await screenshot_page(self.driver)
        except Exception as e:  # noqa: BLE001
            self.reporter.error(f"Failed to take screenshot {file_name}: {e}")
            return None
        return ScreenshotArtifact(file_name, image)

    async def save_diagnostic(self, file_name: str) -> None:
        artifact = await self.capture(file_name)
        if artifact is not None:
            self.writer.write_image(artifact.file_name, artifact.image)
