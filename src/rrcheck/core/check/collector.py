"""Best-effort collection of the tested page screenshot and console messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rrcheck.core.errors import DriverTimeoutError
from rrcheck.core.screenshot import screenshot_element, screenshot_page

from . import selectors
from .locators import InteractionStep
from .models import ScreenshotArtifact

if TYPE_CHECKING:
    from rrcheck.core.config.main import TimeoutsConfig

    from .interaction import Interactor
    from .locators import UiTarget
    from .models import RunArtifacts

SCREENSHOT_FILE = "screenshot.png"
FALLBACK_SCREENSHOT_FILE = "fallback-screenshot.png"
SAVE_FAILURE_SCREENSHOT_FILE = "screenshot-save-failure.png"

SKIPPED_VIEW_PAGE = "Skipped (View Tested Page click failed)"
SKIPPED_MORE_INFO = "Skipped (More Info tab click failed)"
SKIPPED_CONSOLE_BUTTON = "Skipped (Console Messages button click failed)"
NO_CONSOLE_LOG = "No console log container found (likely no messages)."
EMPTY_CONSOLE_LOG = "Console log container found but empty."
VANISHED_CONSOLE_LOG = "Console log container found but disappeared before it could be read."


class ArtifactCollector:
    """Walks the "View tested page" panel and fills in screenshot and console log.

    Every sub-step may fail; a failure only replaces the affected artifact with a
    fallback or placeholder. The console log text is always set.
    """

    def __init__(self, interactor: Interactor, timeouts: TimeoutsConfig) -> None:
        self.interactor = interactor
        self.timeouts = timeouts
        self.reporter = interactor.reporter

    def _step(self, target: UiTarget, wait_ms: int | None = None, settle_ms: int | None = None) -> InteractionStep:
        return InteractionStep(
            target,
            wait_ms=self.timeouts.step_wait if wait_ms is None else wait_ms,
            settle_ms=self.timeouts.step_settle if settle_ms is None else settle_ms,
        )

    async def collect(self, artifacts: RunArtifacts) -> None:
        try:
            await self._collect(artifacts)
        except Exception as e:  # noqa: BLE001
            self.reporter.error(f"Artifact collection failed: {e}")
            artifacts.console_log_text = f"Artifact collection failed: {e}"

    async def _collect(self, artifacts: RunArtifacts) -> None:
        self.reporter.info("Attempting to gather screenshot and console logs (best effort)...")
        artifacts.console_log_text = SKIPPED_VIEW_PAGE

        timeouts = self.timeouts
        view_page = self._step(selectors.VIEW_TESTED_PAGE, timeouts.view_page_wait, timeouts.view_page_settle)
        if not await self.interactor.click(view_page):
            self.reporter.warning("View Tested Page click failed, skipping dependent screenshot and logs.")
            self.reporter.info(f"Taking fallback screenshot {FALLBACK_SCREENSHOT_FILE} instead...")
            artifacts.screenshot = await self.interactor.capture(FALLBACK_SCREENSHOT_FILE)
            return

        artifacts.screenshot = await self.tested_page_screenshot()
        artifacts.console_log_text = await self.console_log()

    async def tested_page_screenshot(self) -> ScreenshotArtifact | None:
        if not await self.interactor.click(self._step(selectors.SCREENSHOT_TAB)):
            self.reporter.warning("Screenshot Tab click failed, screenshot skipped.")
            return None

        self.reporter.info("Saving screenshot from Screenshot tab...")
        driver = self.interactor.driver
        try:
            try:
                await driver.wait_for_visible(selectors.SCREENSHOT_IMAGE, self.timeouts.screenshot_image)
            except DriverTimeoutError:
                image = None
            else:
                image = await screenshot_element(driver, selectors.SCREENSHOT_IMAGE)

            if image is None:
                self.reporter.warning(
                    f"Screenshot element ('{selectors.SCREENSHOT_IMAGE}') not found after clicking tab. "
                    "Saving fallback screenshot of tab."
                )
                image = await screenshot_page(driver)
        except Exception as e:  # noqa: BLE001
            self.reporter.error(f"Failed to save screenshot image: {e}")
            await self.interactor.save_diagnostic(SAVE_FAILURE_SCREENSHOT_FILE)
            return None

        return ScreenshotArtifact(SCREENSHOT_FILE, image)

    async def console_log(self) -> str:
        if not await self.interactor.click(self._step(selectors.MORE_INFO_TAB)):
            self.reporter.warning("More Info Tab click failed, logs skipped.")
            return SKIPPED_MORE_INFO

        console_button = self._step(selectors.CONSOLE_MESSAGES_BUTTON, self.timeouts.console_button_wait)
        if not await self.interactor.click(console_button):
            self.reporter.warning("JavaScript Console Messages button click failed, logs skipped.")
            return SKIPPED_CONSOLE_BUTTON

        self.reporter.info("Saving console logs...")
        driver = self.interactor.driver
        try:
            self.reporter.debug(f"Waiting for console log container: {selectors.CONSOLE_LOG_CONTAINER}")
            await driver.wait_for_attached(selectors.CONSOLE_LOG_CONTAINER, self.timeouts.console_log)
            text = await driver.text_content(selectors.CONSOLE_LOG_CONTAINER)
        except DriverTimeoutError:
            self.reporter.info(
                f"Console log container ('{selectors.CONSOLE_LOG_CONTAINER}') not found within timeout. "
                "Assuming no messages."
            )
            return NO_CONSOLE_LOG
        except Exception as e:  # noqa: BLE001
            self.reporter.error(f"Failed to extract console logs: {e}")
            return f"Failed to extract console logs: {e}"

        if text is None:
            return VANISHED_CONSOLE_LOG
        self.reporter.info("Console logs obtained successfully.")
        return text or EMPTY_CONSOLE_LOG
