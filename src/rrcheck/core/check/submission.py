"""Entering the target URL and starting the remote test."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rrcheck.core.errors import SubmissionError

from . import selectors
from .locators import InteractionStep

if TYPE_CHECKING:
    from rrcheck.core.config.main import TimeoutsConfig

    from .interaction import Interactor


async def submit_url(interactor: Interactor, timeouts: TimeoutsConfig, target_url: str) -> None:
    """Type ``target_url`` into the tool and press the test button.

    Raises ``SubmissionError`` if either element cannot be used; the caller
    saves the failure screenshot.
    """
    reporter = interactor.reporter

    reporter.info("Attempting to input URL...")
    url_input = InteractionStep(selectors.URL_INPUT, timeouts.url_input, settle_ms=0)
    if not await interactor.type_into(url_input, target_url, diagnose=False):
        raise SubmissionError("Failed to enter the URL into the URL input field.")
    reporter.info("URL input successful.")

    reporter.info("Starting test process by clicking button...")
    submit = InteractionStep(selectors.TEST_URL_BUTTON, timeouts.submit, settle_ms=timeouts.submit_settle)
    if not await interactor.click(submit, diagnose=False):
        selector = selectors.TEST_URL_BUTTON.locators[0].selector
        raise SubmissionError(f"Failed to click the specific Test URL button element ({selector}).")
    reporter.info("Test button clicked, waiting for response...")
