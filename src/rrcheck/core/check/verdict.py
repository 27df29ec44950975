"""Deciding PASS or FAIL from the final page content."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rrcheck.core.errors import DriverError

from .models import Verdict
from .selectors import KNOWN_ERROR_MESSAGE

if TYPE_CHECKING:
    from rrcheck.core.driver import PageDriver
    from rrcheck.core.reporter import Reporter


def judge(html: str) -> Verdict:
    """FAIL only when the exact known error message is in ``html``; case and whitespace matter."""
    return Verdict.FAIL if KNOWN_ERROR_MESSAGE in html else Verdict.PASS


async def evaluate_verdict(driver: PageDriver, reporter: Reporter) -> tuple[Verdict, str]:
    """Return the verdict and the HTML it was based on.

    When the content cannot be read the verdict is PASS and the returned text
    describes the error instead.
    """
    reporter.info("Getting page content for check...")
    try:
        html = await driver.content()
    except DriverError as e:
        reporter.error(f"Failed to get page content after page load: {e}")
        reporter.warning("Check Result: PASS (Could not get page content to verify, defaulting to PASS)")
        return Verdict.PASS, f"Error getting content: {e}"

    reporter.info("Checking content for specific Application Error string...")
    verdict = judge(html)
    if verdict is Verdict.FAIL:
        reporter.warning("Check Result: FAIL (Found Application Error string in page content)")
    else:
        reporter.info("Check Result: PASS (Application Error string not found in page content)")
    return verdict, html
