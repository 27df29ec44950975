"""Clearing the intermittent "Something went wrong" modal."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from rrcheck.core.errors import DriverTimeoutError

from . import selectors
from .interaction import pause
from .locators import InteractionStep

if TYPE_CHECKING:
    from rrcheck.core.config.main import TimeoutsConfig

    from .interaction import Interactor


class ObstructionOutcome(StrEnum):
    ABSENT = "absent"
    DISMISSED = "dismissed"
    DISMISS_FAILED = "dismiss_failed"


async def clear_obstruction(interactor: Interactor, timeouts: TimeoutsConfig) -> ObstructionOutcome:
    """Dismiss the modal if it shows up within the probe window.

    The run continues whatever happens here.
    """
    reporter = interactor.reporter
    reporter.info(
        f"Checking for 'Something went wrong' modal ({timeouts.obstruction_probe}ms timeout)..."
    )
    try:
        await interactor.driver.wait_for_visible(selectors.OBSTRUCTION_MODAL_TEXT, timeouts.obstruction_probe)
    except DriverTimeoutError:
        reporter.info("'Something went wrong' modal not detected within timeout (this is normal).")
        return ObstructionOutcome.ABSENT
    except Exception as e:  # noqa: BLE001
        reporter.warning(f"Could not probe for the 'Something went wrong' modal: {e}")
        return ObstructionOutcome.ABSENT

    reporter.warning("'Something went wrong' modal detected. Attempting to dismiss...")
    step = InteractionStep(selectors.DISMISS_BUTTON, wait_ms=timeouts.step_wait, settle_ms=0)
    dismissed = await interactor.click(step)
    if not dismissed:
        reporter.error("Failed to dismiss the modal with every known selector; continuing anyway.")

    await pause(timeouts.obstruction_settle)
    reporter.info("Proceeding after modal dismissal attempt.")
    return ObstructionOutcome.DISMISSED if dismissed else ObstructionOutcome.DISMISS_FAILED
