"""Exceptions raised by rrcheck."""

from __future__ import annotations


class RRCheckError(Exception):
    """Base class for every rrcheck error."""


class DriverError(RRCheckError):
    """A browser interaction failed."""


class DriverTimeoutError(DriverError):
    """A browser wait elapsed before its condition held."""


class RunFailure(RRCheckError):
    """A failure that ends the run without a verdict.

    ``screenshot_name`` is the file the controller saves the page state to
    before flushing, or None when no screenshot should be attempted.
    """

    screenshot_name: str | None = None


class SubmissionError(RunFailure):
    """The URL could not be entered or the test could not be started."""

    screenshot_name = "click-failure-state.png"


class TerminalStateTimeout(RunFailure):
    """The remote analysis never reached a terminal state."""

    screenshot_name = "timeout-state.png"


class OutputDirectoryError(RunFailure):
    """The output directory could not be created."""
