"""Terminal-state detection for the Rich Results Test page."""

from __future__ import annotations

from enum import StrEnum


class TerminalMarker(StrEnum):
    """Text fragments that show the remote analysis has finished.

    The value of each member is the literal text searched for in the page body.
    """

    VIEW_TESTED_PAGE_AVAILABLE = "View tested page"
    URL_NOT_AVAILABLE_TO_GOOGLE = "URL is not available to Google"
    KNOWN_CLIENT_ERROR = "Application error: a client-side exception has occurred"
    FAILED_TO_TEST = "Failed to test"
    GENERIC_ERROR_TEXT = "Error"


def match_terminal_marker(body_text: str, match_generic_error: bool = True) -> TerminalMarker | None:
    """Return the first marker found in ``body_text``, or None while the analysis is still running."""
    for marker in TerminalMarker:
        if marker is TerminalMarker.GENERIC_ERROR_TEXT and not match_generic_error:
            continue
        if marker.value in body_text:
            return marker
    return None
