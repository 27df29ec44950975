"""Known elements of the Rich Results Test UI.

The tool's markup is obfuscated and changes without notice; everything that
depends on it lives here.
"""

from __future__ import annotations

from .locators import Locator, UiTarget

KNOWN_ERROR_MESSAGE = (
    "Application error: a client-side exception has occurred (see the browser console for more information)."
)

OBSTRUCTION_MODAL_TEXT = "span.uW2Fw-k2Wrsb-fmcmS"

DISMISS_BUTTON = UiTarget(
    "Dismiss Button",
    (
        Locator.css('span[jsname="V67aGc"]'),
        Locator.text("button", "Dismiss"),
    ),
)

URL_INPUT = UiTarget("URL Input", (Locator.css('input[aria-label="Enter a URL to test"]'),))

TEST_URL_BUTTON = UiTarget("Test URL Button", (Locator.css("span.RveJvd.snByac"),))

VIEW_TESTED_PAGE = UiTarget("View Tested Page", (Locator.text('div[role="button"]', "View tested page"),))

SCREENSHOT_TAB = UiTarget("Screenshot Tab", (Locator.css('div.ThdJC.kaAt2.xagcJf.dyhUwd[role="tab"]'),))

MORE_INFO_TAB = UiTarget("More Info Tab", (Locator.css('div.ThdJC.kaAt2.xagcJf.S5PKsc[role="tab"]'),))

CONSOLE_MESSAGES_BUTTON = UiTarget(
    "JavaScript Console Messages Button",
    (Locator.text('div[role="button"]', "JavaScript console messages"),),
)

SCREENSHOT_IMAGE = 'img[alt="Screenshot"]'

CONSOLE_LOG_CONTAINER = "div.myH6rc"
