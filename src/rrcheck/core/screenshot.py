from __future__ import annotations

from io import BytesIO
from typing import TYPE_CHECKING

from PIL import Image

if TYPE_CHECKING:
    from rrcheck.core.driver import PageDriver


def load_png(data: bytes) -> Image.Image:
    image = Image.open(BytesIO(data), formats=["png"])
    image.load()
    return image


async def screenshot_page(driver: PageDriver) -> Image.Image:
    return load_png(await driver.screenshot())


async def screenshot_element(driver: PageDriver, selector: str) -> Image.Image | None:
    data = await driver.element_screenshot(selector)
    return load_png(data) if data is not None else None
