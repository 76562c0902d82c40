"""Page drivers: the boundary between workflows and the browser."""

from storefront_e2e.driver.base import ElementHandle, PageDriver
from storefront_e2e.driver.playwright_driver import PlaywrightPageDriver

__all__ = ["ElementHandle", "PageDriver", "PlaywrightPageDriver"]
