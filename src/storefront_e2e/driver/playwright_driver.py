"""Page driver backed by the Playwright sync API.

Playwright errors are translated at this boundary:
- lookup timeouts -> ElementNotFoundError
- action failures -> InteractionError
- expect() failures -> AssertionFailure
"""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import urlparse

import structlog
from playwright.sync_api import Dialog, Locator, Page, expect
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from storefront_e2e.core.exceptions import (
    AssertionFailure,
    ElementNotFoundError,
    InteractionError,
)
from storefront_e2e.driver.base import ElementHandle, PageDriver

log = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_MS = 10_000
NAVIGATION_TIMEOUT_MS = 30_000


class PlaywrightPageDriver(PageDriver):
    """PageDriver over a single Playwright ``Page``.

    JavaScript dialogs are accepted automatically; the contact form asks
    for a ``confirm()`` before it submits.

    Usage:
        driver = PlaywrightPageDriver(page, timeout_ms=10_000)
        driver.navigate("https://automationexercise.com")
        driver.click(driver.find_by_text("Signup / Login"))
    """

    def __init__(
        self,
        page: Page,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    ) -> None:
        self.page = page
        self.timeout_ms = timeout_ms
        self.navigation_timeout_ms = navigation_timeout_ms

        page.set_default_timeout(timeout_ms)
        page.set_default_navigation_timeout(navigation_timeout_ms)
        page.on("dialog", self._accept_dialog)

    @staticmethod
    def _accept_dialog(dialog: Dialog) -> None:
        log.debug("dialog_accepted", dialog_type=dialog.type, message=dialog.message)
        dialog.accept()

    @staticmethod
    def _locator(handle: ElementHandle) -> Locator:
        return handle.target

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self, url: str) -> None:
        log.debug("navigate", url=url)
        try:
            self.page.goto(url, wait_until="load", timeout=self.navigation_timeout_ms)
        except PlaywrightError as e:
            raise InteractionError("navigate to", url, str(e)) from e

    def current_url_path(self) -> str:
        return urlparse(self.page.url).path or "/"

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def _wait_visible(self, locator: Locator, selector: str) -> ElementHandle:
        try:
            locator.wait_for(state="visible", timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, timeout_ms=self.timeout_ms) from e
        return ElementHandle(selector=selector, target=locator)

    def find(self, selector: str) -> ElementHandle:
        return self._wait_visible(self.page.locator(selector).first, selector)

    def find_by_text(
        self, text: str, selector: str | None = None, exact: bool = False
    ) -> ElementHandle:
        if selector is None:
            locator = self.page.get_by_text(text, exact=exact)
            description = f"text={text!r}"
        else:
            has_text: str | re.Pattern[str] = text
            if exact:
                has_text = re.compile(rf"^\s*{re.escape(text)}\s*$")
            locator = self.page.locator(selector).filter(has_text=has_text)
            description = f"{selector} with text={text!r}"
        return self._wait_visible(locator.first, description)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def type(self, handle: ElementHandle, text: str) -> None:
        log.debug("type", selector=handle.selector)
        try:
            self._locator(handle).fill(text, timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise InteractionError("type into", handle.selector, str(e)) from e

    def click(self, handle: ElementHandle) -> None:
        log.debug("click", selector=handle.selector)
        try:
            self._locator(handle).click(timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise InteractionError("click", handle.selector, str(e)) from e

    def select(self, handle: ElementHandle, option: str) -> None:
        log.debug("select", selector=handle.selector, option=option)
        try:
            self._locator(handle).select_option(option, timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise InteractionError(f"select {option!r} in", handle.selector, str(e)) from e

    def check(self, handle: ElementHandle) -> None:
        log.debug("check", selector=handle.selector)
        try:
            self._locator(handle).check(timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise InteractionError("check", handle.selector, str(e)) from e

    def upload_file(self, handle: ElementHandle, path: Path) -> None:
        path = Path(path)
        if not path.is_file():
            raise InteractionError("upload to", handle.selector, f"no such file: {path}")
        log.debug("upload_file", selector=handle.selector, path=str(path))
        try:
            self._locator(handle).set_input_files(path, timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise InteractionError("upload to", handle.selector, str(e)) from e

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def text_of(self, handle: ElementHandle) -> str:
        try:
            return self._locator(handle).inner_text(timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise InteractionError("read text of", handle.selector, str(e)) from e

    def is_visible(self, handle: ElementHandle) -> bool:
        return self._locator(handle).is_visible()

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def expect_visible(self, handle: ElementHandle) -> None:
        try:
            expect(self._locator(handle)).to_be_visible(timeout=self.timeout_ms)
        except AssertionError as e:
            raise AssertionFailure(f"{handle.selector} to be visible", str(e)) from e

    def expect_text(self, handle: ElementHandle, text: str) -> None:
        try:
            expect(self._locator(handle)).to_contain_text(text, timeout=self.timeout_ms)
        except AssertionError as e:
            raise AssertionFailure(f"{handle.selector} to contain {text!r}", str(e)) from e

    def expect_url_path(self, path: str, exact: bool = True) -> None:
        def matches(url: str) -> bool:
            current = urlparse(url).path or "/"
            return current == path if exact else path in current

        try:
            self.page.wait_for_url(matches, wait_until="commit", timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            relation = "to be" if exact else "to include"
            raise AssertionFailure(
                f"URL path {relation} {path!r}", f"got {self.current_url_path()!r}"
            ) from e

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def screenshot(self) -> bytes:
        return self.page.screenshot(full_page=False)
