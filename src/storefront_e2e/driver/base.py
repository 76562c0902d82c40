"""Page driver contract.

The driver is the only boundary between workflow commands and a real
browser. Every call blocks until the page has settled (or the bounded wait
expires), and calls issued by one workflow never overlap.

Implementations:
- PlaywrightPageDriver: Playwright sync API
- FakePageDriver (tests/support/fakes): scripted, for workflow unit tests
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from storefront_e2e.constants.site import qa
from storefront_e2e.core.exceptions import AssertionFailure, ElementNotFoundError


@dataclass(frozen=True)
class ElementHandle:
    """A located element.

    Attributes:
        selector: Human readable description used in errors and logs.
        target: Implementation specific object (a Playwright Locator, ...).
    """

    selector: str
    target: Any = None


class PageDriver(ABC):
    """Capability set the workflow commands rely on."""

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    @abstractmethod
    def navigate(self, url: str) -> None:
        """Load ``url`` and wait for the navigation to settle."""

    @abstractmethod
    def current_url_path(self) -> str:
        """Path component of the current URL."""

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    @abstractmethod
    def find(self, selector: str) -> ElementHandle:
        """Locate the first visible element matching ``selector``.

        Raises:
            ElementNotFoundError: If nothing matched within the bounded wait.
        """

    @abstractmethod
    def find_by_text(
        self, text: str, selector: str | None = None, exact: bool = False
    ) -> ElementHandle:
        """Locate the first element containing ``text``.

        Args:
            text: Substring the element's text must contain.
            selector: Optional selector restricting the candidates.
            exact: Require the whole (trimmed) text to equal ``text``, case
                sensitive, instead of a substring match.

        Raises:
            ElementNotFoundError: If nothing matched within the bounded wait.
        """

    def find_qa(self, name: str) -> ElementHandle:
        """Locate an element by its ``data-qa`` attribute."""
        return self.find(qa(name))

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    @abstractmethod
    def type(self, handle: ElementHandle, text: str) -> None:
        """Type ``text`` into an input."""

    @abstractmethod
    def click(self, handle: ElementHandle) -> None:
        """Click an element."""

    @abstractmethod
    def select(self, handle: ElementHandle, option: str) -> None:
        """Select an option of a <select> by value or label."""

    @abstractmethod
    def check(self, handle: ElementHandle) -> None:
        """Check a checkbox or radio."""

    @abstractmethod
    def upload_file(self, handle: ElementHandle, path: Path) -> None:
        """Attach a local file to a file input."""

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @abstractmethod
    def text_of(self, handle: ElementHandle) -> str:
        """Visible text of an element."""

    @abstractmethod
    def is_visible(self, handle: ElementHandle) -> bool:
        """Whether the element is currently visible (no waiting)."""

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    @abstractmethod
    def expect_visible(self, handle: ElementHandle) -> None:
        """Wait until the element is visible.

        Raises:
            AssertionFailure: If it is still hidden after the bounded wait.
        """

    @abstractmethod
    def expect_text(self, handle: ElementHandle, text: str) -> None:
        """Wait until the element's text contains ``text``.

        Raises:
            AssertionFailure: If the text never appeared within the bounded wait.
        """

    @abstractmethod
    def expect_url_path(self, path: str, exact: bool = True) -> None:
        """Wait until the current URL path equals (or contains) ``path``.

        Raises:
            AssertionFailure: If the path never matched within the bounded wait.
        """

    def expect_text_visible(self, text: str, selector: str | None = None) -> ElementHandle:
        """Locate an element whose text is exactly ``text`` and assert it is visible.

        Raises:
            AssertionFailure: If no such element shows up within the bounded wait.
        """
        try:
            handle = self.find_by_text(text, selector, exact=True)
        except ElementNotFoundError as e:
            raise AssertionFailure(f"{text!r} to be visible", str(e)) from e
        self.expect_visible(handle)
        return handle

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    @abstractmethod
    def screenshot(self) -> bytes:
        """PNG capture of the current viewport."""
