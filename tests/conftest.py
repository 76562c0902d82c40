"""Shared pytest fixtures and hooks for storefront-e2e tests.

This module provides:
- Environment setup (.env loading, settings cache reset, logging)
- A scripted fake page driver
- Failure screenshots embedded in the pytest-html report

Usage:
    @pytest.mark.unit
    def test_something(fake_driver):
        user = UserRecordFactory.build()
        signup_user(fake_driver, user)
"""

import base64
import os
import re
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from pytest_html import extras as html_extras

from storefront_e2e.config import configure_logging, get_settings
from storefront_e2e.driver.base import PageDriver
from tests.support.fakes import FakePageDriver

log = structlog.get_logger(__name__)

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first (won't override existing env vars), then resets
    the cached settings so they reflect the loaded values.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    load_dotenv()
    get_settings.cache_clear()
    configure_logging()

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


@pytest.fixture
def clean_settings() -> Generator[None, None, None]:
    """Drop cached settings before and after a test that patches env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Test Doubles
# =============================================================================


@pytest.fixture
def fake_driver() -> FakePageDriver:
    """Scripted page driver with an empty page."""
    return FakePageDriver()


# =============================================================================
# Reporting
# =============================================================================


def _screenshot_path(nodeid: str) -> Path:
    safe_name = re.sub(r"[^A-Za-z0-9_.-]+", "_", nodeid).strip("_")
    return Path(get_settings().report_dir) / "screenshots" / f"{safe_name}.png"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]):
    """Attach a screenshot of the page to failed e2e reports."""
    outcome = yield
    report = outcome.get_result()

    if not report.failed or report.when == "teardown":
        return
    if item.get_closest_marker("e2e") is None:
        return

    driver = getattr(item, "funcargs", {}).get("driver")
    if not isinstance(driver, PageDriver):
        return

    try:
        png = driver.screenshot()
    except Exception as e:  # noqa: BLE001 - the browser may already be gone
        log.warning("screenshot_failed", test=item.nodeid, error=str(e))
        return

    path = _screenshot_path(item.nodeid)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(png)
    log.info("screenshot_saved", test=item.nodeid, path=str(path))

    extras = getattr(report, "extras", [])
    extras.append(html_extras.png(base64.b64encode(png).decode("ascii"), "Failure"))
    report.extras = extras


@pytest.hookimpl(optionalhook=True)
def pytest_html_report_title(report) -> None:
    """Use the configured report title."""
    report.title = get_settings().report_title
