"""Playwright E2E fixtures for the AutomationExercise storefront.

This module provides fixtures for:
- Browser and context setup driven by Settings
- A PageDriver positioned on the start page for every scenario
- Fixture users, with unique emails for register scenarios
- A seeded known-good account for the login scenarios

Usage:
    @pytest.mark.e2e
    def test_login(driver, registered_user):
        login_user(driver, registered_user)
"""

import uuid
from collections.abc import Generator
from typing import Any

import pytest
from playwright.sync_api import Page

from storefront_e2e.config import get_settings
from storefront_e2e.core.exceptions import FixtureLoadError
from storefront_e2e.driver import PlaywrightPageDriver
from storefront_e2e.fixtures.store import FixtureStore
from storefront_e2e.models.user import UserRecord
from storefront_e2e.workflows import ensure_registered

# Fixture slots
KNOWN_USER_INDEX = 0  # Patrick: must exist for login scenarios
NEW_USER_INDEX = 1  # Julie: created and deleted by register scenarios


# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser launch arguments."""
    settings = get_settings()
    return {
        **browser_type_launch_args,
        "headless": not settings.headed,
        "slow_mo": settings.slow_mo,
    }


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser context for the storefront."""
    settings = get_settings()
    return {
        **browser_context_args,
        "viewport": {"width": settings.viewport_width, "height": settings.viewport_height},
        "ignore_https_errors": True,
    }


# =============================================================================
# Fixture Users
# =============================================================================


@pytest.fixture(scope="session")
def fixture_users() -> list[UserRecord]:
    """Load fixture users once; abort the whole run if they are unusable."""
    try:
        return FixtureStore().load()
    except FixtureLoadError as e:
        pytest.exit(f"Fixture data unusable: {e}", returncode=pytest.ExitCode.USAGE_ERROR)


@pytest.fixture
def known_user(fixture_users: list[UserRecord]) -> UserRecord:
    """The account the login scenarios authenticate with."""
    return fixture_users[KNOWN_USER_INDEX]


@pytest.fixture
def new_user(fixture_users: list[UserRecord]) -> UserRecord:
    """Register-scenario user with an email no previous run has used."""
    user = fixture_users[NEW_USER_INDEX]
    local, domain = user.email.split("@", 1)
    return user.with_overrides(email=f"{local}.{uuid.uuid4().hex[:10]}@{domain}")


# =============================================================================
# Driver
# =============================================================================


@pytest.fixture
def driver(page: Page) -> Generator[PlaywrightPageDriver, None, None]:
    """Wrap the pytest-playwright page and open the start page.

    Every scenario starts from its own navigation, so nothing done by a
    previous scenario (e.g. a logged in session) is relied upon.
    """
    settings = get_settings()
    page_driver = PlaywrightPageDriver(
        page,
        timeout_ms=settings.default_timeout_ms,
        navigation_timeout_ms=settings.navigation_timeout_ms,
    )
    page_driver.navigate(settings.site_base_url)
    yield page_driver


@pytest.fixture
def registered_user(driver: PlaywrightPageDriver, known_user: UserRecord) -> UserRecord:
    """Known user whose account is guaranteed to exist; session left logged out."""
    ensure_registered(driver, known_user, get_settings().site_base_url)
    return known_user
