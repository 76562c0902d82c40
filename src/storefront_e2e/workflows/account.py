"""Account workflows: signup, login, logout and account deletion.

Every command takes the page driver explicitly and issues its calls one at
a time. Failures propagate to the calling scenario; the only expected
non-error branch is an already registered email during signup.
"""

from __future__ import annotations

import structlog

from storefront_e2e.constants import site
from storefront_e2e.driver.base import PageDriver
from storefront_e2e.models.user import SignupOutcome, SignupStatus, UserRecord

log = structlog.get_logger(__name__)


def open_signup_login(driver: PageDriver) -> None:
    """Click the header "Signup / Login" entry point."""
    driver.click(driver.find_by_text(site.SIGNUP_LOGIN_LINK_TEXT))


def signup_user(driver: PageDriver, user: UserRecord) -> SignupOutcome:
    """Register ``user`` through the signup form.

    Steps:
    1. Open the signup panel and submit name + email.
    2. If the signup form answers with the "already exists" message, stop
       and return ``ALREADY_EXISTS`` without touching the details form.
    3. Otherwise fill the account information form, create the account,
       continue, and verify the "Logged in as" banner.

    Args:
        driver: Page driver positioned on any page with the site header.
        user: Record to register. It is returned unchanged in the outcome.

    Returns:
        SignupOutcome tagged CREATED or ALREADY_EXISTS.

    Raises:
        AssertionFailure: A confirmation banner did not show up.
        ElementNotFoundError: A required control never appeared.
        InteractionError: A control could not be used.
    """
    log.info("signup_started", email=user.email)

    open_signup_login(driver)
    driver.expect_text_visible(site.SIGNUP_HEADING)

    driver.type(driver.find_qa(site.QA_SIGNUP_NAME), user.name)
    driver.type(driver.find_qa(site.QA_SIGNUP_EMAIL), user.email)
    driver.click(driver.find_qa(site.QA_SIGNUP_BUTTON))

    # Either the details form or the signup form's error message renders
    result = driver.find(site.SIGNUP_RESULT)
    if driver.text_of(result).strip() == site.EMAIL_EXISTS:
        log.info("signup_email_exists", email=user.email)
        return SignupOutcome(status=SignupStatus.ALREADY_EXISTS, user=user)

    driver.expect_text_visible(site.ACCOUNT_INFO_HEADING)
    _fill_account_information(driver, user)

    driver.click(driver.find_qa(site.QA_CREATE_ACCOUNT))
    driver.expect_text_visible(site.ACCOUNT_CREATED)
    driver.click(driver.find_qa(site.QA_CONTINUE))

    driver.expect_text_visible(site.logged_in_as(user.name))
    log.info("signup_completed", email=user.email)
    return SignupOutcome(status=SignupStatus.CREATED, user=user)


def _fill_account_information(driver: PageDriver, user: UserRecord) -> None:
    driver.click(driver.find(site.GENDER_RADIOS[user.gender.value]))

    driver.type(driver.find_qa(site.QA_PASSWORD), user.password)
    driver.select(driver.find_qa(site.QA_DAYS), user.day)
    driver.select(driver.find_qa(site.QA_MONTHS), user.month)
    driver.select(driver.find_qa(site.QA_YEARS), user.year)

    if user.newsletter:
        driver.check(driver.find(site.NEWSLETTER_CHECKBOX))
    if user.optin:
        driver.check(driver.find(site.OPTIN_CHECKBOX))

    driver.type(driver.find_qa(site.QA_FIRST_NAME), user.first_name)
    driver.type(driver.find_qa(site.QA_LAST_NAME), user.last_name)
    driver.type(driver.find_qa(site.QA_COMPANY), user.company)
    driver.type(driver.find_qa(site.QA_ADDRESS), user.address)
    driver.type(driver.find_qa(site.QA_ADDRESS2), user.address2)
    driver.select(driver.find_qa(site.QA_COUNTRY), user.country)
    driver.type(driver.find_qa(site.QA_STATE), user.state)
    driver.type(driver.find_qa(site.QA_CITY), user.city)
    driver.type(driver.find_qa(site.QA_ZIPCODE), user.zipcode)
    driver.type(driver.find_qa(site.QA_MOBILE), user.mobile)


def login_user(driver: PageDriver, user: UserRecord) -> None:
    """Submit the login form with ``user``'s email and password.

    Does not check the result: the same command drives both the successful
    and the rejected login scenarios, so the caller asserts the outcome.
    """
    log.info("login_started", email=user.email)

    driver.expect_visible(driver.find("body"))
    open_signup_login(driver)

    driver.type(driver.find_qa(site.QA_LOGIN_EMAIL), user.email)
    driver.type(driver.find_qa(site.QA_LOGIN_PASSWORD), user.password)
    driver.click(driver.find_qa(site.QA_LOGIN_BUTTON))


def logout_user(driver: PageDriver) -> None:
    """Log out and verify the login form is shown again."""
    driver.click(driver.find(site.LOGOUT_LINK))
    driver.expect_text_visible(site.LOGIN_HEADING)
    log.info("logout_completed")


def delete_account(driver: PageDriver) -> None:
    """Delete the logged in account and return to the storefront."""
    driver.click(driver.find(site.DELETE_ACCOUNT_LINK))
    driver.expect_text_visible(site.ACCOUNT_DELETED)
    driver.click(driver.find_qa(site.QA_CONTINUE))
    log.info("account_deleted")


def ensure_registered(driver: PageDriver, user: UserRecord, home_url: str) -> SignupOutcome:
    """Make sure an account exists for ``user`` and leave the session logged out.

    Runs ``signup_user`` from the home page; when that created the account
    the new session is logged out. Either way the driver ends on the home
    page.
    """
    driver.navigate(home_url)
    outcome = signup_user(driver, user)
    if outcome.created:
        log.info("account_seeded", email=user.email)
        logout_user(driver)
    driver.navigate(home_url)
    return outcome
