"""Contact form workflow."""

from __future__ import annotations

from pathlib import Path

import structlog

from storefront_e2e.constants import site
from storefront_e2e.driver.base import PageDriver
from storefront_e2e.models.user import UserRecord

log = structlog.get_logger(__name__)

DEFAULT_SUBJECT = "Test Subject"
DEFAULT_MESSAGE = "Automated end-to-end contact form check."


def submit_contact_form(
    driver: PageDriver,
    user: UserRecord,
    attachment: Path,
    subject: str = DEFAULT_SUBJECT,
    message: str = DEFAULT_MESSAGE,
) -> None:
    """Open "Contact us", send a message with an attachment, verify success.

    Raises:
        AssertionFailure: The contact page or the success status did not show.
        InteractionError: ``attachment`` does not exist or a control is unusable.
    """
    log.info("contact_form_started", email=user.email, attachment=str(attachment))

    driver.click(driver.find_by_text(site.CONTACT_LINK_TEXT, "a"))
    driver.expect_url_path(site.CONTACT_PATH, exact=False)
    driver.expect_visible(driver.find(site.CONTACT_FORM))

    driver.type(driver.find_qa(site.QA_CONTACT_NAME), user.name)
    driver.type(driver.find_qa(site.QA_CONTACT_EMAIL), user.email)
    driver.type(driver.find_qa(site.QA_CONTACT_SUBJECT), subject)
    driver.type(driver.find_qa(site.QA_CONTACT_MESSAGE), message)
    driver.upload_file(driver.find(site.CONTACT_FILE_INPUT), attachment)

    driver.click(driver.find_qa(site.QA_CONTACT_SUBMIT))
    driver.expect_text(driver.find(site.CONTACT_STATUS), site.CONTACT_SUCCESS)
    log.info("contact_form_submitted", email=user.email)


def return_home(driver: PageDriver) -> None:
    """Follow the "Home" link and wait for the storefront root."""
    driver.click(driver.find_by_text(site.HOME_LINK_TEXT, "a"))
    driver.expect_url_path(site.HOME_PATH)
