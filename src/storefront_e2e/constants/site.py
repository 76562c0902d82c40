"""AutomationExercise storefront contract: selectors, paths and banner text.

The site exposes its form controls through a stable ``data-qa`` attribute;
everything else is addressed by id, class or link target.
"""

from typing import Final

# =============================================================================
# Banners
# =============================================================================

ACCOUNT_CREATED: Final[str] = "Account Created!"
ACCOUNT_DELETED: Final[str] = "Account Deleted!"
EMAIL_EXISTS: Final[str] = "Email Address already exist!"
LOGIN_FAILED: Final[str] = "Your email or password is incorrect!"
LOGIN_HEADING: Final[str] = "Login to your account"
SIGNUP_HEADING: Final[str] = "New User Signup!"
ACCOUNT_INFO_HEADING: Final[str] = "Enter Account Information"
CONTACT_SUCCESS: Final[str] = "Success! Your details have been submitted successfully."
LOGGED_IN_AS: Final[str] = "Logged in as {name}"

# =============================================================================
# Navigation
# =============================================================================

SIGNUP_LOGIN_LINK_TEXT: Final[str] = "Signup / Login"
CONTACT_LINK_TEXT: Final[str] = "Contact us"
HOME_LINK_TEXT: Final[str] = "Home"

LOGOUT_LINK: Final[str] = 'a[href="/logout"]'
DELETE_ACCOUNT_LINK: Final[str] = 'a[href="/delete_account"]'

HOME_PATH: Final[str] = "/"
CONTACT_PATH: Final[str] = "/contact_us"

# =============================================================================
# Signup / login forms (data-qa names)
# =============================================================================

QA_SIGNUP_NAME: Final[str] = "signup-name"
QA_SIGNUP_EMAIL: Final[str] = "signup-email"
QA_SIGNUP_BUTTON: Final[str] = "signup-button"

QA_LOGIN_EMAIL: Final[str] = "login-email"
QA_LOGIN_PASSWORD: Final[str] = "login-password"
QA_LOGIN_BUTTON: Final[str] = "login-button"

QA_PASSWORD: Final[str] = "password"
QA_DAYS: Final[str] = "days"
QA_MONTHS: Final[str] = "months"
QA_YEARS: Final[str] = "years"
QA_FIRST_NAME: Final[str] = "first_name"
QA_LAST_NAME: Final[str] = "last_name"
QA_COMPANY: Final[str] = "company"
QA_ADDRESS: Final[str] = "address"
QA_ADDRESS2: Final[str] = "address2"
QA_COUNTRY: Final[str] = "country"
QA_STATE: Final[str] = "state"
QA_CITY: Final[str] = "city"
QA_ZIPCODE: Final[str] = "zipcode"
QA_MOBILE: Final[str] = "mobile_number"
QA_CREATE_ACCOUNT: Final[str] = "create-account"
QA_CONTINUE: Final[str] = "continue-button"

GENDER_RADIOS: Final[dict[str, str]] = {"male": "#id_gender1", "female": "#id_gender2"}
NEWSLETTER_CHECKBOX: Final[str] = "#newsletter"
OPTIN_CHECKBOX: Final[str] = "#optin"

# Whichever of these renders first after submitting the signup form decides
# the branch: the password field of the details form, or the red message
# paragraph inside the signup form.
SIGNUP_ERROR_MESSAGE: Final[str] = ".signup-form form p"
SIGNUP_RESULT: Final[str] = f'[data-qa="{QA_PASSWORD}"], {SIGNUP_ERROR_MESSAGE}'

# =============================================================================
# Contact form
# =============================================================================

CONTACT_FORM: Final[str] = "div.contact-form"
QA_CONTACT_NAME: Final[str] = "name"
QA_CONTACT_EMAIL: Final[str] = "email"
QA_CONTACT_SUBJECT: Final[str] = "subject"
QA_CONTACT_MESSAGE: Final[str] = "message"
QA_CONTACT_SUBMIT: Final[str] = "submit-button"
CONTACT_FILE_INPUT: Final[str] = 'input[type="file"]'
CONTACT_STATUS: Final[str] = ".status"


def qa(name: str) -> str:
    """Build a ``data-qa`` attribute selector."""
    return f'[data-qa="{name}"]'


def logged_in_as(name: str) -> str:
    """Banner shown in the header once ``name`` is authenticated."""
    return LOGGED_IN_AS.format(name=name)
