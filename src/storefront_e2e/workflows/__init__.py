"""Reusable multi-step user workflows.

Usage:
    from storefront_e2e.workflows import login_user, signup_user

    outcome = signup_user(driver, user)
    if not outcome.created:
        ...
"""

from storefront_e2e.workflows.account import (
    delete_account,
    ensure_registered,
    login_user,
    logout_user,
    open_signup_login,
    signup_user,
)
from storefront_e2e.workflows.contact import return_home, submit_contact_form

__all__ = [
    "delete_account",
    "ensure_registered",
    "login_user",
    "logout_user",
    "open_signup_login",
    "return_home",
    "signup_user",
    "submit_contact_form",
]
