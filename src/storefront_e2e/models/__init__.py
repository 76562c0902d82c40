"""Domain models for storefront-e2e."""

from storefront_e2e.models.user import Gender, SignupOutcome, SignupStatus, UserRecord

__all__ = ["Gender", "SignupOutcome", "SignupStatus", "UserRecord"]
