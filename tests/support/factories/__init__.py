"""
Test Data Factories

Factory-boy based factories for generating test data.
Follows the pattern: Faker + overrides.

Usage:
    from tests.support.factories import UserRecordFactory

    user = UserRecordFactory.build()
    user = UserRecordFactory.build(gender="female", newsletter=False)
"""

from tests.support.factories.user_factory import SubscribedUserFactory, UserRecordFactory

__all__ = ["SubscribedUserFactory", "UserRecordFactory"]
