"""Fixture data for storefront-e2e scenarios."""

from storefront_e2e.fixtures.store import FixtureStore

__all__ = ["FixtureStore"]
