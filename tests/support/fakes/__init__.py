"""
Test Doubles

In-memory stand-ins for the browser boundary.

Usage:
    from tests.support.fakes import FakePageDriver, text_key
"""

from tests.support.fakes.fake_driver import FakePageDriver, text_key

__all__ = ["FakePageDriver", "text_key"]
