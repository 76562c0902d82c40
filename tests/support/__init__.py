"""Test support: factories and test doubles."""
