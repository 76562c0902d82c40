"""Configuration module for storefront-e2e.

Usage:
    from storefront_e2e.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.site_base_url)

Note:
    Use `get_settings()` rather than a module-level instance so that
    environment overrides set by test fixtures are picked up after
    `get_settings.cache_clear()`.
"""

from storefront_e2e.config.logging import configure_logging
from storefront_e2e.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
