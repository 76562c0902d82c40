"""structlog setup shared by the CLI and the test session."""

import logging
import sys

import structlog
from structlog.types import Processor

from storefront_e2e.config.settings import Settings, get_settings

# Libraries that log through the standard library and drown scenario events
QUIET_LOGGERS = ("asyncio", "faker", "urllib3")


def _renderer(settings: Settings) -> Processor:
    if settings.debug:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and stdlib logging from settings.

    Every event carries ``suite=<app_name>`` so JSON lines from parallel
    CI jobs can be told apart. Safe to call more than once; the CLI calls
    it after applying command line overrides.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(settings),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(suite=settings.app_name)

    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    logging.getLogger().setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
