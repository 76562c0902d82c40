"""Command line entry point for the storefront e2e suite.

Usage:
    # Run every scenario, write reports/html/index.html
    storefront-e2e run

    # Headed Firefox against a local mirror, extra pytest args after --
    storefront-e2e run --browser firefox --headed --base-url http://localhost:8080 -- -k login

    # Validate and list fixture users
    storefront-e2e users
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

import pytest
import structlog

from storefront_e2e.config import configure_logging, get_settings
from storefront_e2e.core.exceptions import ConfigurationError, FixtureLoadError
from storefront_e2e.fixtures.store import FixtureStore

log = structlog.get_logger(__name__)

DEFAULT_TESTS_PATH = "tests/e2e"
REPORT_FILE_NAME = "index.html"

# CLI option -> settings environment variable
_ENV_OVERRIDES = {
    "base_url": "SITE_BASE_URL",
    "browser": "BROWSER_NAME",
    "slow_mo": "SLOW_MO",
    "report_dir": "REPORT_DIR",
    "users_fixture": "USERS_FIXTURE_PATH",
    "upload_file": "UPLOAD_FILE_PATH",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="storefront-e2e",
        description="Browser end-to-end scenarios for the AutomationExercise storefront",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Run all scenarios and write the HTML report")
    run.add_argument("--tests", default=DEFAULT_TESTS_PATH, help="Scenario directory")
    run.add_argument("--base-url", help="Start page for every scenario")
    run.add_argument("--browser", choices=["chromium", "firefox", "webkit"])
    run.add_argument("--headed", action="store_true", help="Show the browser window")
    run.add_argument("--slow-mo", type=int, help="Delay between browser actions (ms)")
    run.add_argument("--report-dir", help="Directory for the HTML report")
    run.add_argument("--users-fixture", help="JSON file with user records")
    run.add_argument("--upload-file", help="File attached by the contact form scenario")
    run.add_argument("pytest_args", nargs="*", help="Extra arguments passed to pytest")

    users = subparsers.add_parser("users", help="Validate and list fixture users")
    users.add_argument("--users-fixture", help="JSON file with user records")

    return parser


def _apply_overrides(args: argparse.Namespace) -> None:
    """Export CLI options as settings env vars and drop the cached settings."""
    for option, env_var in _ENV_OVERRIDES.items():
        value = getattr(args, option, None)
        if value is not None:
            os.environ[env_var] = str(value)
    if getattr(args, "headed", False):
        os.environ["HEADED"] = "true"
    get_settings.cache_clear()


def pytest_arguments(args: argparse.Namespace) -> list[str]:
    """Translate ``run`` options into a pytest command line."""
    settings = get_settings()
    report = Path(settings.report_dir) / REPORT_FILE_NAME
    return [
        args.tests,
        "-m",
        "e2e",
        "--browser",
        settings.browser_name,
        f"--html={report}",
        "--self-contained-html",
        *args.pytest_args,
    ]


def check_inputs() -> None:
    """Fail before any browser starts when a scenario input file is unusable.

    Raises:
        ConfigurationError: The contact form attachment does not exist.
        FixtureLoadError: The user fixture file is missing or malformed.
    """
    upload_file = get_settings().upload_file_path
    if not upload_file.is_file():
        raise ConfigurationError(f"upload file not found: {upload_file}")
    FixtureStore().load()


def run_scenarios(args: argparse.Namespace) -> int:
    """Run the e2e scenarios; returns pytest's exit code."""
    check_inputs()

    pytest_args = pytest_arguments(args)
    log.info("scenarios_started", pytest_args=pytest_args)
    exit_code = int(pytest.main(pytest_args))
    log.info(
        "scenarios_finished",
        exit_code=exit_code,
        report=str(Path(get_settings().report_dir) / REPORT_FILE_NAME),
    )
    return exit_code


def list_users() -> int:
    """Print one line per fixture user."""
    for index, user in enumerate(FixtureStore().load()):
        print(f"{index}: {user.name} <{user.email}> ({user.gender.value}, {user.country})")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    _apply_overrides(args)
    configure_logging()

    try:
        if args.command == "run":
            return run_scenarios(args)
        return list_users()
    except ConfigurationError as e:
        log.error("configuration_invalid", error=str(e))
        return 2
    except FixtureLoadError as e:
        log.error("fixture_load_failed", error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
