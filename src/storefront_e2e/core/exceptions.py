"""storefront-e2e exception hierarchy.

This module defines the base exception class and specialized exceptions
for the fixture, driver and assertion layers of the suite.
"""


class StorefrontE2EError(Exception):
    """Base exception for all storefront-e2e errors.

    All custom exceptions in the suite should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(StorefrontE2EError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("Upload file not found: /tmp/missing.txt")
    """

    pass


class FixtureLoadError(StorefrontE2EError):
    """Raised when fixture data is missing or malformed.

    Fatal for the whole run: no scenario can execute without user records.

    Attributes:
        path: Fixture file that failed to load (if known).

    Example:
        raise FixtureLoadError("Record 1 is missing 'email'", path=users_path)
    """

    def __init__(self, message: str, path: object | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class DriverError(StorefrontE2EError):
    """Base class for page driver failures.

    Attributes:
        selector: Selector of the element involved.
    """

    def __init__(self, message: str, selector: str) -> None:
        self.selector = selector
        super().__init__(message)


class ElementNotFoundError(DriverError):
    """Raised when a required element did not appear within the bounded wait.

    Example:
        raise ElementNotFoundError('[data-qa="signup-name"]', timeout_ms=10_000)
    """

    def __init__(self, selector: str, timeout_ms: int | None = None) -> None:
        self.timeout_ms = timeout_ms
        message = f"Element not found: {selector}"
        if timeout_ms is not None:
            message = f"{message} (waited {timeout_ms} ms)"
        super().__init__(message, selector)


class InteractionError(DriverError):
    """Raised when an element exists but cannot be interacted with.

    Attributes:
        action: The UI action that failed (type, click, select, ...).

    Example:
        raise InteractionError("click", '[data-qa="login-button"]', "element is disabled")
    """

    def __init__(self, action: str, selector: str, reason: str = "") -> None:
        self.action = action
        message = f"Cannot {action} {selector}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, selector)


class AssertionFailure(StorefrontE2EError, AssertionError):
    """Raised when expected page text or state did not materialize.

    Subclasses AssertionError so pytest reports it as a failed assertion.

    Attributes:
        expectation: Human readable description of what was expected.

    Example:
        raise AssertionFailure("'Account Created!' to be visible")
    """

    def __init__(self, expectation: str, detail: str = "") -> None:
        self.expectation = expectation
        message = f"Expected {expectation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
