"""
Error taxonomy for element interactions.

Action-style operations raise these; verification-style operations
catch them and report ``False`` instead.
"""

from typing import Optional, Tuple


class SteadfastError(Exception):
    """Base class for all interaction failures."""

    def __init__(self, message: str, element_name: Optional[str] = None):
        super().__init__(message)
        self.element_name = element_name


class ConfigurationError(SteadfastError):
    """Unknown element name, malformed entry or unsupported locator type."""


class NotFoundError(SteadfastError):
    """Scroll search exhausted the page without a visible match."""


class WaitTimeoutError(SteadfastError, TimeoutError):
    """A wait condition was not met within its budget."""

    def __init__(
        self,
        message: str,
        element_name: Optional[str] = None,
        locator: Optional[Tuple[str, str]] = None,
        condition: Optional[str] = None,
    ):
        super().__init__(message, element_name)
        self.locator = locator
        self.condition = condition


class InteractionError(SteadfastError):
    """Every click strategy failed, or a driver call broke mid-action."""

    def __init__(
        self,
        message: str,
        element_name: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, element_name)
        self.cause = cause


class NavigationError(SteadfastError):
    """The driver could not load the requested URL."""


class VisibilityAssertionError(SteadfastError, AssertionError):
    """An element expected to be visible was not."""
