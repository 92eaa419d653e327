"""
Steadfast - Resilient element interactions for Selenium tests.

Scroll-aware lookup, interactability waits, animation settling and
multi-strategy clicks behind one facade keyed by element name.
"""

__version__ = "0.1.0"

from steadfast.core.errors import (
    ConfigurationError,
    InteractionError,
    NavigationError,
    NotFoundError,
    SteadfastError,
    VisibilityAssertionError,
    WaitTimeoutError,
)
from steadfast.core.facade import InteractionFacade
from steadfast.core.locators import ElementReference, LocatorRepository, LocatorResolver
from steadfast.core.session import InteractionSession, SessionConfig

__all__ = [
    "InteractionFacade",
    "InteractionSession",
    "SessionConfig",
    "LocatorRepository",
    "LocatorResolver",
    "ElementReference",
    "SteadfastError",
    "ConfigurationError",
    "NotFoundError",
    "WaitTimeoutError",
    "InteractionError",
    "NavigationError",
    "VisibilityAssertionError",
    "__version__",
]
