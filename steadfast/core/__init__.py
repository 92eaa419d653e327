"""Core module - Session, locators, errors and the interaction facade."""

from steadfast.core.facade import InteractionFacade
from steadfast.core.session import InteractionSession, SessionConfig

__all__ = ["InteractionFacade", "InteractionSession", "SessionConfig"]
