"""
Interaction Session - Shared driver handle and run-wide settings.

A session is created once per test run and handed to every component.
Components borrow the driver; none of them own or quit it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TYPE_CHECKING
import json
import logging
import os

from steadfast.core.clock import Clock
from steadfast.core.errors import ConfigurationError

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)

HIGHLIGHT_ENV_VAR = "STEADFAST_HIGHLIGHT_ELEMENTS"
DEFAULT_CONFIG_PATH = "steadfast.json"

_TRUTHY = {"true", "1", "yes", "on"}


def parse_bool(value: Any) -> bool:
    """Interpret config and environment values the way ``Boolean.parse`` would."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


@dataclass
class SessionConfig:
    """Configuration for an interaction session."""
    wait_timeout: float = 10.0
    highlight_elements: bool = False
    scroll_step: int = 300
    base_url: Optional[str] = None
    locators_path: Optional[str] = None

    @classmethod
    def load(
        cls,
        config_path: Optional[str] = None,
        highlight_override: Optional[bool] = None,
    ) -> "SessionConfig":
        """
        Build a config from a JSON settings file.

        Highlighting is resolved once, in priority order: the explicit
        ``highlight_override``, the ``STEADFAST_HIGHLIGHT_ELEMENTS``
        environment variable, the file's ``highlightElements`` key, and
        finally ``False``.

        Args:
            config_path: Settings file; defaults to ``./steadfast.json``.
                A missing file means "use defaults".
            highlight_override: Highest-priority highlight flag

        Raises:
            ConfigurationError: if the file exists but is not a JSON object
        """
        path = config_path or DEFAULT_CONFIG_PATH
        data = _read_settings(path)

        if highlight_override is not None:
            highlight = bool(highlight_override)
        elif os.environ.get(HIGHLIGHT_ENV_VAR) is not None:
            highlight = parse_bool(os.environ[HIGHLIGHT_ENV_VAR])
        else:
            highlight = parse_bool(data.get("highlightElements", False))

        config = cls(
            wait_timeout=_positive_number(data, "waitTimeout", cls.wait_timeout, float, path),
            highlight_elements=highlight,
            scroll_step=_positive_number(data, "scrollStep", cls.scroll_step, int, path),
            base_url=data.get("baseUrl"),
            locators_path=data.get("locators"),
        )
        logger.debug(f"[SessionConfig] Loaded from {path}: {config}")
        return config


def _positive_number(data: Dict[str, Any], key: str, default, cast, path: str):
    value = data.get(key, default)
    try:
        number = cast(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Setting '{key}' in '{path}' must be a number, got {value!r}") from e
    if isinstance(value, bool) or number <= 0:
        raise ConfigurationError(f"Setting '{key}' in '{path}' must be positive, got {value!r}")
    return number


def _read_settings(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Failed to read settings file '{path}': {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file '{path}' must contain a JSON object")
    return data


@dataclass
class InteractionSession:
    """
    One driver handle plus the settings every component reads.

    Example:
        >>> session = InteractionSession(driver, SessionConfig.load())
        >>> session.wait_timeout
        10.0
    """
    driver: "WebDriver"
    config: SessionConfig = field(default_factory=SessionConfig)
    clock: Clock = field(default_factory=Clock)

    @property
    def wait_timeout(self) -> float:
        return self.config.wait_timeout

    @property
    def highlight_enabled(self) -> bool:
        return self.config.highlight_elements

    @property
    def scroll_step(self) -> int:
        return self.config.scroll_step
