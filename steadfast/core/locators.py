"""
Locators - Named element lookup.

Element names used in tests map to a ``{type, value}`` pair kept in a
JSON resource loaded once per run.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple
import json
import logging

from selenium.webdriver.common.by import By

from steadfast.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Supported locator types (matched case-insensitively)
LOCATOR_STRATEGIES: Dict[str, str] = {
    "xpath": By.XPATH,
    "css": By.CSS_SELECTOR,
    "id": By.ID,
    "name": By.NAME,
}


@dataclass(frozen=True)
class ElementReference:
    """A resolved element name."""
    name: str
    strategy: str  # normalized key of LOCATOR_STRATEGIES
    value: str

    @property
    def locator(self) -> Tuple[str, str]:
        """The ``(By, value)`` tuple Selenium's find methods accept."""
        return (LOCATOR_STRATEGIES[self.strategy], self.value)

    def __str__(self) -> str:
        return f"{self.name} ({self.strategy}={self.value})"


class LocatorRepository:
    """
    Read-only name -> ``{type, value}`` mapping.

    Example:
        >>> repo = LocatorRepository.from_file("locators.json")
        >>> repo.get("submit")
        {'type': 'id', 'value': 'submit-btn'}
    """

    def __init__(self, entries: Mapping[str, Any]):
        self._entries = dict(entries)

    @classmethod
    def from_file(cls, path: str) -> "LocatorRepository":
        """Load a locator resource from disk."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Cannot find locator file '{path}'") from e
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load locator file '{path}': {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Locator file '{path}' must contain a JSON object")

        logger.info(f"[LocatorRepository] Loaded {len(data)} locators from {path}")
        return cls(data)

    def get(self, name: str) -> Optional[Any]:
        return self._entries.get(name)

    def names(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class LocatorResolver:
    """Turns element names into ``ElementReference`` objects. No side effects."""

    def __init__(self, repository: LocatorRepository):
        self.repository = repository

    def resolve(self, name: str) -> ElementReference:
        """
        Resolve an element name.

        Raises:
            ConfigurationError: if the name is unknown, the entry is
                malformed, or its type is not xpath/css/id/name
        """
        entry = self.repository.get(name)
        if entry is None:
            raise ConfigurationError(f"No locator configured for element '{name}'", element_name=name)
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"Locator entry for '{name}' must be an object", element_name=name)

        locator_type = entry.get("type")
        value = entry.get("value")
        if not isinstance(locator_type, str) or not isinstance(value, str) or not value:
            raise ConfigurationError(
                f"Locator entry for '{name}' needs string 'type' and 'value'",
                element_name=name,
            )

        strategy = locator_type.strip().lower()
        if strategy not in LOCATOR_STRATEGIES:
            raise ConfigurationError(
                f"Unsupported locator type '{locator_type}' for element '{name}'",
                element_name=name,
            )
        return ElementReference(name=name, strategy=strategy, value=value)
