"""
Visibility Waiter - Presence, visibility and clickability waits.

Each condition gets the full timeout on its own; the budgets are not
shared across the three stages.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING
import logging

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.support import expected_conditions as EC

from steadfast.core.clock import Clock, poll_until

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)

IGNORED_EXCEPTIONS = (NoSuchElementException, StaleElementReferenceException)


class VisibilityWaiter:
    """Poll Selenium expected conditions through an injectable clock."""

    POLL_INTERVAL = 0.5

    def __init__(
        self,
        driver: "WebDriver",
        timeout: float = 10.0,
        clock: Optional[Clock] = None,
    ):
        self.driver = driver
        self.timeout = timeout
        self.clock = clock or Clock()

    def _wait(self, predicate, description: str, locator: Tuple[str, str], element_name: Optional[str]):
        return poll_until(
            lambda: predicate(self.driver),
            timeout=self.timeout,
            clock=self.clock,
            interval=self.POLL_INTERVAL,
            ignored_exceptions=IGNORED_EXCEPTIONS,
            description=description,
            element_name=element_name,
            locator=locator,
        )

    def await_present(self, locator: Tuple[str, str], element_name: Optional[str] = None) -> "WebElement":
        return self._wait(EC.presence_of_element_located(locator), "presence", locator, element_name)

    def await_visible(self, locator: Tuple[str, str], element_name: Optional[str] = None) -> "WebElement":
        return self._wait(EC.visibility_of_element_located(locator), "visibility", locator, element_name)

    def await_clickable(self, locator: Tuple[str, str], element_name: Optional[str] = None) -> "WebElement":
        return self._wait(EC.element_to_be_clickable(locator), "clickable", locator, element_name)

    def await_all_present(self, locator: Tuple[str, str], element_name: Optional[str] = None) -> List["WebElement"]:
        return self._wait(
            EC.presence_of_all_elements_located(locator), "presence of all", locator, element_name
        )

    def await_interactable(self, locator: Tuple[str, str], element_name: Optional[str] = None) -> "WebElement":
        """
        Wait for presence, then visibility, then clickability.

        Raises:
            WaitTimeoutError: naming the first condition that was not met
        """
        self.await_present(locator, element_name)
        self.await_visible(locator, element_name)
        element = self.await_clickable(locator, element_name)
        logger.debug(f"[VisibilityWaiter] {locator[1]} is interactable")
        return element
