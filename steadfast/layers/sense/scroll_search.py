"""
Scroll Search - Find elements that only render once scrolled to.

Walks the page downward in fixed steps, retrying the lookup after each
step, and brings the first displayed match to the middle of the viewport.
"""

from typing import Optional, Tuple, TYPE_CHECKING
import logging

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException

from steadfast.core.clock import Clock
from steadfast.layers.action.script_executor import ScriptExecutor

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)


class ScrollSearchEngine:
    """
    Bounded linear scan of the page for a locator.

    The scan covers at most ``ceil(scroll_height / step)`` lookups, where
    the height is read once at the start of each ``locate`` call.

    Example:
        >>> engine = ScrollSearchEngine(driver, ScriptExecutor(driver))
        >>> element = engine.locate((By.ID, "footer-link"))
    """

    SCROLL_STEP = 300
    STEP_PAUSE = 0.3
    SETTLE_PAUSE = 1.0

    def __init__(
        self,
        driver: "WebDriver",
        script: ScriptExecutor,
        clock: Optional[Clock] = None,
        step: int = SCROLL_STEP,
    ):
        self.driver = driver
        self.script = script
        if step <= 0:
            raise ValueError(f"Scroll step must be positive, got {step}")
        self.clock = clock or Clock()
        self.step = step

    def locate(self, locator: Tuple[str, str]) -> Optional["WebElement"]:
        """
        Scroll until ``locator`` matches a displayed element.

        Returns:
            The element, centered in the viewport, or None when the whole
            page was scanned without a match (the page is then back at the top)
        """
        total_height = self.script.scroll_height()
        offset = 0

        while offset < total_height:
            element = self._find_displayed(locator)
            if element is not None:
                self.script.scroll_into_center(element)
                self.clock.sleep(self.SETTLE_PAUSE)
                logger.debug(f"[ScrollSearchEngine] Found {locator[1]} at offset {offset}")
                return element

            offset += self.step
            self.script.scroll_window_to(offset)
            self.clock.sleep(self.STEP_PAUSE)

        logger.debug(f"[ScrollSearchEngine] {locator[1]} not found within {total_height}px, back to top")
        self.script.scroll_window_to(0)
        self.clock.sleep(self.SETTLE_PAUSE)
        return None

    def _find_displayed(self, locator: Tuple[str, str]) -> Optional["WebElement"]:
        try:
            element = self.driver.find_element(*locator)
            if element.is_displayed():
                return element
        except (NoSuchElementException, StaleElementReferenceException):
            pass
        return None
