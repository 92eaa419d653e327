"""
Animation Settler - Best-effort wait for CSS transitions to finish.

An element counts as settled when its class list, transform and
opacity read the same across two samples taken a short interval apart.
"""

from typing import Optional, Tuple, TYPE_CHECKING
import logging

from selenium.common.exceptions import WebDriverException

from steadfast.core.clock import Clock

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)

Fingerprint = Tuple[Optional[str], str, str]


class AnimationSettler:
    """
    Wait until an element stops changing, giving up quietly.

    Never raises for driver errors and never waits longer than
    ``max_attempts * check_interval`` seconds plus driver latency.
    """

    MAX_ATTEMPTS = 5
    CHECK_INTERVAL = 0.2

    def __init__(
        self,
        clock: Optional[Clock] = None,
        max_attempts: int = MAX_ATTEMPTS,
        check_interval: float = CHECK_INTERVAL,
    ):
        self.clock = clock or Clock()
        self.max_attempts = max_attempts
        self.check_interval = check_interval

    @staticmethod
    def fingerprint(element: "WebElement") -> Fingerprint:
        return (
            element.get_attribute("class"),
            element.value_of_css_property("transform"),
            element.value_of_css_property("opacity"),
        )

    def await_stable(self, element: "WebElement") -> bool:
        """
        Returns:
            True if two consecutive samples matched, False if the element
            was still changing (or unreadable) after every attempt
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                before = self.fingerprint(element)
                self.clock.sleep(self.check_interval)
                after = self.fingerprint(element)
            except WebDriverException as e:
                logger.debug(f"[AnimationSettler] Attempt {attempt} could not read element: {e}")
                continue

            if before == after:
                return True
            logger.debug(f"[AnimationSettler] Attempt {attempt}: element still animating")

        logger.debug(f"[AnimationSettler] Element not stable after {self.max_attempts} attempts, continuing")
        return False
