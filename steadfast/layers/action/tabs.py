"""
Tab Coordinator - Follow links that open a new browsing context.
"""

from typing import Optional, TYPE_CHECKING
import logging

from selenium.common.exceptions import WebDriverException

from steadfast.core.clock import Clock, poll_until
from steadfast.core.errors import WaitTimeoutError
from steadfast.layers.action.script_executor import ScriptExecutor

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)


class TabCoordinator:
    """
    Switch the driver into a newly opened tab or window.

    Example:
        >>> tabs = TabCoordinator(driver, ScriptExecutor(driver))
        >>> if tabs.switch_to_new_tab():
        ...     print(driver.current_url)
    """

    OPEN_PAUSE = 2.0
    POLL_INTERVAL = 0.25

    def __init__(
        self,
        driver: "WebDriver",
        script: ScriptExecutor,
        clock: Optional[Clock] = None,
        load_timeout: float = 10.0,
    ):
        self.driver = driver
        self.script = script
        self.clock = clock or Clock()
        self.load_timeout = load_timeout

    def has_extra_tabs(self) -> bool:
        return len(self.driver.window_handles) > 1

    def switch_to_new_tab(self) -> bool:
        """
        Switch to the first handle that is not the current one.

        Returns:
            True once the new tab reports ``document.readyState == "complete"``;
            False if there is no other tab or it never finished loading
        """
        try:
            original = self.driver.current_window_handle
            self.clock.sleep(self.OPEN_PAUSE)

            target = next((h for h in self.driver.window_handles if h != original), None)
            if target is None:
                logger.error("[TabCoordinator] ✗ No new tab found to switch to")
                return False

            self.driver.switch_to.window(target)
            poll_until(
                lambda: self.script.ready_state() == "complete",
                timeout=self.load_timeout,
                clock=self.clock,
                interval=self.POLL_INTERVAL,
                description="document ready state 'complete'",
            )
        except (WaitTimeoutError, WebDriverException) as e:
            logger.error(f"[TabCoordinator] ✗ Failed to switch to new tab: {e}")
            return False

        logger.info(f"[TabCoordinator] ✓ Switched to new tab: {self.driver.current_url}")
        return True
