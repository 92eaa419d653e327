"""
Click Strategy Executor - Clicks that fall back instead of failing.

Strategies are tried in a fixed order: the driver's native click, a
pointer move-and-click, then a script-injected click. The element is
given a chance to finish animating before every attempt.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING
import logging
import time

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.action_chains import ActionChains

from steadfast.core.clock import Clock
from steadfast.core.errors import InteractionError
from steadfast.layers.action.script_executor import ScriptExecutor
from steadfast.layers.sense.animation import AnimationSettler

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)


class ClickStrategy(str, Enum):
    NATIVE = "native"
    POINTER = "pointer"
    SCRIPT = "script"


CLICK_SEQUENCE: Tuple[ClickStrategy, ...] = (
    ClickStrategy.NATIVE,
    ClickStrategy.POINTER,
    ClickStrategy.SCRIPT,
)


@dataclass
class ClickOutcome:
    """Which strategy landed the click, and what failed on the way."""
    element_name: str
    strategy: ClickStrategy
    duration_ms: float
    failures: List[Tuple[ClickStrategy, str]] = field(default_factory=list)

    @property
    def used_fallback(self) -> bool:
        return self.strategy is not ClickStrategy.NATIVE


class ClickStrategyExecutor:
    """
    Click an element, falling back through ``CLICK_SEQUENCE``.

    Example:
        >>> executor = ClickStrategyExecutor(driver, ScriptExecutor(driver), AnimationSettler())
        >>> executor.click_with_fallback(element, "submit").strategy
        <ClickStrategy.NATIVE: 'native'>
    """

    RETRY_DELAY = 0.5

    def __init__(
        self,
        driver: "WebDriver",
        script: ScriptExecutor,
        settler: AnimationSettler,
        clock: Optional[Clock] = None,
    ):
        self.driver = driver
        self.script = script
        self.settler = settler
        self.clock = clock or Clock()
        self.last_outcome: Optional[ClickOutcome] = None

    def click_with_fallback(self, element: "WebElement", element_name: str) -> ClickOutcome:
        """
        Raises:
            InteractionError: if all three strategies fail; wraps the last failure
        """
        start_time = time.time()
        failures: List[Tuple[ClickStrategy, str]] = []
        last_error: Optional[WebDriverException] = None

        for strategy in CLICK_SEQUENCE:
            try:
                self.settler.await_stable(element)
                self._perform(strategy, element)
            except WebDriverException as e:
                last_error = e
                failures.append((strategy, str(e)))
                logger.warning(
                    f"[ClickStrategyExecutor] ⚠️ {strategy.value} click failed for '{element_name}', trying next strategy"
                )
                self.clock.sleep(self.RETRY_DELAY)
                continue

            logger.info(f"[ClickStrategyExecutor] ✓ Clicked '{element_name}' using {strategy.value} click")
            self.last_outcome = ClickOutcome(
                element_name=element_name,
                strategy=strategy,
                duration_ms=(time.time() - start_time) * 1000,
                failures=failures,
            )
            return self.last_outcome

        raise InteractionError(
            f"Failed to click element after trying all strategies: {element_name}",
            element_name=element_name,
            cause=last_error,
        ) from last_error

    def _perform(self, strategy: ClickStrategy, element: "WebElement") -> None:
        if strategy is ClickStrategy.NATIVE:
            element.click()
        elif strategy is ClickStrategy.POINTER:
            ActionChains(self.driver).move_to_element(element).click().perform()
        else:
            self.script.click(element)
