"""
Interaction Facade - The public API test scripts call.

Every operation follows the same pipeline:

1. RESOLVE: element name -> locator via the locator resource.
2. FIND: scroll the page until the element is displayed.
3. WAIT: presence, visibility and clickability.
4. MARK: optional debug highlight.
5. ACT: click, hover or verify.

Action operations raise on failure. Verification operations
(``verify_text_in_elements``, ``verify_domain``) return False instead.
"""

from contextlib import contextmanager
from typing import Iterator, Optional, TYPE_CHECKING
import logging

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.action_chains import ActionChains

from steadfast.core.errors import (
    InteractionError,
    NavigationError,
    NotFoundError,
    SteadfastError,
    VisibilityAssertionError,
)
from steadfast.core.locators import ElementReference, LocatorRepository, LocatorResolver
from steadfast.core.session import InteractionSession, SessionConfig
from steadfast.layers.action.clicker import ClickOutcome, ClickStrategyExecutor
from steadfast.layers.action.highlighter import HighlightAnnotator
from steadfast.layers.action.script_executor import ScriptExecutor
from steadfast.layers.action.tabs import TabCoordinator
from steadfast.layers.sense.animation import AnimationSettler
from steadfast.layers.sense.scroll_search import ScrollSearchEngine
from steadfast.layers.sense.visibility import VisibilityWaiter
from steadfast.reporters.screenshot import ScreenshotRecorder

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)


class InteractionFacade:
    """
    Resilient element interactions for end-to-end tests.

    Example:
        >>> session = InteractionSession(driver, SessionConfig.load())
        >>> resolver = LocatorResolver(LocatorRepository.from_file("locators.json"))
        >>> ui = InteractionFacade(session, resolver)
        >>> ui.click("company")
        >>> assert ui.verify_text_in_elements("jobTitles", "Quality Assurance")
    """

    HOVER_PAUSE = 0.3
    TEXT_SCROLL_PAUSE = 0.3
    MOVE_PAUSE = 1.0
    DOMAIN_PAUSE = 1.0
    NAVIGATION_PAUSE = 2.0

    def __init__(
        self,
        session: InteractionSession,
        resolver: LocatorResolver,
        screenshots: Optional[ScreenshotRecorder] = None,
    ):
        self.session = session
        self.resolver = resolver
        self.driver = session.driver
        self.clock = session.clock

        self.script = ScriptExecutor(self.driver)
        self.settler = AnimationSettler(clock=self.clock)
        self.scroller = ScrollSearchEngine(self.driver, self.script, clock=self.clock, step=session.scroll_step)
        self.waiter = VisibilityWaiter(self.driver, timeout=session.wait_timeout, clock=self.clock)
        self.clicker = ClickStrategyExecutor(self.driver, self.script, self.settler, clock=self.clock)
        self.highlighter = HighlightAnnotator(self.script, enabled=session.highlight_enabled, clock=self.clock)
        self.tabs = TabCoordinator(self.driver, self.script, clock=self.clock, load_timeout=session.wait_timeout)
        self.screenshots = screenshots or ScreenshotRecorder(self.driver)

    @classmethod
    def from_config(
        cls,
        driver: "WebDriver",
        config: Optional[SessionConfig] = None,
        locators_path: Optional[str] = None,
    ) -> "InteractionFacade":
        """Build a facade from a settings object and a locator file."""
        config = config or SessionConfig.load()
        path = locators_path or config.locators_path or "locators.json"
        resolver = LocatorResolver(LocatorRepository.from_file(path))
        return cls(InteractionSession(driver, config), resolver)

    # Shared pipeline

    def _find_interactable(self, ref: ElementReference) -> "WebElement":
        if self.scroller.locate(ref.locator) is None:
            raise NotFoundError(f"Element not found after scrolling: {ref.name}", element_name=ref.name)
        element = self.waiter.await_interactable(ref.locator, ref.name)
        self.highlighter.highlight(element)
        return element

    @contextmanager
    def _action(self, element_name: str, description: str) -> Iterator[None]:
        """Log failures and wrap raw driver errors for action operations."""
        try:
            yield
        except SteadfastError as e:
            logger.error(f"[InteractionFacade] ✗ Failed to {description} '{element_name}': {e}")
            raise
        except WebDriverException as e:
            logger.error(f"[InteractionFacade] ✗ Failed to {description} '{element_name}': {e}")
            raise InteractionError(
                f"Failed to {description} '{element_name}': {e}",
                element_name=element_name,
                cause=e,
            ) from e

    # Actions

    def click(self, element_name: str) -> ClickOutcome:
        """Click with strategy fallback; follows a new tab if one is open afterwards."""
        ref = self.resolver.resolve(element_name)
        with self._action(element_name, "click element"):
            element = self._find_interactable(ref)
            outcome = self.clicker.click_with_fallback(element, element_name)
            # Any extra handle triggers a switch, even one opened before this click.
            if self.tabs.has_extra_tabs():
                self.tabs.switch_to_new_tab()
        return outcome

    def click_via_script(self, element_name: str) -> None:
        ref = self.resolver.resolve(element_name)
        with self._action(element_name, "click element using JavaScript"):
            element = self._find_interactable(ref)
            self.script.click(element)
        logger.info(f"[InteractionFacade] ✓ Element '{element_name}' clicked using JavaScript successfully")

    def hover_element(self, element_name: str) -> None:
        ref = self.resolver.resolve(element_name)
        with self._action(element_name, "hover over element"):
            element = self._find_interactable(ref)
            ActionChains(self.driver).move_to_element(element).perform()
            self.clock.sleep(self.HOVER_PAUSE)
            self.settler.await_stable(element)
        logger.info(f"[InteractionFacade] ✓ Successfully hovered over element '{element_name}'")

    def move_to_element_and_click(self, element_name: str) -> None:
        ref = self.resolver.resolve(element_name)
        with self._action(element_name, "move to and click element"):
            element = self._find_interactable(ref)
            self.waiter.await_clickable(ref.locator, element_name)
            self.script.scroll_into_view(element)
            self.clock.sleep(self.MOVE_PAUSE)

            actions = ActionChains(self.driver)
            actions.move_to_element(element).perform()
            self.clock.sleep(self.MOVE_PAUSE)
            actions.click(element).perform()
        logger.info(f"[InteractionFacade] ✓ Element '{element_name}' moved to and clicked successfully")

    def move_to_element_and_click_with_js(self, element_name: str) -> ClickOutcome:
        ref = self.resolver.resolve(element_name)
        with self._action(element_name, "move to and click element using JavaScript"):
            element = self._find_interactable(ref)
            self.script.scroll_into_view(element)
            self.clock.sleep(self.MOVE_PAUSE)
            return self.clicker.click_with_fallback(element, element_name)

    def is_element_visible(self, element_name: str) -> bool:
        """
        Returns True when the element is visible; never returns False.

        Raises:
            VisibilityAssertionError: if the element cannot be found or seen
        """
        ref = self.resolver.resolve(element_name)
        try:
            if self.scroller.locate(ref.locator) is None:
                raise NotFoundError(
                    f"Element '{element_name}' could not be found on the page", element_name=element_name
                )
            element = self.waiter.await_visible(ref.locator, element_name)
            self.highlighter.highlight(element)
        except (SteadfastError, WebDriverException) as e:
            logger.error(f"[InteractionFacade] ✗ Element '{element_name}' is not visible: {e}")
            raise VisibilityAssertionError(
                f"Element '{element_name}' is not visible: {e}", element_name=element_name
            ) from e

        logger.info(f"[InteractionFacade] ✓ Element '{element_name}' is visible")
        return True

    def assert_element_visible(self, element_name: str) -> None:
        self.is_element_visible(element_name)

    # Verifications

    def verify_text_in_elements(self, element_name: str, expected_text: str) -> bool:
        """
        Check that every element matching the locator contains ``expected_text``.

        The comparison is case-sensitive and runs on stripped text. An empty
        match set, or any failure along the way, yields False.
        """
        try:
            ref = self.resolver.resolve(element_name)
            if self.scroller.locate(ref.locator) is None:
                logger.error(f"[InteractionFacade] ✗ Elements '{element_name}' could not be found on the page")
                return False

            elements = self.waiter.await_all_present(ref.locator, element_name)
            if not elements:
                logger.error(f"[InteractionFacade] ✗ No elements found for '{element_name}'")
                return False

            all_match = True
            for index, element in enumerate(elements, 1):
                self.script.scroll_into_center(element)
                self.clock.sleep(self.TEXT_SCROLL_PAUSE)

                actual = (element.text or "").strip()
                if expected_text in actual:
                    self.highlighter.highlight(element)
                    logger.info(
                        f"[InteractionFacade] ✓ Element {index} contains expected text '{expected_text}': {actual}"
                    )
                else:
                    logger.error(
                        f"[InteractionFacade] ✗ Element {index} does not contain expected text "
                        f"'{expected_text}'. Actual text: {actual}"
                    )
                    all_match = False
            return all_match
        except Exception as e:
            logger.error(f"[InteractionFacade] ✗ Error while verifying text in elements '{element_name}': {e}")
            return False

    def verify_domain(self, expected_domain: str) -> bool:
        """Case-insensitive check that the current URL contains ``expected_domain``."""
        try:
            self.clock.sleep(self.DOMAIN_PAUSE)
            current_url = self.driver.current_url
            if expected_domain.lower() in current_url.lower():
                logger.info(f"[InteractionFacade] ✓ Current URL '{current_url}' contains expected domain '{expected_domain}'")
                return True
            logger.error(
                f"[InteractionFacade] ✗ Current URL '{current_url}' does not contain expected domain '{expected_domain}'"
            )
            return False
        except Exception as e:
            logger.error(f"[InteractionFacade] ✗ Error while verifying domain '{expected_domain}': {e}")
            return False

    # Navigation and page helpers

    def navigate_to_url(self, url: str) -> None:
        try:
            self.driver.get(url)
        except WebDriverException as e:
            logger.error(f"[InteractionFacade] ✗ Failed to navigate to URL '{url}': {e}")
            raise NavigationError(f"Failed to navigate to URL '{url}': {e}") from e
        logger.info(f"[InteractionFacade] ✓ Navigated to URL: {url}")
        self.clock.sleep(self.NAVIGATION_PAUSE)

    def switch_to_new_tab(self) -> bool:
        return self.tabs.switch_to_new_tab()

    def accept_cookies_if_present(self, element_name: str = "acceptCookies") -> bool:
        """Click the cookie banner button if it is on screen. Never raises for driver errors."""
        try:
            ref = self.resolver.resolve(element_name)
            button = self.driver.find_element(*ref.locator)
            if button.is_displayed():
                button.click()
                logger.info("[InteractionFacade] ✓ Cookies accepted")
                return True
        except (SteadfastError, WebDriverException):
            pass
        logger.info("[InteractionFacade] No cookie banner found or already accepted")
        return False

    def scroll_to_top(self) -> None:
        self.script.scroll_window_to(0)
        self.clock.sleep(self.MOVE_PAUSE)
        logger.info("[InteractionFacade] ✓ Scrolled to the top of the page")

    def wait_for_seconds(self, seconds: float) -> None:
        self.clock.sleep(seconds)

    def take_screenshot(self, test_name: str) -> Optional[str]:
        return self.screenshots.take_screenshot(test_name)
