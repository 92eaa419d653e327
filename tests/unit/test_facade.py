"""
Facade tests against a mocked driver.

The real ScriptExecutor runs here; the mocked ``execute_script`` answers
scroll-height and ready-state queries.
"""

import pytest
from unittest.mock import MagicMock, PropertyMock, patch
from selenium.common.exceptions import (
    ElementClickInterceptedException,
    NoSuchElementException,
    WebDriverException,
)

from steadfast.core.errors import (
    ConfigurationError,
    InteractionError,
    NavigationError,
    NotFoundError,
    VisibilityAssertionError,
)
from steadfast.core.facade import InteractionFacade
from steadfast.core.locators import LocatorRepository, LocatorResolver
from steadfast.core.session import InteractionSession, SessionConfig
from steadfast.layers.action.clicker import ClickStrategy

LOCATORS = {
    "submit": {"type": "id", "value": "submit-btn"},
    "jobTitles": {"type": "css", "value": ".position-title"},
    "jobCard": {"type": "xpath", "value": "//div[@class='position-list-item']"},
    "acceptCookies": {"type": "id", "value": "wt-cli-accept-all-btn"},
}

SCRIPT_CLICK = "arguments[0].click();"


@pytest.fixture
def make_facade(fake_clock):
    def _make(driver, highlight=False):
        session = InteractionSession(driver, SessionConfig(highlight_elements=highlight), clock=fake_clock)
        return InteractionFacade(session, LocatorResolver(LocatorRepository(LOCATORS)))
    return _make


def script_calls(driver, script):
    return [c for c in driver.execute_script.call_args_list if c.args and c.args[0] == script]


class TestClick:
    """click() end to end."""

    def test_visible_stable_element_uses_native_click(self, make_driver, make_element, make_facade):
        element = make_element()
        driver = make_driver(element)
        ui = make_facade(driver)

        with patch("steadfast.layers.action.clicker.ActionChains") as chains:
            outcome = ui.click("submit")

        assert outcome.strategy is ClickStrategy.NATIVE
        element.click.assert_called_once_with()
        chains.assert_not_called()
        assert script_calls(driver, SCRIPT_CLICK) == []
        driver.find_element.assert_any_call("id", "submit-btn")
        driver.switch_to.window.assert_not_called()

    def test_unknown_element_raises_configuration_error(self, make_driver, make_facade):
        ui = make_facade(make_driver())

        with pytest.raises(ConfigurationError):
            ui.click("nonexistent")

    def test_element_missing_from_page_raises_not_found(self, make_driver, make_facade):
        ui = make_facade(make_driver(element=None, scroll_height=600))

        with pytest.raises(NotFoundError) as exc_info:
            ui.click("submit")

        assert exc_info.value.element_name == "submit"

    def test_all_strategies_failing_raises(self, make_driver, make_element, make_facade):
        element = make_element()
        element.click.side_effect = ElementClickInterceptedException("overlay")
        driver = make_driver(element)
        base = driver.execute_script.side_effect

        def execute_script(script, *args):
            if script == SCRIPT_CLICK:
                raise WebDriverException("script click blocked")
            return base(script, *args)

        driver.execute_script.side_effect = execute_script
        ui = make_facade(driver)

        with patch("steadfast.layers.action.clicker.ActionChains") as chains:
            chains.return_value.move_to_element.return_value.click.return_value.perform.side_effect = (
                WebDriverException("pointer blocked")
            )
            with pytest.raises(InteractionError):
                ui.click("submit")

    def test_click_follows_new_tab(self, make_driver, make_element, make_facade, fake_clock):
        driver = make_driver(make_element(), handles=("main", "lever"))
        ui = make_facade(driver)

        ui.click("submit")

        driver.switch_to.window.assert_called_once_with("lever")
        assert 2.0 in fake_clock.sleeps

    def test_highlight_wraps_the_click(self, make_driver, make_element, make_facade):
        element = make_element()
        element.get_attribute.return_value = "margin: 0"
        driver = make_driver(element)
        ui = make_facade(driver, highlight=True)

        ui.click("submit")

        styles = [c.args[2] for c in driver.execute_script.call_args_list if "setAttribute('style'" in c.args[0]]
        assert styles == ["border: 2px solid red; background: yellow", "margin: 0"]


class TestOtherActions:

    def test_click_via_script_bypasses_fallback(self, make_driver, make_element, make_facade):
        element = make_element()
        driver = make_driver(element)
        ui = make_facade(driver)

        ui.click_via_script("submit")

        element.click.assert_not_called()
        assert len(script_calls(driver, SCRIPT_CLICK)) == 1

    def test_hover_moves_pointer_and_waits(self, make_driver, make_element, make_facade, fake_clock):
        element = make_element()
        ui = make_facade(make_driver(element))

        with patch("steadfast.core.facade.ActionChains") as chains:
            ui.hover_element("jobCard")

        chains.return_value.move_to_element.assert_called_once_with(element)
        chains.return_value.move_to_element.return_value.perform.assert_called_once_with()
        assert 0.3 in fake_clock.sleeps

    def test_hover_driver_failure_is_wrapped(self, make_driver, make_element, make_facade):
        ui = make_facade(make_driver(make_element()))

        with patch("steadfast.core.facade.ActionChains") as chains:
            chains.return_value.move_to_element.return_value.perform.side_effect = WebDriverException("no pointer")
            with pytest.raises(InteractionError) as exc_info:
                ui.hover_element("jobCard")

        assert isinstance(exc_info.value.cause, WebDriverException)

    def test_move_to_element_and_click(self, make_driver, make_element, make_facade):
        element = make_element()
        ui = make_facade(make_driver(element))

        with patch("steadfast.core.facade.ActionChains") as chains:
            ui.move_to_element_and_click("submit")

        chains.return_value.move_to_element.assert_called_once_with(element)
        chains.return_value.click.assert_called_once_with(element)

    def test_move_to_element_and_click_with_js(self, make_driver, make_element, make_facade):
        element = make_element()
        driver = make_driver(element)
        ui = make_facade(driver)

        outcome = ui.move_to_element_and_click_with_js("submit")

        assert outcome.strategy is ClickStrategy.NATIVE
        assert len(script_calls(driver, "arguments[0].scrollIntoView(true);")) == 1


class TestVisibility:

    def test_visible_element_returns_true(self, make_driver, make_element, make_facade):
        ui = make_facade(make_driver(make_element()))

        assert ui.is_element_visible("submit") is True
        ui.assert_element_visible("submit")

    def test_missing_element_raises_assertion(self, make_driver, make_facade):
        ui = make_facade(make_driver(element=None, scroll_height=300))

        with pytest.raises(VisibilityAssertionError) as exc_info:
            ui.is_element_visible("submit")

        assert isinstance(exc_info.value, AssertionError)
        assert isinstance(exc_info.value.__cause__, NotFoundError)


class TestVerifyText:

    @pytest.fixture
    def verify(self, make_driver, make_element, make_facade):
        def _verify(texts, expected):
            elements = [make_element(text=t) for t in texts]
            driver = make_driver(elements[0] if elements else None, elements=elements)
            return make_facade(driver).verify_text_in_elements("jobTitles", expected)
        return _verify

    def test_all_match(self, verify):
        assert verify(["QA Engineer", "QA Lead"], "QA") is True

    def test_one_mismatch_fails(self, verify):
        assert verify(["QA Engineer", "QA Lead", "Manager"], "QA") is False

    def test_empty_match_set_fails(self, verify):
        assert verify([], "QA") is False

    def test_match_is_case_sensitive_and_trimmed(self, verify):
        assert verify(["  Quality Assurance  "], "Quality Assurance") is True
        assert verify(["quality assurance"], "Quality Assurance") is False

    def test_unknown_element_returns_false(self, make_driver, make_facade):
        assert make_facade(make_driver()).verify_text_in_elements("ghost", "QA") is False

    def test_driver_error_returns_false(self, make_driver, make_element, make_facade):
        element = make_element()
        type(element).text = PropertyMock(side_effect=WebDriverException("stale"))
        ui = make_facade(make_driver(element, elements=[element]))

        assert ui.verify_text_in_elements("jobTitles", "QA") is False

    def test_unexpected_error_returns_false(self, make_driver, make_facade):
        ui = make_facade(make_driver(element=None, scroll_height="abc"))

        assert ui.verify_text_in_elements("jobTitles", "QA") is False


class TestVerifyDomain:

    def test_case_insensitive_containment(self, make_driver, make_facade, fake_clock):
        driver = make_driver()
        driver.current_url = "https://USEINSIDER.com/careers"

        assert make_facade(driver).verify_domain("useinsider.com") is True
        assert fake_clock.sleeps == [1.0]

    def test_other_domain_fails(self, make_driver, make_facade):
        driver = make_driver()
        driver.current_url = "https://useinsider.com/careers"

        assert make_facade(driver).verify_domain("jobs.lever.co") is False

    def test_driver_error_returns_false(self, make_driver, make_facade):
        driver = make_driver()
        type(driver).current_url = PropertyMock(side_effect=WebDriverException("session gone"))

        assert make_facade(driver).verify_domain("useinsider.com") is False

    def test_missing_expected_domain_returns_false(self, make_driver, make_facade):
        assert make_facade(make_driver()).verify_domain(None) is False


class TestNavigationAndHelpers:

    def test_navigate_waits_after_load(self, make_driver, make_facade, fake_clock):
        driver = make_driver()

        make_facade(driver).navigate_to_url("https://useinsider.com/careers/quality-assurance/")

        driver.get.assert_called_once_with("https://useinsider.com/careers/quality-assurance/")
        assert fake_clock.sleeps == [2.0]

    def test_navigate_failure_raises(self, make_driver, make_facade):
        driver = make_driver()
        driver.get.side_effect = WebDriverException("net::ERR_NAME_NOT_RESOLVED")

        with pytest.raises(NavigationError):
            make_facade(driver).navigate_to_url("https://nowhere.invalid")

    def test_accept_cookies_clicks_visible_banner(self, make_driver, make_element, make_facade):
        button = make_element()

        assert make_facade(make_driver(button)).accept_cookies_if_present() is True
        button.click.assert_called_once_with()

    def test_accept_cookies_without_banner(self, make_driver, make_facade):
        assert make_facade(make_driver()).accept_cookies_if_present() is False

    def test_scroll_to_top(self, make_driver, make_facade, fake_clock):
        driver = make_driver()

        make_facade(driver).scroll_to_top()

        driver.execute_script.assert_any_call("window.scrollTo({top: arguments[0], behavior: 'smooth'});", 0)
        assert fake_clock.sleeps == [1.0]

    def test_take_screenshot_delegates(self, make_driver, make_facade):
        ui = make_facade(make_driver())
        ui.screenshots = MagicMock()
        ui.screenshots.take_screenshot.return_value = "shot.png"

        assert ui.take_screenshot("CareerInfoTest_verify") == "shot.png"
