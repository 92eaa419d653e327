import pytest
from unittest.mock import MagicMock

from selenium.common.exceptions import NoSuchElementException


class FakeClock:
    """Virtual clock: sleeping only advances time."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeScript:
    """Records every page script call instead of running JavaScript."""

    def __init__(self, height=1000, ready_states=("complete",)):
        self.height = height
        self.ready_states = list(ready_states)
        self.window_scrolls = []
        self.centered = []
        self.scrolled_into_view = []
        self.styles = []
        self.clicks = []
        self.click_error = None
        self.style_errors = {}

    def scroll_height(self):
        return self.height

    def scroll_window_to(self, top):
        self.window_scrolls.append(top)

    def scroll_into_center(self, element):
        self.centered.append(element)

    def scroll_into_view(self, element):
        self.scrolled_into_view.append(element)

    def set_style(self, element, style):
        call_number = len(self.styles) + 1
        self.styles.append((element, style))
        if call_number in self.style_errors:
            raise self.style_errors[call_number]

    def click(self, element):
        self.clicks.append(element)
        if self.click_error:
            raise self.click_error

    def ready_state(self):
        if len(self.ready_states) > 1:
            return self.ready_states.pop(0)
        return self.ready_states[0]


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_script():
    return FakeScript()


@pytest.fixture
def make_element():
    def _make(text="", displayed=True, css_class="btn"):
        element = MagicMock()
        element.is_displayed.return_value = displayed
        element.is_enabled.return_value = True
        element.get_attribute.return_value = css_class
        element.value_of_css_property.return_value = "none"
        element.text = text
        return element
    return _make


@pytest.fixture
def make_driver():
    def _make(element=None, scroll_height=1000, handles=("main",), elements=None):
        driver = MagicMock()

        def execute_script(script, *args):
            if "scrollHeight" in script:
                return scroll_height
            if "readyState" in script:
                return "complete"
            return None

        driver.execute_script.side_effect = execute_script
        if element is None:
            driver.find_element.side_effect = NoSuchElementException("missing")
        else:
            driver.find_element.return_value = element
        driver.find_elements.return_value = list(elements) if elements is not None else []
        driver.window_handles = list(handles)
        driver.current_window_handle = handles[0]
        driver.current_url = "https://example.com/"
        return driver
    return _make


@pytest.fixture
def make_script():
    def _make(height=1000, ready_states=("complete",)):
        return FakeScript(height=height, ready_states=ready_states)
    return _make
