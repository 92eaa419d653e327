"""
Script Executor - The only place page JavaScript is written.

Scrolling, style injection, script clicks and ready-state checks all go
through this class, so the rest of the engine can be exercised against
a fake with the same methods.
"""

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement


class ScriptExecutor:
    """Narrow wrapper around ``driver.execute_script``."""

    def __init__(self, driver: "WebDriver"):
        self.driver = driver

    def execute(self, script: str, *args: Any) -> Any:
        return self.driver.execute_script(script, *args)

    def scroll_height(self) -> int:
        """Total scrollable height of the document."""
        height = self.execute("return document.documentElement.scrollHeight")
        return int(height or 0)

    def scroll_window_to(self, top: int) -> None:
        self.execute("window.scrollTo({top: arguments[0], behavior: 'smooth'});", top)

    def scroll_into_center(self, element: "WebElement") -> None:
        self.execute(
            "arguments[0].scrollIntoView({behavior: 'smooth', block: 'center'});",
            element,
        )

    def scroll_into_view(self, element: "WebElement") -> None:
        self.execute("arguments[0].scrollIntoView(true);", element)

    def set_style(self, element: "WebElement", style: Optional[str]) -> None:
        """Replace the inline style; ``None`` removes the attribute."""
        if style is None:
            self.execute("arguments[0].removeAttribute('style');", element)
        else:
            self.execute("arguments[0].setAttribute('style', arguments[1]);", element, style)

    def click(self, element: "WebElement") -> None:
        self.execute("arguments[0].click();", element)

    def ready_state(self) -> str:
        return self.execute("return document.readyState")
