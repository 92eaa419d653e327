"""
Highlight Annotator - Visual debug marking of elements.

Only active when the session enables highlighting. The original inline
style is put back after a short pause on the same call path.
"""

from typing import Optional, TYPE_CHECKING
import logging

from selenium.common.exceptions import WebDriverException

from steadfast.core.clock import Clock
from steadfast.layers.action.script_executor import ScriptExecutor

if TYPE_CHECKING:
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)

HIGHLIGHT_STYLE = "border: 2px solid red; background: yellow"


class HighlightAnnotator:
    """Flash a border and background on an element, then restore it."""

    DISPLAY_PAUSE = 1.0

    def __init__(
        self,
        script: ScriptExecutor,
        enabled: bool = False,
        clock: Optional[Clock] = None,
    ):
        self.script = script
        self.enabled = enabled
        self.clock = clock or Clock()

    def highlight(self, element: "WebElement") -> None:
        if not self.enabled:
            return

        original_style = element.get_attribute("style")
        self.script.set_style(element, HIGHLIGHT_STYLE)
        self.clock.sleep(self.DISPLAY_PAUSE)

        # Restore is best effort: a stale element keeps the debug style.
        try:
            self.script.set_style(element, original_style)
        except WebDriverException as e:
            logger.warning(f"[HighlightAnnotator] Could not restore original style: {e}")
