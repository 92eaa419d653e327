"""
Screenshot Recorder - Save page captures for failed tests.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
import logging
import os

from selenium.common.exceptions import WebDriverException

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)


class ScreenshotRecorder:
    """
    Capture screenshots named after the test that produced them.

    Example:
        >>> recorder = ScreenshotRecorder(driver)
        >>> recorder.take_screenshot("CareerInfoTest_verify_career_page")
        'test-output/screenshots/screenshot_CareerInfoTest_verify_career_page_20250101_120000.png'
    """

    def __init__(self, driver: "WebDriver", output_dir: str = "test-output/screenshots"):
        self.driver = driver
        self.output_dir = output_dir

    def take_screenshot(self, test_name: str) -> Optional[str]:
        """
        Returns:
            Path to the saved file, or None if the capture failed
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(self.output_dir, f"screenshot_{test_name}_{timestamp}.png")

        try:
            os.makedirs(self.output_dir, exist_ok=True)
            if not self.driver.save_screenshot(path):
                logger.error(f"[ScreenshotRecorder] ✗ Driver refused to write screenshot to {path}")
                return None
        except (OSError, WebDriverException) as e:
            logger.error(f"[ScreenshotRecorder] ✗ Failed to take screenshot: {e}")
            return None

        logger.info(f"[ScreenshotRecorder] ✓ Screenshot saved: {path}")
        return path
