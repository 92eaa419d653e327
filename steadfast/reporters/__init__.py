"""Reporters - Failure artifacts."""

from steadfast.reporters.screenshot import ScreenshotRecorder

__all__ = ["ScreenshotRecorder"]
