"""Sense Layer - Finding elements and judging when they are ready."""

from steadfast.layers.sense.animation import AnimationSettler
from steadfast.layers.sense.scroll_search import ScrollSearchEngine
from steadfast.layers.sense.visibility import VisibilityWaiter

__all__ = ["AnimationSettler", "ScrollSearchEngine", "VisibilityWaiter"]
