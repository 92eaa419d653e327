"""Action Layer - Reliable execution components."""

from steadfast.layers.action.clicker import ClickOutcome, ClickStrategy, ClickStrategyExecutor
from steadfast.layers.action.highlighter import HighlightAnnotator
from steadfast.layers.action.script_executor import ScriptExecutor
from steadfast.layers.action.tabs import TabCoordinator

__all__ = [
    "ClickOutcome",
    "ClickStrategy",
    "ClickStrategyExecutor",
    "HighlightAnnotator",
    "ScriptExecutor",
    "TabCoordinator",
]
