"""Textual widgets that host a tab controller."""

from .datamodels import TabData
from .tabs import TabBar, TabButton, TabPane, TabsView

__all__ = [
    "TabBar",
    "TabButton",
    "TabData",
    "TabPane",
    "TabsView",
]
