"""tabdeck: tab index resolution, lazy render windowing and tab transitions."""

from .core import (
    ContentItem,
    LazyContent,
    PaneCache,
    PaneSlot,
    PrerenderRange,
    StaticContent,
    TabBarProps,
    TabController,
    TabControllerState,
    TabsProps,
    build_content_source,
    resolve_content,
    resolve_tab_index,
    should_mount,
    widen,
)
from .widgets.datamodels import TabData

__version__ = "0.1.0"

__all__ = [
    "ContentItem",
    "LazyContent",
    "PaneCache",
    "PaneSlot",
    "PrerenderRange",
    "StaticContent",
    "TabBarProps",
    "TabController",
    "TabControllerState",
    "TabData",
    "TabsProps",
    "build_content_source",
    "resolve_content",
    "resolve_tab_index",
    "should_mount",
    "widen",
]
