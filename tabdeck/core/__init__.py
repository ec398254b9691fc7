"""Framework-free tab controller core."""

from .content import (
    ContentItem,
    ContentSource,
    LazyContent,
    StaticContent,
    build_content_source,
    lazy,
    resolve_content,
    slot_keys,
)
from .controller import PaneSlot, TabController, TabControllerState
from .index_resolver import initial_tab_index, resolve_tab_index
from .pane_cache import PaneCache
from .props import TabBarProps, TabsProps
from .render_window import PrerenderRange, normalize_radius, should_mount, widen

__all__ = [
    "ContentItem",
    "ContentSource",
    "LazyContent",
    "PaneCache",
    "PaneSlot",
    "PrerenderRange",
    "StaticContent",
    "TabBarProps",
    "TabController",
    "TabControllerState",
    "TabsProps",
    "build_content_source",
    "initial_tab_index",
    "lazy",
    "normalize_radius",
    "resolve_content",
    "resolve_tab_index",
    "should_mount",
    "slot_keys",
    "widen",
]
