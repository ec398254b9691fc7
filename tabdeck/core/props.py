"""Inbound configuration and outbound tab-bar property bundles."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Literal, Union

from ..constants import DEFAULT_DISTANCE_TO_CHANGE_TAB, DEFAULT_PRERENDER_SIBLINGS
from .render_window import Bound, normalize_radius

if TYPE_CHECKING:
    from ..preferences import Preferences
    from ..widgets.datamodels import TabData

TabCallback = Callable[["TabData | None", int], Any]
TabBarRenderer = Callable[["TabBarProps"], Any]


@dataclass
class TabsProps:
    """Everything a caller can configure on a tab controller.

    Supplying ``page`` puts the controller in controlled mode: ``go_to_tab``
    then only notifies ``on_change`` and the owner is expected to push a new
    ``page`` back in.
    """

    tabs: list[TabData] = field(default_factory=list)
    initial_page: int | str | None = 0
    page: int | str | None = None
    prerendering_siblings_number: Bound = DEFAULT_PRERENDER_SIBLINGS
    destroy_inactive_tab: bool = False
    animated: bool = True
    swipeable: bool = True
    use_on_pan: bool = True
    distance_to_change_tab: float = DEFAULT_DISTANCE_TO_CHANGE_TAB
    use_paged: bool = True
    tab_direction: Literal["horizontal", "vertical"] = "horizontal"
    tab_bar_position: Literal["top", "bottom", "left", "right"] = "top"
    no_render_content: bool = False
    use_left_instead_transform: bool = False
    on_change: TabCallback | None = None
    on_tab_click: TabCallback | None = None
    # None: default bar, False: no bar, callable: custom bar
    render_tab_bar: Union[TabBarRenderer, Literal[False], None] = None
    # Style hints, passed through to the tab bar untouched
    tab_bar_underline_style: Any = None
    tab_bar_background_color: str | None = None
    tab_bar_active_text_color: str | None = None
    tab_bar_inactive_text_color: str | None = None
    tab_bar_text_style: Any = None

    @property
    def controlled(self) -> bool:
        return self.page is not None

    @property
    def radius(self) -> Bound:
        """Prerender radius as a number (``math.inf`` when unbounded)."""
        return normalize_radius(self.prerendering_siblings_number)

    def replace(self, **changes: Any) -> TabsProps:
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_preferences(
        cls, prefs: Preferences, tabs: list[TabData], **overrides: Any
    ) -> TabsProps:
        """Build props from loaded preferences; keyword arguments win."""
        values: dict[str, Any] = {
            "tabs": list(tabs),
            "prerendering_siblings_number": prefs.rendering.prerendering_siblings_number,
            "destroy_inactive_tab": prefs.rendering.destroy_inactive_tab,
            "no_render_content": prefs.rendering.no_render_content,
            "animated": prefs.behavior.animated,
            "swipeable": prefs.behavior.swipeable,
            "use_on_pan": prefs.behavior.use_on_pan,
            "distance_to_change_tab": prefs.behavior.distance_to_change_tab,
            "use_paged": prefs.behavior.use_paged,
            "tab_direction": prefs.behavior.tab_direction,
            "tab_bar_position": prefs.tab_bar.position,
            "tab_bar_background_color": prefs.tab_bar.background_color or None,
            "tab_bar_active_text_color": prefs.tab_bar.active_text_color or None,
            "tab_bar_inactive_text_color": prefs.tab_bar.inactive_text_color or None,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class TabBarProps:
    """What a tab bar renderer gets: tabs, active index and ``go_to_tab``."""

    tabs: list[TabData]
    active_tab: int
    animated: bool
    go_to_tab: Callable[..., bool]
    on_tab_click: TabCallback | None = None
    tab_bar_position: str = "top"
    tab_bar_underline_style: Any = None
    tab_bar_background_color: str | None = None
    tab_bar_active_text_color: str | None = None
    tab_bar_inactive_text_color: str | None = None
    tab_bar_text_style: Any = None
