"""Tab transition controller.

A pure state machine: it owns the active index and the render window, and
decides how ``go_to_tab`` requests and external prop changes move them.  It
does no rendering itself.  Accepted transitions are parked in a single
pending slot and applied on the next turn of the host's event loop, through
the ``schedule`` callable the host supplies (Textual's ``call_later`` in
:class:`~tabdeck.widgets.tabs.TabsView`).  Without a scheduler the pending
transition waits for an explicit :meth:`TabController.flush_pending`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from ..log import logger
from .content import ContentSource, resolve_content, slot_keys
from .index_resolver import initial_tab_index, resolve_tab_index
from .pane_cache import PaneCache
from .props import TabBarProps, TabsProps
from .render_window import Bound, PrerenderRange, should_mount, widen

if TYPE_CHECKING:
    from ..widgets.datamodels import TabData

Scheduler = Callable[[Callable[[], Any]], Any]


@dataclass
class TabControllerState:
    """The controller's only mutable state."""

    current_tab: int = 0
    min_render_index: Bound = 0
    max_render_index: Bound = 0

    @property
    def render_range(self) -> PrerenderRange:
        return PrerenderRange(self.min_render_index, self.max_render_index)


@dataclass(frozen=True)
class PaneSlot:
    """Mount decision and resolved content for one tab index."""

    index: int
    tab: TabData
    key: str
    mounted: bool
    active: bool
    content: Any = None


class TabController:
    """Active-index state machine for a set of tabs.

    In uncontrolled mode ``go_to_tab`` mutates the active index.  In
    controlled mode (``props.page`` set) it only fires ``on_change``; the
    owner re-drives the controller through :meth:`update_props`.
    """

    def __init__(
        self,
        props: TabsProps,
        schedule: Scheduler | None = None,
        on_evict: Callable[[str, Any], None] | None = None,
    ) -> None:
        self._props = props
        self._schedule = schedule
        self._pending: int | None = None
        self._flush_scheduled = False
        self.pane_cache = PaneCache(on_evict=on_evict)
        self.state = self._initial_state(props)
        self._prev_current_tab = self.state.current_tab

    @staticmethod
    def _initial_state(props: TabsProps) -> TabControllerState:
        # Seeding at [len - 1, 0] lets the first widen converge on the
        # radius band around the initial index.
        current = initial_tab_index(props)
        window = widen(len(props.tabs) - 1, 0, current, props.radius, len(props.tabs))
        return TabControllerState(
            current_tab=current,
            min_render_index=window.min,
            max_render_index=window.max,
        )

    # -- Properties -----------------------------------------------------------

    @property
    def props(self) -> TabsProps:
        return self._props

    @property
    def tabs(self) -> list[TabData]:
        return self._props.tabs

    @property
    def current_tab(self) -> int:
        return self.state.current_tab

    @property
    def active_tab_data(self) -> TabData | None:
        if 0 <= self.state.current_tab < len(self.tabs):
            return self.tabs[self.state.current_tab]
        return None

    @property
    def controlled(self) -> bool:
        return self._props.controlled

    @property
    def pending_tab(self) -> int | None:
        """Target of the transition waiting to be applied, if any."""
        return self._pending

    # -- Transitions ----------------------------------------------------------

    def go_to_tab(self, index: int, force: bool = False) -> bool:
        """Request a switch to *index*.  Returns whether it was accepted.

        Unforced requests notify ``on_change`` before the controlled-mode
        check, so a controlled owner still hears about user intent.
        """
        if not force and self.state.current_tab == index:
            return False

        tabs = self.tabs
        in_range = 0 <= index < len(tabs)
        if not force:
            on_change = self._props.on_change
            if on_change is not None:
                on_change(tabs[index] if in_range else None, index)
            if self.controlled:
                logger.debug("go_to_tab(%s): controlled, leaving state alone", index)
                return False

        if not in_range:
            logger.debug("go_to_tab(%s): out of range for %d tabs", index, len(tabs))
            return False

        self._pending = index
        self._request_flush()
        return True

    def _request_flush(self) -> None:
        if self._schedule is None or self._flush_scheduled:
            return
        self._flush_scheduled = True
        self._schedule(self.flush_pending)

    def flush_pending(self) -> bool:
        """Apply the pending transition.  Returns False if none was waiting."""
        self._flush_scheduled = False
        index = self._pending
        if index is None:
            return False
        self._pending = None
        if not 0 <= index < len(self.tabs):
            logger.debug("dropping pending transition to %d, tab list changed", index)
            return False
        window = widen(
            self.state.min_render_index,
            self.state.max_render_index,
            index,
            self._props.radius,
            len(self.tabs),
        )
        self.state.current_tab = index
        self.state.min_render_index = window.min
        self.state.max_render_index = window.max
        return True

    def update_props(self, new_props: TabsProps) -> None:
        """Take in new props from the owner.

        A new ``page`` forces a transition to it.  A new prerender radius or a
        resized tab list widens the existing window around the (new) active
        tab; it never shrinks it.
        """
        old_props = self._props
        self._props = new_props

        if old_props.page != new_props.page and new_props.page is not None:
            self.go_to_tab(resolve_tab_index(new_props.page, new_props.tabs), True)

        count = len(new_props.tabs)
        if self.state.current_tab > max(count - 1, 0):
            logger.debug("tab list shrank to %d, clamping active tab", count)
            self.state.current_tab = max(count - 1, 0)

        radius_changed = (
            old_props.prerendering_siblings_number != new_props.prerendering_siblings_number
        )
        if radius_changed or len(old_props.tabs) != count:
            if new_props.page is not None:
                center = resolve_tab_index(new_props.page, new_props.tabs)
            else:
                center = self.state.current_tab
            window = widen(
                self.state.min_render_index,
                self.state.max_render_index,
                center,
                new_props.radius,
                len(new_props.tabs),
            )
            self.state.min_render_index = window.min
            self.state.max_render_index = window.max

    # -- Render decisions -----------------------------------------------------

    def should_mount(self, index: int) -> bool:
        return should_mount(
            index,
            self.state,
            self._props.destroy_inactive_tab,
            self._props.radius,
        )

    def should_update_tab(self, index: int) -> bool:
        """True if the active tab changed since the last render and is *index*."""
        current = self.state.current_tab
        return current != self._prev_current_tab and current == index

    def commit_render(self) -> None:
        """Record that the current state has been rendered."""
        self._prev_current_tab = self.state.current_tab

    def pane_slots(self, source: ContentSource | None = None) -> list[PaneSlot]:
        """Mount decision and content for every tab.

        Mounted panes are resolved once and served from :attr:`pane_cache`
        afterwards.  Panes of tabs that are gone from the list are always
        evicted; under the destroy-inactive policy so are panes that leave
        the band.
        """
        slots: list[PaneSlot] = []
        keep: list[str] = []
        with_content = source is not None and not self._props.no_render_content
        keys = source.slot_keys(self.tabs) if source is not None else slot_keys(self.tabs)
        for index, (tab, key) in enumerate(zip(self.tabs, keys)):
            mounted = self.should_mount(index)
            content = None
            if mounted:
                keep.append(key)
                if with_content:
                    content = self.pane_cache.get_or_create(
                        key, lambda tab=tab, index=index: resolve_content(tab, index, source)
                    )
            slots.append(
                PaneSlot(
                    index=index,
                    tab=tab,
                    key=key,
                    mounted=mounted,
                    active=index == self.state.current_tab,
                    content=content,
                )
            )
        self.pane_cache.evict_missing(keep if self._props.destroy_inactive_tab else keys)
        return slots

    # -- Tab bar --------------------------------------------------------------

    def tab_bar_props(self) -> TabBarProps:
        props = self._props
        return TabBarProps(
            tabs=props.tabs,
            active_tab=self.state.current_tab,
            animated=bool(props.animated),
            go_to_tab=self.go_to_tab,
            on_tab_click=props.on_tab_click,
            tab_bar_position=props.tab_bar_position,
            tab_bar_underline_style=props.tab_bar_underline_style,
            tab_bar_background_color=props.tab_bar_background_color,
            tab_bar_active_text_color=props.tab_bar_active_text_color,
            tab_bar_inactive_text_color=props.tab_bar_inactive_text_color,
            tab_bar_text_style=props.tab_bar_text_style,
        )

    def render_tab_bar(self, default: Callable[[TabBarProps], Any]) -> Any:
        """Build the tab bar: none, the caller's renderer, or *default*."""
        renderer = self._props.render_tab_bar
        if renderer is False:
            return None
        bar_props = self.tab_bar_props()
        if renderer is not None:
            return renderer(bar_props)
        return default(bar_props)

