"""Tab bar and tab view widgets for tabdeck."""

from __future__ import annotations

from typing import Any

from rich.protocol import is_renderable
from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from ..core import TabBarProps, TabController, TabsProps, build_content_source
from ..log import logger
from .datamodels import TabData


class TabButton(Static):
    """A clickable tab label in the tab bar."""

    def __init__(self, label: str | Text, tab_index: int, bar_props: TabBarProps, **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.tab_index = tab_index
        self.bar_props = bar_props

    def on_click(self) -> None:
        props = self.bar_props
        tab = props.tabs[self.tab_index] if self.tab_index < len(props.tabs) else None
        if props.on_tab_click is not None:
            props.on_tab_click(tab, self.tab_index)
        props.go_to_tab(self.tab_index)


class TabBar(Horizontal):
    """Strip of tab buttons built from a :class:`TabBarProps` bundle."""

    def __init__(self, bar_props: TabBarProps, **kwargs) -> None:
        super().__init__(**kwargs)
        self.bar_props = bar_props
        if bar_props.tab_bar_position in ("left", "right"):
            self.add_class("vertical")

    def _label(self, tab: TabData, active: bool) -> Text:
        props = self.bar_props
        color = props.tab_bar_active_text_color if active else props.tab_bar_inactive_text_color
        label = f"{tab.icon} {tab.label}" if tab.icon else tab.label
        return Text(f" {label} ", style=color or "")

    def update_tabs(self, bar_props: TabBarProps) -> None:
        """Rebuild the tab buttons."""
        self.bar_props = bar_props
        if bar_props.tab_bar_background_color:
            self.styles.background = bar_props.tab_bar_background_color
        self.remove_children()
        for i, tab in enumerate(bar_props.tabs):
            active = i == bar_props.active_tab
            cls = "tab-btn tab-active" if active else "tab-btn tab-inactive"
            self.mount(TabButton(self._label(tab, active), tab_index=i, bar_props=bar_props, classes=cls))


class TabPane(Vertical):
    """Container for one mounted tab's content."""

    def __init__(self, pane_key: str, content: Any, **kwargs) -> None:
        super().__init__(classes="tab-pane", **kwargs)
        self.pane_key = pane_key
        self.pane_content = content

    def compose(self) -> ComposeResult:
        content = self.pane_content
        if isinstance(content, Widget):
            yield content
        elif content is None:
            yield Static("", classes="tab-pane-body")
        else:
            body = content if is_renderable(content) else str(content)
            yield Static(body, classes="tab-pane-body")


class TabsView(Vertical):
    """Tab bar plus content panes, driven by a :class:`TabController`.

    Transitions accepted by the controller are applied on the next turn of
    the message loop (``call_later``), after which the tab bar and panes are
    re-synced and :class:`TabsView.TabChanged` is posted.
    """

    DEFAULT_CSS = """
    TabsView {
        height: 1fr;
    }
    TabsView.tab-bar-side {
        layout: horizontal;
    }
    TabBar {
        height: auto;
    }
    TabBar.vertical {
        layout: vertical;
        width: auto;
        height: 1fr;
    }
    TabButton {
        width: auto;
    }
    TabButton.tab-active {
        text-style: bold reverse;
    }
    TabButton.tab-inactive {
        text-style: dim;
    }
    TabsView > #tab-content {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("right", "next_tab", "Next tab", show=False),
        Binding("left", "previous_tab", "Previous tab", show=False),
    ]

    can_focus = True

    class TabChanged(Message):
        """Posted after a new active tab has been rendered."""

        def __init__(self, view: TabsView, index: int, tab: TabData | None) -> None:
            super().__init__()
            self.view = view
            self.index = index
            self.tab = tab

        @property
        def control(self) -> TabsView:
            return self.view

    def __init__(self, props: TabsProps, content: Any = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._content = build_content_source(content)
        self._panes: dict[str, TabPane] = {}
        self._tab_bar: Widget | None = None
        self._bar_rendered: tuple[int, list[TabData]] | None = None
        self.controller = TabController(
            props,
            schedule=self._schedule,
            on_evict=self._on_pane_evicted,
        )
        if props.tab_bar_position in ("left", "right"):
            self.add_class("tab-bar-side")

    def compose(self) -> ComposeResult:
        bar = self._tab_bar = self.controller.render_tab_bar(self._default_tab_bar)
        self._bar_rendered = (self.controller.current_tab, list(self.controller.tabs))
        content = Vertical(id="tab-content")
        if self.controller.props.tab_bar_position in ("bottom", "right"):
            yield content
            if bar is not None:
                yield bar
        else:
            if bar is not None:
                yield bar
            yield content

    def on_mount(self) -> None:
        self.sync_tabs()

    @staticmethod
    def _default_tab_bar(bar_props: TabBarProps) -> TabBar:
        return TabBar(bar_props, id="tab-bar")

    # -- Controller plumbing --------------------------------------------------

    def _schedule(self, flush) -> None:
        self.call_later(self._run_flush, flush)

    def _run_flush(self, flush) -> None:
        if flush():
            self.sync_tabs()

    def _on_pane_evicted(self, key: str, content: Any) -> None:  # noqa: ARG002
        pane = self._panes.pop(key, None)
        if pane is not None:
            pane.remove()

    def sync_tabs(self) -> None:
        """Bring the tab bar and mounted panes in line with the controller."""
        controller = self.controller
        slots = controller.pane_slots(self._content)
        if not controller.props.no_render_content:
            container = self.query_one("#tab-content", Vertical)
            for slot in slots:
                if not slot.mounted:
                    continue
                pane = self._panes.get(slot.key)
                if pane is None:
                    pane = TabPane(slot.key, slot.content)
                    self._panes[slot.key] = pane
                    container.mount(pane)
                pane.display = slot.active

        self._sync_tab_bar()

        changed = [slot for slot in slots if controller.should_update_tab(slot.index)]
        controller.commit_render()
        for slot in changed:
            logger.debug("active tab is now %d (%s)", slot.index, slot.key)
            self.post_message(self.TabChanged(self, slot.index, slot.tab))

    def _sync_tab_bar(self) -> None:
        controller = self.controller
        bar = self._tab_bar
        if isinstance(bar, TabBar):
            bar.update_tabs(controller.tab_bar_props())
            return
        if bar is None:
            return
        # A caller-rendered bar is rebuilt whenever what it shows changes.
        rendered = (controller.current_tab, list(controller.tabs))
        if rendered == self._bar_rendered:
            return
        self._bar_rendered = rendered
        self.call_later(self._replace_tab_bar, controller.render_tab_bar(self._default_tab_bar))

    async def _replace_tab_bar(self, bar: Widget | None) -> None:
        old, self._tab_bar = self._tab_bar, bar
        if old is not None:
            await old.remove()
        if bar is None:
            return
        content = self.query_one("#tab-content", Vertical)
        if self.controller.props.tab_bar_position in ("bottom", "right"):
            await self.mount(bar, after=content)
        else:
            await self.mount(bar, before=content)

    # -- Public API -----------------------------------------------------------

    @property
    def active_index(self) -> int:
        return self.controller.current_tab

    @property
    def mounted_keys(self) -> list[str]:
        """Keys of the panes currently mounted, in mount order."""
        return list(self._panes)

    def go_to_tab(self, index: int) -> bool:
        return self.controller.go_to_tab(index)

    def update_props(self, props: TabsProps) -> None:
        """Push new props in (e.g. a new ``page`` in controlled mode)."""
        self.controller.update_props(props)
        self.sync_tabs()

    def set_page(self, page: int | str | None) -> None:
        self.update_props(self.controller.props.replace(page=page))

    # -- Actions --------------------------------------------------------------

    def action_next_tab(self) -> None:
        target = self.controller.current_tab + 1
        if target < len(self.controller.tabs):
            self.controller.go_to_tab(target)

    def action_previous_tab(self) -> None:
        target = self.controller.current_tab - 1
        if target >= 0:
            self.controller.go_to_tab(target)
