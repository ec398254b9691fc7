"""Demo tabdeck application."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Static

from .core import ContentItem, LazyContent, StaticContent, TabsProps
from .log import logger
from .preferences import Preferences, load_preferences
from .widgets import TabData, TabsView


def _demo_body(tab: TabData, index: int) -> str:
    return f"{tab.label}\n\nPane {index + 1}, built the first time it was mounted."


DEMO_TABS = [
    TabData(title="Overview", key="overview"),
    TabData(title="Activity", key="activity"),
    TabData(title="Files", key="files"),
    TabData(title="Settings", key="settings"),
    TabData(title="About", key="about"),
]


def load_tabs(path: Path) -> tuple[list[TabData], list[ContentItem]]:
    """Read a YAML list of tabs.

    Each entry is a mapping with ``title``, optional ``key`` and optional
    ``content`` text.  Entries without content get a generated body.
    Unreadable files yield no tabs.
    """
    try:
        data = yaml.safe_load(path.read_text()) or []
    except (OSError, yaml.YAMLError):
        logger.debug("failed to read tabs from %s", path, exc_info=True)
        return [], []
    if isinstance(data, dict):
        data = data.get("tabs", [])
    if not isinstance(data, list):
        return [], []

    tabs: list[TabData] = []
    content: list[ContentItem] = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        tab = TabData.from_dict(entry)
        body = tab.meta.pop("content", None)
        if body is None:
            item = ContentItem(LazyContent(_demo_body), key=tab.key)
        else:
            item = ContentItem(StaticContent(str(body)), key=tab.key)
        tabs.append(tab)
        content.append(item)
    return tabs, content


class TabDeckApp(App):
    """Full-screen tab view over a list of tabs."""

    TITLE = "tabdeck"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        tabs: list[TabData] | None = None,
        content: Any = None,
        prefs: Preferences | None = None,
        **overrides: Any,
    ) -> None:
        super().__init__()
        if tabs is None:
            tabs = list(DEMO_TABS)
            if content is None:
                content = [ContentItem(LazyContent(_demo_body), key=t.key) for t in tabs]
        self.prefs = prefs if prefs is not None else load_preferences()
        self.tab_props = TabsProps.from_preferences(self.prefs, tabs, **overrides)
        self.tab_content = content

    def compose(self) -> ComposeResult:
        if not self.tab_props.tabs:
            yield Static("No tabs to show.", id="empty")
        else:
            yield TabsView(self.tab_props, self.tab_content, id="tabs")
        yield Footer()

    def on_mount(self) -> None:
        for view in self.query(TabsView):
            view.focus()

    def on_tabs_view_tab_changed(self, event: TabsView.TabChanged) -> None:
        self.sub_title = event.tab.label if event.tab is not None else ""
