"""Shared test fixtures for the tabdeck test suite."""

from __future__ import annotations

import pytest

from tabdeck import TabData, TabsProps


class ManualScheduler:
    """Collects scheduled callbacks so tests decide when the next turn runs."""

    def __init__(self) -> None:
        self.queue: list = []

    def __call__(self, callback) -> None:
        self.queue.append(callback)

    def run(self) -> int:
        """Run everything queued so far; return how many callbacks ran."""
        ran = 0
        while self.queue:
            self.queue.pop(0)()
            ran += 1
        return ran


@pytest.fixture
def five_tabs() -> list[TabData]:
    """Five keyed tabs: t0 .. t4."""
    return [TabData(title=f"Tab {i}", key=f"t{i}") for i in range(5)]


@pytest.fixture
def duplicate_key_tabs() -> list[TabData]:
    """Tabs where ``dup`` appears at indices 1 and 3."""
    return [
        TabData(title="A", key="a"),
        TabData(title="Dup 1", key="dup"),
        TabData(title="B", key="b"),
        TabData(title="Dup 2", key="dup"),
    ]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def change_log() -> list:
    """A list plus an ``on_change``-shaped recorder appended to it."""
    return []


@pytest.fixture
def record_change(change_log):
    def _record(tab, index):
        change_log.append((tab, index))

    return _record


@pytest.fixture
def make_props(five_tabs):
    """Build TabsProps over five_tabs with keyword overrides."""

    def _make(**kwargs) -> TabsProps:
        kwargs.setdefault("tabs", five_tabs)
        return TabsProps(**kwargs)

    return _make
