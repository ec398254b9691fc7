"""Tests for content association (tabdeck.core.content)."""

from __future__ import annotations

from tabdeck import (
    ContentItem,
    LazyContent,
    StaticContent,
    TabData,
    build_content_source,
    resolve_content,
)
from tabdeck.core.content import lazy, slot_keys


class TestBuildContentSource:
    def test_none_is_empty(self):
        source = build_content_source(None)
        assert len(source) == 0
        assert source.catch_all is None

    def test_empty_list_is_empty(self):
        assert len(build_content_source([])) == 0

    def test_single_value_is_catch_all(self):
        source = build_content_source("hello")
        assert source.catch_all == ContentItem(StaticContent("hello"))
        assert source.by_key == {}

    def test_single_item_list_is_catch_all(self):
        source = build_content_source([ContentItem(StaticContent("x"), key="a")])
        assert source.catch_all is not None
        assert source.by_key == {}

    def test_many_items_indexed_by_key_and_position(self):
        first = ContentItem(StaticContent("A"), key="a")
        second = ContentItem(StaticContent("B"))
        source = build_content_source([first, second])
        assert source.by_key == {"a": first}
        assert source.by_position == {"$i$-0": first, "$i$-1": second}
        assert source.catch_all is None

    def test_custom_prefix(self):
        source = build_content_source(["x", "y"], default_prefix="pos:")
        assert set(source.by_position) == {"pos:0", "pos:1"}

    def test_lazy_factory_not_called_at_build(self):
        calls = []
        build_content_source([lazy(lambda t, i: calls.append(i)), "static"])
        assert calls == []


class TestResolveContent:
    def test_keyed_and_positional(self):
        tabs = [TabData(key="a"), TabData(key="b")]
        source = build_content_source(
            [ContentItem(StaticContent("for a"), key="a"), ContentItem(StaticContent("second"))]
        )
        assert resolve_content(tabs[0], 0, source) == "for a"
        assert resolve_content(tabs[1], 1, source) == "second"

    def test_explicit_key_beats_position(self):
        tabs = [TabData(key="b"), TabData(key="a")]
        source = build_content_source(
            [ContentItem(StaticContent("A"), key="a"), ContentItem(StaticContent("B"), key="b")]
        )
        assert resolve_content(tabs[0], 0, source) == "B"
        assert resolve_content(tabs[1], 1, source) == "A"

    def test_unkeyed_tab_uses_position(self):
        source = build_content_source(["zero", "one", "two"])
        assert resolve_content(TabData(title="x"), 2, source) == "two"

    def test_catch_all_shared_by_every_tab(self):
        source = build_content_source("shared")
        for i in range(3):
            assert resolve_content(TabData(key=f"k{i}"), i, source) == "shared"

    def test_nothing_matches(self):
        source = build_content_source(["zero", "one"])
        assert resolve_content(TabData(key="z"), 5, source) is None
        assert resolve_content(TabData(key="z"), 0, build_content_source(None)) is None

    def test_lazy_content_gets_tab_and_index(self):
        source = build_content_source(LazyContent(lambda tab, i: f"{tab.key}@{i}"))
        assert resolve_content(TabData(key="x"), 3, source) == "x@3"

    def test_lazy_content_evaluated_per_resolution(self):
        calls = []

        def body(tab, index):
            calls.append(index)
            return index

        source = build_content_source(LazyContent(body))
        resolve_content(TabData(), 0, source)
        resolve_content(TabData(), 0, source)
        assert calls == [0, 0]

    def test_plain_callable_is_static(self):
        def func(tab, index):
            return "called"

        source = build_content_source(func)
        assert resolve_content(TabData(), 0, source) is func


class TestSlotKeys:
    def test_tab_key(self, five_tabs):
        assert slot_keys(five_tabs) == ["t0", "t1", "t2", "t3", "t4"]

    def test_positional_fallback(self):
        assert slot_keys([TabData(key="k"), TabData()]) == ["k", "$i$-1"]

    def test_duplicate_keys_fall_back_to_position(self, duplicate_key_tabs):
        assert slot_keys(duplicate_key_tabs) == ["a", "$i$-1", "b", "$i$-3"]

    def test_source_uses_its_prefix(self):
        source = build_content_source(None, default_prefix="pane-")
        assert source.slot_keys([TabData(), TabData(key="x")]) == ["pane-0", "x"]
