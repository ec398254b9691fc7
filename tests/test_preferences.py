"""Tests for tabdeck.preferences.

All file I/O uses tmp_path so nothing touches the real user config.
"""

from __future__ import annotations

import math
from pathlib import Path

import yaml

from tabdeck import TabsProps
from tabdeck.preferences import (
    Preferences,
    load_preferences,
    save_destroy_inactive_tab,
    save_prerendering_siblings,
    save_tab_bar_position,
)


class TestLoadPreferencesDefaults:
    """When no file exists, load_preferences returns sensible defaults."""

    def test_defaults_when_no_file(self, tmp_path: Path):
        prefs = load_preferences(tmp_path / "nonexistent.yaml")
        assert prefs.rendering.prerendering_siblings_number == 1
        assert prefs.rendering.destroy_inactive_tab is False
        assert prefs.behavior.animated is True
        assert prefs.behavior.distance_to_change_tab == 0.3
        assert prefs.tab_bar.position == "top"

    def test_creates_default_file(self, tmp_path: Path):
        path = tmp_path / "sub" / "prefs.yaml"
        load_preferences(path)
        assert path.exists()
        data = yaml.safe_load(path.read_text())
        assert data["rendering"]["prerendering_siblings_number"] == 1

    def test_default_file_loads_back_to_defaults(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        assert load_preferences(path) == Preferences()


class TestLoadPreferencesFromFile:
    def test_reads_values(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text(
            "rendering:\n"
            "  prerendering_siblings_number: 3\n"
            "  destroy_inactive_tab: true\n"
            "behavior:\n"
            "  animated: false\n"
            "  tab_direction: vertical\n"
            "tab_bar:\n"
            "  position: left\n"
            '  active_text_color: "#ff8800"\n'
        )
        prefs = load_preferences(path)
        assert prefs.rendering.prerendering_siblings_number == 3
        assert prefs.rendering.destroy_inactive_tab is True
        assert prefs.behavior.animated is False
        assert prefs.behavior.tab_direction == "vertical"
        assert prefs.tab_bar.position == "left"
        assert prefs.tab_bar.active_text_color == "#ff8800"

    def test_all_means_unbounded(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("rendering:\n  prerendering_siblings_number: all\n")
        assert load_preferences(path).rendering.prerendering_siblings_number == math.inf

    def test_unknown_position_ignored(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("tab_bar:\n  position: diagonal\n")
        assert load_preferences(path).tab_bar.position == "top"

    def test_invalid_yaml_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("rendering: [unclosed\n")
        assert load_preferences(path) == Preferences()

    def test_bad_value_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("behavior:\n  distance_to_change_tab: far\n")
        assert load_preferences(path) == Preferences()

    def test_non_mapping_document(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("- just\n- a list\n")
        assert load_preferences(path) == Preferences()


class TestSavePreferences:
    def test_save_prerender_round_trip(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_prerendering_siblings(4, path)
        assert load_preferences(path).rendering.prerendering_siblings_number == 4

    def test_save_unbounded_prerender(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        save_prerendering_siblings(math.inf, path)
        assert load_preferences(path).rendering.prerendering_siblings_number == math.inf

    def test_save_keeps_comments(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_destroy_inactive_tab(True, path)
        text = path.read_text()
        assert "destroy_inactive_tab: true" in text
        assert "# unmount panes" in text
        assert load_preferences(path).rendering.destroy_inactive_tab is True

    def test_save_adds_missing_section(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("behavior:\n  animated: true\n")
        save_tab_bar_position("bottom", path)
        assert load_preferences(path).tab_bar.position == "bottom"

    def test_save_adds_missing_key(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("tab_bar:\n  background_color: \"\"\n")
        save_tab_bar_position("right", path)
        assert load_preferences(path).tab_bar.position == "right"

    def test_unknown_position_not_saved(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        save_tab_bar_position("diagonal", path)
        assert not path.exists()


class TestPropsFromPreferences:
    def test_copies_values(self, five_tabs):
        prefs = Preferences()
        prefs.rendering.prerendering_siblings_number = 2
        prefs.rendering.destroy_inactive_tab = True
        prefs.tab_bar.position = "bottom"
        prefs.tab_bar.background_color = "#101010"
        props = TabsProps.from_preferences(prefs, five_tabs)
        assert props.tabs == five_tabs
        assert props.prerendering_siblings_number == 2
        assert props.destroy_inactive_tab is True
        assert props.tab_bar_position == "bottom"
        assert props.tab_bar_background_color == "#101010"
        assert props.tab_bar_active_text_color is None
        assert props.page is None

    def test_overrides_win(self, five_tabs):
        props = TabsProps.from_preferences(Preferences(), five_tabs, page=2, animated=False)
        assert props.page == 2
        assert props.controlled
        assert props.animated is False
