"""User preferences for tabdeck.

Loads controller defaults from ~/.tabdeck/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import (
    DEFAULT_DISTANCE_TO_CHANGE_TAB,
    DEFAULT_PRERENDER_SIBLINGS,
    TAB_BAR_POSITIONS,
    TAB_DIRECTIONS,
)
from .core.render_window import Bound, normalize_radius
from .log import logger

PREFS_PATH = Path.home() / ".tabdeck" / "preferences.yaml"

_DEFAULT_YAML = """\
# tabdeck Preferences
# Defaults for every tab controller created by the app.
# Delete this file to reset to defaults.

rendering:
  prerendering_siblings_number: 1  # tabs kept mounted on each side; "all" = every tab
  destroy_inactive_tab: false      # unmount panes that leave the prerender band
  no_render_content: false         # render the tab bar only

behavior:
  animated: true                   # hint for the tab bar renderer
  swipeable: true                  # allow swipe surfaces to change tabs
  use_on_pan: true                 # let content follow the pan gesture
  distance_to_change_tab: 0.3      # swipe distance, as a width ratio
  use_paged: true
  tab_direction: horizontal        # horizontal | vertical

tab_bar:
  position: top                    # top | bottom | left | right
  background_color: ""
  active_text_color: ""
  inactive_text_color: ""
"""


@dataclass
class RenderingPreferences:
    """Which panes get mounted."""

    prerendering_siblings_number: Bound = DEFAULT_PRERENDER_SIBLINGS
    destroy_inactive_tab: bool = False
    no_render_content: bool = False


@dataclass
class BehaviorPreferences:
    """Transition and gesture hints."""

    animated: bool = True
    swipeable: bool = True
    use_on_pan: bool = True
    distance_to_change_tab: float = DEFAULT_DISTANCE_TO_CHANGE_TAB
    use_paged: bool = True
    tab_direction: str = "horizontal"


@dataclass
class TabBarPreferences:
    """Tab bar placement and colors (empty string = renderer default)."""

    position: str = "top"
    background_color: str = ""
    active_text_color: str = ""
    inactive_text_color: str = ""


@dataclass
class Preferences:
    """Top-level tabdeck preferences."""

    rendering: RenderingPreferences = field(default_factory=RenderingPreferences)
    behavior: BehaviorPreferences = field(default_factory=BehaviorPreferences)
    tab_bar: TabBarPreferences = field(default_factory=TabBarPreferences)


def _apply(prefs: Preferences, data: dict) -> None:
    if isinstance(data.get("rendering"), dict):
        rdata = data["rendering"]
        if "prerendering_siblings_number" in rdata:
            prefs.rendering.prerendering_siblings_number = normalize_radius(
                rdata["prerendering_siblings_number"]
            )
        if "destroy_inactive_tab" in rdata:
            prefs.rendering.destroy_inactive_tab = bool(rdata["destroy_inactive_tab"])
        if "no_render_content" in rdata:
            prefs.rendering.no_render_content = bool(rdata["no_render_content"])
    if isinstance(data.get("behavior"), dict):
        bdata = data["behavior"]
        for key in ("animated", "swipeable", "use_on_pan", "use_paged"):
            if key in bdata:
                setattr(prefs.behavior, key, bool(bdata[key]))
        if "distance_to_change_tab" in bdata:
            prefs.behavior.distance_to_change_tab = float(bdata["distance_to_change_tab"])
        if str(bdata.get("tab_direction", "")) in TAB_DIRECTIONS:
            prefs.behavior.tab_direction = str(bdata["tab_direction"])
    if isinstance(data.get("tab_bar"), dict):
        tdata = data["tab_bar"]
        if str(tdata.get("position", "")) in TAB_BAR_POSITIONS:
            prefs.tab_bar.position = str(tdata["position"])
        for key in ("background_color", "active_text_color", "inactive_text_color"):
            if key in tdata:
                setattr(prefs.tab_bar, key, str(tdata[key] or ""))


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
            if isinstance(data, dict):
                _apply(prefs, data)
        except (OSError, yaml.YAMLError, TypeError, ValueError):
            logger.debug("failed to load preferences from %s", path, exc_info=True)
            prefs = Preferences()
    else:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML)
        except OSError:
            logger.debug("could not write default preferences to %s", path, exc_info=True)

    return prefs


def _save_setting(section: str, key: str, value: str, path: Path | None) -> None:
    """Surgically set ``section.key`` in the preferences file.

    Preserves user comments and other sections as-is.
    """
    path = path or PREFS_PATH
    try:
        if path.exists():
            text = path.read_text()
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML

        if re.search(rf"^\s+{key}:", text, re.MULTILINE):
            # Replace existing key line, preserving trailing comments
            text = re.sub(
                rf"^(\s+{key}:)\s*(?:\"[^\"]*\"|\S+)(.*?)$",
                lambda m: f"{m.group(1)} {value}{m.group(2)}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        elif re.search(rf"^{section}:", text, re.MULTILINE):
            text = re.sub(
                rf"^({section}:.*)$",
                lambda m: f"{m.group(1)}\n  {key}: {value}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        else:
            text = text.rstrip() + f"\n\n{section}:\n  {key}: {value}\n"

        path.write_text(text)
    except OSError:
        logger.debug("failed to save %s.%s to %s", section, key, path, exc_info=True)


def save_prerendering_siblings(radius: Bound, path: Path | None = None) -> None:
    """Persist the prerender radius (``math.inf`` is written as ``all``)."""
    radius = normalize_radius(radius)
    value = '"all"' if math.isinf(radius) else str(int(radius))
    _save_setting("rendering", "prerendering_siblings_number", value, path)


def save_destroy_inactive_tab(enabled: bool, path: Path | None = None) -> None:
    """Persist the destroy-inactive-tab policy."""
    _save_setting("rendering", "destroy_inactive_tab", "true" if enabled else "false", path)


def save_tab_bar_position(position: str, path: Path | None = None) -> None:
    """Persist the tab bar position.  Unknown positions are ignored."""
    if position not in TAB_BAR_POSITIONS:
        return
    _save_setting("tab_bar", "position", position, path)
