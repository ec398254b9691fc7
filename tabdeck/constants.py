"""Shared constants for tabdeck."""

from __future__ import annotations

# Content association keys
DEFAULT_PREFIX = "$i$-"
ALL_KEY = "$ALL$"

# Configuration defaults
DEFAULT_PRERENDER_SIBLINGS = 1
DEFAULT_DISTANCE_TO_CHANGE_TAB = 0.3
TAB_BAR_POSITIONS = ("top", "bottom", "left", "right")
TAB_DIRECTIONS = ("horizontal", "vertical")

# Spellings of an unbounded prerender radius accepted in config and on the CLI
UNBOUNDED_RADIUS_NAMES = frozenset({"all", "inf", "infinity", "unbounded"})
