"""Render-window tracking: which tab indices may be mounted.

Two policies are supported.  The default window only ever widens, so a pane
that has been mounted once stays eligible for the life of the controller.
The destroy-inactive policy uses a band around the active tab recomputed on
every check, so panes that fall out of it are dropped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from ..constants import UNBOUNDED_RADIUS_NAMES

if TYPE_CHECKING:
    from .controller import TabControllerState

# Bounds are ints, or +/- inf once an unbounded radius has been applied.
Bound = Union[int, float]


@dataclass(frozen=True)
class PrerenderRange:
    """Inclusive ``[min, max]`` range of mountable tab indices."""

    min: Bound
    max: Bound

    def __contains__(self, index: object) -> bool:
        return isinstance(index, (int, float)) and self.min <= index <= self.max

    def contains_range(self, other: PrerenderRange) -> bool:
        return self.min <= other.min and other.max <= self.max


def normalize_radius(value: object) -> Bound:
    """Convert a configured prerender radius to a number.

    ``None``, ``"all"``, ``"inf"`` and ``math.inf`` mean unbounded.  Anything
    that is not a usable non-negative number collapses to 0.
    """
    if value is None:
        return math.inf
    if isinstance(value, str):
        text = value.strip().lower()
        if text in UNBOUNDED_RADIUS_NAMES:
            return math.inf
        try:
            value = int(text)
        except ValueError:
            return 0
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return math.inf if value > 0 else 0
        value = int(value)
    if not isinstance(value, int):
        return 0
    return max(value, 0)


def widen(
    current_min: Bound,
    current_max: Bound,
    active_index: int,
    radius: Bound,
    count: int | None = None,
) -> PrerenderRange:
    """Widen ``[current_min, current_max]`` to cover *active_index* +/- *radius*.

    The result always contains the input range, and widening again with the
    same arguments changes nothing.  With *count*, the new band is limited to
    real tab indices ``[0, count - 1]`` before it is merged in.
    """
    lo = active_index - radius
    hi = active_index + radius
    if count is not None:
        lo = max(lo, 0)
        hi = min(hi, count - 1)
    return PrerenderRange(min=min(current_min, lo), max=max(current_max, hi))


def should_mount(
    index: int,
    state: TabControllerState,
    destroy_inactive: bool,
    radius: Bound,
) -> bool:
    """Return True if the pane at *index* may be mounted under *state*."""
    if destroy_inactive:
        active = state.current_tab
        return active - radius <= index <= active + radius
    return state.min_render_index <= index <= state.max_render_index
