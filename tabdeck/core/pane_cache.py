"""Per-controller cache of resolved tab panes."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ..log import logger


class PaneCache:
    """Resolved pane content keyed by tab key (or positional fallback key).

    Panes are created on first mount and reused until evicted.  ``on_evict``
    is called with ``(key, pane)`` for every eviction so a renderer can tear
    down whatever it built for the pane.
    """

    def __init__(self, on_evict: Callable[[str, Any], None] | None = None) -> None:
        self._panes: dict[str, Any] = {}
        self.on_evict = on_evict

    def __contains__(self, key: object) -> bool:
        return key in self._panes

    def __len__(self) -> int:
        return len(self._panes)

    def keys(self) -> list[str]:
        return list(self._panes)

    def get(self, key: str) -> Any:
        return self._panes.get(key)

    def get_or_create(self, key: str, factory: Callable[[], Any]) -> Any:
        """Return the cached pane for *key*, building it with *factory* once."""
        if key not in self._panes:
            self._panes[key] = factory()
        return self._panes[key]

    def evict(self, key: str) -> bool:
        """Drop *key*.  Returns False if it was not cached."""
        if key not in self._panes:
            return False
        pane = self._panes.pop(key)
        logger.debug("evicting pane %s", key)
        if self.on_evict is not None:
            self.on_evict(key, pane)
        return True

    def evict_missing(self, keep: Iterable[str]) -> list[str]:
        """Evict every cached key not in *keep*; return the evicted keys."""
        keep_set = set(keep)
        dropped = [key for key in self._panes if key not in keep_set]
        for key in dropped:
            self.evict(key)
        return dropped

    def clear(self) -> None:
        for key in list(self._panes):
            self.evict(key)
