"""Data models for tabdeck widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class TabData:
    """One tab descriptor.

    ``key`` identifies the tab for page lookups and content association.
    Everything else is display metadata the controller never looks at.
    """

    title: str = ""
    key: str | None = None
    icon: str = ""
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        """Text shown in the tab bar (falls back to the key)."""
        return self.title or self.key or ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TabData:
        """Build a tab from a plain mapping (YAML / JSON tab lists)."""
        known = {"title", "key", "icon"}
        key = data.get("key")
        return cls(
            title=str(data.get("title", "") or ""),
            key=str(key) if key is not None else None,
            icon=str(data.get("icon", "") or ""),
            meta={k: v for k, v in data.items() if k not in known},
        )
