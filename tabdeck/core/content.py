"""Content association: which piece of caller content belongs to which tab.

Content is declared as either :class:`StaticContent` (a ready value) or
:class:`LazyContent` (a ``factory(tab, index)`` evaluated only when the pane
is actually resolved).  Plain values are treated as static.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterable, Sequence, Union

from ..constants import ALL_KEY, DEFAULT_PREFIX

if TYPE_CHECKING:
    from ..widgets.datamodels import TabData


@dataclass(frozen=True)
class StaticContent:
    """Content that is already built."""

    value: Any

    def resolve(self, tab: TabData, index: int) -> Any:  # noqa: ARG002
        return self.value


@dataclass(frozen=True)
class LazyContent:
    """Content computed per tab when it is resolved."""

    factory: Callable[[TabData, int], Any]

    def resolve(self, tab: TabData, index: int) -> Any:
        return self.factory(tab, index)


Content = Union[StaticContent, LazyContent]


@dataclass(frozen=True)
class ContentItem:
    """One caller-supplied content item, optionally bound to a tab key."""

    content: Content
    key: str | None = None


def lazy(factory: Callable[[TabData, int], Any], key: str | None = None) -> ContentItem:
    """Shorthand for ``ContentItem(LazyContent(factory), key)``."""
    return ContentItem(LazyContent(factory), key=key)


def _as_item(value: Any) -> ContentItem:
    if isinstance(value, ContentItem):
        return value
    if isinstance(value, (StaticContent, LazyContent)):
        return ContentItem(value)
    return ContentItem(StaticContent(value))


@dataclass
class ContentSource:
    """Lookup tables built once per render pass."""

    by_key: dict[str, ContentItem] = field(default_factory=dict)
    by_position: dict[str, ContentItem] = field(default_factory=dict)
    catch_all: ContentItem | None = None
    default_prefix: str = DEFAULT_PREFIX
    all_key: str = ALL_KEY

    def __len__(self) -> int:
        if self.catch_all is not None:
            return 1
        return len(self.by_position)

    def lookup(self, tab: TabData, index: int) -> ContentItem | None:
        """Find the item for a tab without resolving it.

        Explicit keys beat positional keys; the catch-all is the last resort.
        A keyed tab still falls back to its positional key, so an unkeyed
        item at position 1 binds to tab 1 whatever that tab's own key is.
        """
        candidates = [k for k in (tab.key, f"{self.default_prefix}{index}") if k]
        for key in candidates:
            if key in self.by_key:
                return self.by_key[key]
        for key in candidates:
            if key in self.by_position:
                return self.by_position[key]
        return self.catch_all

    def slot_keys(self, tabs: Sequence[TabData]) -> list[str]:
        return slot_keys(tabs, self.default_prefix)


def slot_keys(tabs: Sequence[TabData], default_prefix: str = DEFAULT_PREFIX) -> list[str]:
    """One pane key per tab, unique across *tabs*.

    A tab keeps its own key unless it has none or shares it with another
    tab; those get the positional key instead.
    """
    counts = Counter(tab.key for tab in tabs if tab.key)
    return [
        tab.key if tab.key and counts[tab.key] == 1 else f"{default_prefix}{index}"
        for index, tab in enumerate(tabs)
    ]


def build_content_source(
    items: Iterable[Any] | Any | None,
    default_prefix: str = DEFAULT_PREFIX,
    all_key: str = ALL_KEY,
) -> ContentSource:
    """Index caller content for :func:`resolve_content`.

    With more than one item every item is reachable by its explicit key (if
    any) and by its position.  A single item, or a single non-list value, is
    shared by all tabs.
    """
    source = ContentSource(default_prefix=default_prefix, all_key=all_key)
    if items is None:
        return source
    if isinstance(items, (list, tuple)):
        entries = [_as_item(v) for v in items]
    else:
        entries = [_as_item(items)]

    if len(entries) > 1:
        for index, entry in enumerate(entries):
            if entry.key:
                source.by_key[entry.key] = entry
            source.by_position[f"{default_prefix}{index}"] = entry
    elif entries:
        source.catch_all = entries[0]
    return source


def resolve_content(tab: TabData, index: int, source: ContentSource) -> Any:
    """Return the content for *tab* at *index*, or None if nothing matches."""
    item = source.lookup(tab, index)
    if item is None:
        return None
    return item.content.resolve(tab, index)
