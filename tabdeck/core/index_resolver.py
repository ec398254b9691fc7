"""Turn a page identifier (index, key or nothing) into a tab index."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence, Union

if TYPE_CHECKING:
    from ..widgets.datamodels import TabData
    from .props import TabsProps

PageId = Union[int, float, str, None]


def resolve_tab_index(page: PageId, tabs: Sequence[TabData]) -> int:
    """Resolve *page* against *tabs*.

    Strings are matched against ``tab.key`` and the last matching tab wins.
    Numbers are used directly; falsy values (``None``, ``0``, ``NaN``) mean 0.
    The result is clamped into ``[0, len(tabs) - 1]`` (0 for an empty list).
    Never raises.
    """
    if not tabs:
        return 0

    index = 0
    if isinstance(page, str):
        for i, tab in enumerate(tabs):
            if tab.key == page:
                index = i
    elif isinstance(page, (int, float)) and page and not math.isnan(page):
        if math.isinf(page):
            index = len(tabs) if page > 0 else 0
        else:
            index = int(page)

    if index < 0:
        return 0
    if index >= len(tabs):
        return len(tabs) - 1
    return index


def initial_tab_index(props: TabsProps) -> int:
    """Index to start on: ``page`` if given, else ``initial_page``, else 0."""
    page = props.page if props.page is not None else props.initial_page
    return resolve_tab_index(page, props.tabs)
