"""Cursor, filter and viewport state of a panel list."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from gssh.core.models import Displayable

ItemT = TypeVar("ItemT", bound=Displayable)


class FilterState(str, Enum):
    """Filter lifecycle of a list."""

    UNFILTERED = "unfiltered"
    FILTERING = "filtering"
    FILTER_APPLIED = "filter_applied"


def fuzzy_match(query: str, candidate: str) -> bool:
    """Check whether query characters appear in order within candidate.

    Matching is case-insensitive; an empty query matches everything.

    Parameters
    ----------
    query : str
        Filter text typed by the user
    candidate : str
        Item filter key

    Returns
    -------
    bool
        True if every query character is found in order
    """
    remaining = iter(candidate.lower())
    return all(char in remaining for char in query.lower())


class SelectableList(Generic[ItemT]):
    """List model with a highlighted cursor, text filter and scroll window.

    The cursor indexes the visible (filtered) items. Replacing the items
    keeps the cursor position, clamped to the new length.

    Parameters
    ----------
    items : list | None
        Initial items
    per_page : int
        Number of items that fit in the viewport

    Attributes
    ----------
    items : list
        All items, unfiltered
    cursor : int
        Index of the highlighted visible item
    offset : int
        Index of the first visible item in the viewport
    filter_text : str
        Current filter text
    filter_state : FilterState
        Filter lifecycle state
    per_page : int
        Number of items that fit in the viewport
    """

    def __init__(self, items: list[ItemT] | None = None, per_page: int = 1) -> None:
        self.items: list[ItemT] = list(items or [])
        self.cursor = 0
        self.offset = 0
        self.filter_text = ""
        self.filter_state = FilterState.UNFILTERED
        self.per_page = max(1, per_page)

    @property
    def visible_items(self) -> list[ItemT]:
        if not self.filter_text:
            return self.items
        return [item for item in self.items if fuzzy_match(self.filter_text, item.filter_key)]

    @property
    def highlighted(self) -> ItemT | None:
        visible = self.visible_items
        if not visible:
            return None
        return visible[min(self.cursor, len(visible) - 1)]

    @property
    def is_filtering(self) -> bool:
        return self.filter_state is FilterState.FILTERING

    def set_items(self, items: list[ItemT]) -> None:
        self.items = list(items)
        self._clamp()

    def set_per_page(self, per_page: int) -> None:
        self.per_page = max(1, per_page)
        self._clamp()

    def select(self, index: int) -> bool:
        """Highlight a visible item by index.

        Returns
        -------
        bool
            False if the index is out of range (cursor unchanged)
        """
        if not 0 <= index < len(self.visible_items):
            return False
        self.cursor = index
        self._clamp()
        return True

    def move(self, delta: int) -> None:
        self.cursor += delta
        self._clamp()

    def page(self, direction: int) -> None:
        self.move(direction * self.per_page)

    def home(self) -> None:
        self.cursor = 0
        self._clamp()

    def end(self) -> None:
        self.cursor = len(self.visible_items) - 1
        self._clamp()

    def window(self) -> list[tuple[int, ItemT]]:
        """Return the (visible index, item) pairs inside the viewport."""
        visible = self.visible_items
        end = min(len(visible), self.offset + self.per_page)
        return [(index, visible[index]) for index in range(self.offset, end)]

    def start_filtering(self) -> None:
        self.filter_state = FilterState.FILTERING
        self._clamp()

    def type_character(self, character: str) -> None:
        self.filter_text += character
        self.cursor = 0
        self._clamp()

    def backspace(self) -> None:
        self.filter_text = self.filter_text[:-1]
        self._clamp()

    def accept_filter(self) -> None:
        """Leave filter entry, keeping the filter applied if non-empty."""
        self.filter_state = (
            FilterState.FILTER_APPLIED if self.filter_text else FilterState.UNFILTERED
        )
        self._clamp()

    def reset_filter(self) -> None:
        self.filter_text = ""
        self.filter_state = FilterState.UNFILTERED
        self._clamp()

    def _clamp(self) -> None:
        count = len(self.visible_items)
        self.cursor = max(0, min(self.cursor, count - 1)) if count else 0

        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.per_page:
            self.offset = self.cursor - self.per_page + 1

        max_offset = max(0, count - self.per_page)
        self.offset = max(0, min(self.offset, max_offset))
