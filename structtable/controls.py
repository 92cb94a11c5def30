"""Controls and events for a table: pagination, display strategy, reloads, selection."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

Row = TypeVar("Row")


@dataclass
class PaginationController:
    """Controls which page is shown and reports the page count once known."""

    current_page: int = 0
    _page_count: Optional[int] = field(default=None, repr=False)

    def next(self) -> None:
        """Go to the next page."""
        self.current_page += 1

    def previous(self) -> None:
        """Go to the previous page, never below the first page."""
        self.current_page = max(self.current_page - 1, 0)

    def page_count(self) -> Optional[int]:
        """Return the page count, or ``None`` until it is known."""
        return self._page_count


class DisplayKind(enum.Enum):
    VIRTUALIZATION = "virtualization"
    INFINITE_SCROLL = "infinite_scroll"
    PAGINATION = "pagination"


@dataclass(frozen=True)
class DisplayStrategy:
    """How rows are displayed: virtualized, infinitely scrolled, or paginated."""

    kind: DisplayKind = DisplayKind.VIRTUALIZATION
    row_count: Optional[int] = None
    controller: Optional[PaginationController] = None

    def __post_init__(self) -> None:
        if self.kind is DisplayKind.PAGINATION:
            if self.row_count is None or self.row_count <= 0:
                raise ValueError("pagination needs a positive row count per page")
            if self.controller is None:
                raise ValueError("pagination needs a controller")

    @classmethod
    def virtualization(cls) -> "DisplayStrategy":
        return cls(DisplayKind.VIRTUALIZATION)

    @classmethod
    def infinite_scroll(cls) -> "DisplayStrategy":
        return cls(DisplayKind.INFINITE_SCROLL)

    @classmethod
    def pagination(
        cls, row_count: int, controller: Optional[PaginationController] = None
    ) -> "DisplayStrategy":
        return cls(
            DisplayKind.PAGINATION,
            row_count=row_count,
            controller=controller if controller is not None else PaginationController(),
        )

    @property
    def is_paginated(self) -> bool:
        return self.kind is DisplayKind.PAGINATION

    def set_row_count(self, row_count: int) -> None:
        """Report the total row count; pagination derives its page count from it."""
        if self.is_paginated:
            assert self.controller is not None and self.row_count is not None
            self.controller._page_count = row_count // self.row_count + 1


class ReloadController:
    """Lets callers trigger a reload of every subscribed table."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], Any]] = []

    def subscribe(self, callback: Callable[[], Any]) -> Callable[[], None]:
        """Call ``callback`` on every reload; returns a function that unsubscribes."""
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def reload(self) -> None:
        """Notify all subscribers."""
        for callback in list(self._callbacks):
            callback()


class SelectionMode(enum.Enum):
    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass
class Selection:
    """The selection mode together with the selected row indices."""

    mode: SelectionMode = SelectionMode.NONE
    selected_index: Optional[int] = None
    indices: set[int] = field(default_factory=set)

    @classmethod
    def none(cls) -> "Selection":
        return cls(SelectionMode.NONE)

    @classmethod
    def single(cls) -> "Selection":
        return cls(SelectionMode.SINGLE)

    @classmethod
    def multiple(cls) -> "Selection":
        return cls(SelectionMode.MULTIPLE)

    def clear(self) -> None:
        """Deselect everything."""
        if self.mode is SelectionMode.SINGLE:
            self.selected_index = None
        elif self.mode is SelectionMode.MULTIPLE:
            self.indices.clear()

    def selected_indices(self) -> frozenset[int]:
        """Return the indices of the selected rows."""
        if self.mode is SelectionMode.SINGLE:
            if self.selected_index is None:
                return frozenset()
            return frozenset({self.selected_index})
        if self.mode is SelectionMode.MULTIPLE:
            return frozenset(self.indices)
        return frozenset()


@dataclass(frozen=True)
class ChangeEvent(Generic[Row]):
    """A row was edited."""

    row_index: int
    changed_row: Row


@dataclass(frozen=True)
class SelectionChangeEvent(Generic[Row]):
    """A row was selected or deselected."""

    selected: bool
    row_index: int
    row: Row


@dataclass(frozen=True)
class TableHeadEvent:
    """A head cell was clicked."""

    index: int
    meta_pressed: bool = False
    shift_pressed: bool = False