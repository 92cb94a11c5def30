"""Column sort orders, sorting updates from header clicks and helpers built on them."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, MutableSequence
from typing import Optional

SortEntry = tuple[int, "ColumnSort"]


class ColumnSort(enum.Enum):
    """Type of sorting of a column."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    NONE = "none"

    def as_class(self) -> str:
        """Return the default CSS class name for this sort order."""
        if self is ColumnSort.ASCENDING:
            return "sort-asc"
        if self is ColumnSort.DESCENDING:
            return "sort-desc"
        return ""

    def as_sql(self) -> Optional[str]:
        """Return ``"ASC"`` or ``"DESC"``, or ``None`` when unsorted."""
        if self is ColumnSort.ASCENDING:
            return "ASC"
        if self is ColumnSort.DESCENDING:
            return "DESC"
        return None

    def cycled(self) -> "ColumnSort":
        """The next order when a header is clicked: none, ascending, descending, none."""
        return _CYCLE[self]


_CYCLE = {
    ColumnSort.NONE: ColumnSort.ASCENDING,
    ColumnSort.ASCENDING: ColumnSort.DESCENDING,
    ColumnSort.DESCENDING: ColumnSort.NONE,
}


class SortingMode(enum.Enum):
    """Whether a table sorts by one column or by several ordered by priority."""

    SINGLE_COLUMN = "single_column"
    MULTI_COLUMN = "multi_column"

    @classmethod
    def default(cls) -> "SortingMode":
        return cls.MULTI_COLUMN

    def update_sorting_from_event(
        self, sorting: MutableSequence[SortEntry], column_index: int
    ) -> None:
        """Update ``sorting`` in place after the header of ``column_index`` was clicked.

        The first entry has the highest priority. Clicking the primary column, or a
        column that is not sorted, cycles its order; clicking a secondary sorted column
        promotes it to primary with its order unchanged.
        """
        position, sort = next(
            (
                (pos, col_sort)
                for pos, (col, col_sort) in enumerate(sorting)
                if col == column_index
            ),
            (0, ColumnSort.NONE),
        )

        if position == 0 or sort is ColumnSort.NONE:
            sort = sort.cycled()

        remaining = [
            (col, col_sort)
            for col, col_sort in sorting
            if col != column_index and col_sort is not ColumnSort.NONE
        ]
        if sort is not ColumnSort.NONE:
            remaining.insert(0, (column_index, sort))
        if self is SortingMode.SINGLE_COLUMN:
            remaining = remaining[:1]

        sorting.clear()
        sorting.extend(remaining)


def sorting_to_sql(
    sorting: Iterable[SortEntry], col_name: Callable[[int], str]
) -> Optional[str]:
    """Build an ``ORDER BY`` clause, or return ``None`` when nothing is sorted.

    ``col_name`` maps a column index to the column's name.
    """
    parts = [
        f"{col_name(col)} {order}"
        for col, col_sort in sorting
        if (order := col_sort.as_sql()) is not None
    ]
    if not parts:
        return None
    return "ORDER BY " + ", ".join(parts)


def get_sorting_for_column(col_index: int, sorting: Iterable[SortEntry]) -> ColumnSort:
    """Return the sort order of a column, ``ColumnSort.NONE`` if it is not sorted."""
    return next(
        (col_sort for col, col_sort in sorting if col == col_index), ColumnSort.NONE
    )


def default_th_sorting_style(
    sort_priority: Optional[int], sort_direction: ColumnSort
) -> str:
    """Return the inline style carrying the sort icon and the 1-based sort priority."""
    icons = {
        ColumnSort.ASCENDING: "--sort-icon: '▲';",
        ColumnSort.DESCENDING: "--sort-icon: '▼';",
        ColumnSort.NONE: "--sort-icon: '';",
    }
    if sort_priority is None:
        priority = "--sort-priority: '';"
    else:
        priority = f"--sort-priority: '{sort_priority + 1}';"
    return f"{icons[sort_direction]} {priority}"