"""Cache of row loading states and read access to it."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union, overload

T = TypeVar("T")


class RowStatus(enum.Enum):
    PLACEHOLDER = "placeholder"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class RowState(Generic[T]):
    """The cached state of one row: placeholder, loading, loaded or failed."""

    status: RowStatus
    row: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def placeholder(cls) -> "RowState[Any]":
        return cls(RowStatus.PLACEHOLDER)

    @classmethod
    def loading(cls) -> "RowState[Any]":
        return cls(RowStatus.LOADING)

    @classmethod
    def loaded(cls, row: T) -> "RowState[T]":
        return cls(RowStatus.LOADED, row=row)

    @classmethod
    def failed(cls, error: str) -> "RowState[Any]":
        return cls(RowStatus.ERROR, error=error)

    def __repr__(self) -> str:
        if self.status is RowStatus.ERROR:
            return f"Error({self.error})"
        return self.status.value.capitalize()


_PLACEHOLDER: RowState[Any] = RowState.placeholder()
_LOADING: RowState[Any] = RowState.loading()


def _check_range(rows_range: range, length: int) -> None:
    if rows_range.start < 0 or rows_range.start > rows_range.stop or rows_range.stop > length:
        raise IndexError(f"range {rows_range} out of bounds for length {length}")


class LoadedRows(Generic[T]):
    """Tracks which rows are loaded, which are loading and which are missing."""

    def __init__(self) -> None:
        self._rows: list[RowState[T]] = []

    def __len__(self) -> int:
        return len(self._rows)

    @overload
    def __getitem__(self, index: int) -> RowState[T]: ...

    @overload
    def __getitem__(self, index: Union[slice, range]) -> list[RowState[T]]: ...

    def __getitem__(self, index):
        if isinstance(index, range):
            _check_range(index, len(self._rows))
            return self._rows[index.start : index.stop]
        return self._rows[index]

    def resize(self, length: int) -> None:
        """Truncate or extend with placeholders to ``length`` rows."""
        if length < len(self._rows):
            del self._rows[length:]
        else:
            self._rows.extend([_PLACEHOLDER] * (length - len(self._rows)))

    def write_loading(self, rows_range: range) -> None:
        """Mark the rows of ``rows_range`` as loading, growing the cache if needed."""
        if rows_range.stop > len(self._rows):
            self.resize(rows_range.stop)
        self._rows[rows_range.start : rows_range.stop] = [_LOADING] * len(rows_range)

    def write_loaded(self, rows: Iterable[T], loaded_range: range) -> None:
        """Store rows that were loaded for ``loaded_range``."""
        if loaded_range.stop > len(self._rows):
            self.resize(loaded_range.stop)
        for index, row in zip(loaded_range, rows):
            self._rows[index] = RowState.loaded(row)

    def write_error(self, error: str, missing_range: range) -> None:
        """Mark the rows of ``missing_range`` that exist in the cache as failed."""
        start, stop = missing_range.start, min(missing_range.stop, len(self._rows))
        if start >= stop:
            return
        failed = RowState.failed(error)
        self._rows[start:stop] = [failed] * (stop - start)

    def missing_range(self, rows_range: range) -> Optional[range]:
        """Return the span from the first to the last placeholder within ``rows_range``."""
        _check_range(rows_range, len(self._rows))
        missing = [
            index
            for index in rows_range
            if self._rows[index].status is RowStatus.PLACEHOLDER
        ]
        if not missing:
            return None
        return range(missing[0], missing[-1] + 1)

    def clear(self) -> None:
        """Reset every row to a placeholder, keeping the length."""
        self._rows = [_PLACEHOLDER] * len(self._rows)


@dataclass
class RowReader(Generic[T]):
    """Reads the cached state of rows held by a table."""

    lookup: Optional[Callable[[int], RowState[T]]] = None

    def cached_row(self, index: int) -> RowState[T]:
        """Return the cached state of the row at ``index``; a placeholder when unattached."""
        if self.lookup is None:
            return _PLACEHOLDER
        return self.lookup(index)