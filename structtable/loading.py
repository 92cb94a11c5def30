"""Pure helpers behind table loading: which rows to load, how to chunk them, selection."""

from __future__ import annotations

from typing import Optional

from .controls import Selection, SelectionMode

MAX_DISPLAY_ROW_COUNT = 500


def compute_load_range(
    first_visible: int,
    visible_count: int,
    row_count: Optional[int],
    chunk_size: Optional[int],
    paginated: bool,
) -> Optional[range]:
    """Return the range of rows to keep loaded around the visible rows.

    Two screens above and two below the visible rows are loaded as well. The range is
    clamped to ``row_count`` when it is known, and otherwise to at most
    ``MAX_DISPLAY_ROW_COUNT`` rows unless the table is paginated. With a
    ``chunk_size`` it is widened to chunk boundaries. ``None`` means nothing is visible.
    """
    if chunk_size is not None and chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    visible_count = min(visible_count, MAX_DISPLAY_ROW_COUNT)
    if visible_count <= 0:
        return None

    start = max(first_visible - visible_count * 2, 0)
    end = start + visible_count * 5

    if row_count is not None:
        end = min(end, row_count)
        start = min(start, end)
    elif not paginated:
        end = min(end, start + MAX_DISPLAY_ROW_COUNT)

    if chunk_size is not None:
        start = start // chunk_size * chunk_size
        end = -(-end // chunk_size) * chunk_size

    return range(start, end)


def split_into_chunks(missing_range: range, chunk_size: Optional[int]) -> list[range]:
    """Split ``missing_range`` into the chunk-aligned ranges that have to be requested.

    Without a ``chunk_size`` the whole range is requested at once.
    """
    if chunk_size is None:
        return [missing_range]
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    chunks: list[range] = []
    start = missing_range.start // chunk_size * chunk_size
    current = range(start, start + chunk_size)
    while current.stop <= missing_range.stop:
        chunks.append(current)
        current = range(current.stop, current.stop + chunk_size)
    if current.stop > missing_range.stop and current.start < missing_range.stop:
        chunks.append(current)
    return chunks


def update_selection(
    selection: Selection,
    first_selected_index: Optional[int],
    index: int,
    meta_pressed: bool,
    shift_pressed: bool,
) -> Optional[int]:
    """Apply a click on row ``index`` to ``selection`` and return the new anchor index.

    The anchor is the row a shift-click extends a range from. Meta (or control) toggles
    a single row, shift selects the range from the anchor, a plain click selects only
    the clicked row.
    """
    if selection.mode is SelectionMode.SINGLE:
        if selection.selected_index == index:
            selection.selected_index = None
        else:
            selection.selected_index = index
        return first_selected_index

    if selection.mode is not SelectionMode.MULTIPLE:
        return first_selected_index

    indices = selection.indices
    if meta_pressed:
        if index in indices:
            indices.remove(index)
        else:
            indices.add(index)
        if not indices:
            return None
        if len(indices) == 1:
            return index
        return first_selected_index

    if shift_pressed:
        if first_selected_index is not None:
            low, high = sorted((first_selected_index, index))
            indices.update(range(low, high + 1))
            return first_selected_index
        indices.add(index)
        return index

    indices.clear()
    indices.add(index)
    return index