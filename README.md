# structtable

The bookkeeping behind a virtualized, sortable, selectable data table. It has no
rendering layer and no dependencies. You can use it from any user interface: a
terminal, a web framework or a GUI toolkit.

The package holds four modules:

- `structtable.sorting`: `ColumnSort`, `SortingMode`, `sorting_to_sql`,
  `get_sorting_for_column` and `default_th_sorting_style`.
- `structtable.loaded_rows`: the row cache `LoadedRows`, the per-row `RowState`
  with its `RowStatus`, and `RowReader` for read access.
- `structtable.controls`: `PaginationController`, `DisplayStrategy` and `DisplayKind`,
  `ReloadController`, `Selection` and `SelectionMode`, and the event records
  `ChangeEvent`, `SelectionChangeEvent` and `TableHeadEvent`.
- `structtable.loading`: `compute_load_range`, `split_into_chunks`,
  `update_selection` and `MAX_DISPLAY_ROW_COUNT`.

## Installation

```
pip install structtable
```

## Sorting

The first entry of a sorting list has the highest priority. When you click the
primary column, or a column that is not sorted yet, its order moves through
none, ascending, descending and back to none. When you click a secondary sorted
column, it becomes the primary column and keeps its order.

```python
from structtable.sorting import (
    ColumnSort, SortingMode, default_th_sorting_style,
    get_sorting_for_column, sorting_to_sql,
)

sorting = []
SortingMode.MULTI_COLUMN.update_sorting_from_event(sorting, 0)  # [(0, ASCENDING)]
SortingMode.MULTI_COLUMN.update_sorting_from_event(sorting, 1)  # [(1, ASCENDING), (0, ASCENDING)]
SortingMode.MULTI_COLUMN.update_sorting_from_event(sorting, 1)  # [(1, DESCENDING), (0, ASCENDING)]

columns = ["name", "age"]
sorting_to_sql(sorting, columns.__getitem__)
# 'ORDER BY age DESC, name ASC'

get_sorting_for_column(0, sorting)                    # ColumnSort.ASCENDING
ColumnSort.DESCENDING.as_class()                      # 'sort-desc'
default_th_sorting_style(0, ColumnSort.ASCENDING)
# "--sort-icon: '▲'; --sort-priority: '1';"
```

`SortingMode.SINGLE_COLUMN` keeps only the primary entry.

## The row cache

```python
from structtable.loaded_rows import LoadedRows, RowReader

cache = LoadedRows()
cache.resize(10)
cache.missing_range(range(0, 10))     # range(0, 10)

cache.write_loading(range(0, 5))
cache.missing_range(range(0, 10))     # range(5, 10)

cache.write_loaded(["a", "b", "c"], range(0, 3))
cache.write_error("timeout", range(3, 5))
cache[3]                              # Error(timeout)

reader = RowReader(lookup=cache.__getitem__)
reader.cached_row(1).row              # 'b'
RowReader().cached_row(0)             # Placeholder
```

`missing_range` returns the span from the first to the last placeholder in the
range you give it. If there is no placeholder, it returns `None`. `clear()` sets
every row back to a placeholder and keeps the length.

## Planning what to load

```python
from structtable.loading import compute_load_range, split_into_chunks

compute_load_range(first_visible=100, visible_count=20, row_count=1000,
                   chunk_size=50, paginated=False)
# range(50, 200)

split_into_chunks(range(60, 130), 50)
# [range(50, 100), range(100, 150)]
```

The load range covers two screens above the visible rows and two screens below
them. If the row count is known, the range is clamped to it. If the row count is
unknown and the table is not paginated, the range is limited to
`MAX_DISPLAY_ROW_COUNT` rows. When a chunk size is set, the range is widened to
chunk boundaries.

## Selection

```python
from structtable.controls import Selection
from structtable.loading import update_selection

selection = Selection.multiple()
anchor = update_selection(selection, None, 2, meta_pressed=False, shift_pressed=False)
anchor = update_selection(selection, anchor, 5, meta_pressed=False, shift_pressed=True)
selection.selected_indices()          # frozenset({2, 3, 4, 5})
```

The modifier keys work as follows:

- **Meta (or control):** toggles one row.
- **Shift:** selects the range from the anchor.
- **Plain click:** selects only the clicked row.

A `Selection.single()` selection toggles the one selected row. A
`Selection.none()` selection ignores clicks.

## Pagination and reloads

```python
from structtable.controls import DisplayStrategy, ReloadController

strategy = DisplayStrategy.pagination(25)
strategy.set_row_count(110)
strategy.controller.page_count()      # 5
strategy.controller.next()            # current_page == 1

reloads = ReloadController()
unsubscribe = reloads.subscribe(lambda: print("reload"))
reloads.reload()
unsubscribe()
```

## What this package does not do

The package has no data-source interface and no table object that fetches rows
for you. Your own code fetches the rows and wires the pieces together:

- It calls `compute_load_range` and `LoadedRows.missing_range` to find the rows to request.
- It calls `split_into_chunks` to split that request into chunks.
- It writes the results back with `write_loaded` or `write_error`.

The package also does not render anything.

## Running the tests

```
pip install -e ".[test]"
pytest
```