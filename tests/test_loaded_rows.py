import pytest

from structtable.loaded_rows import LoadedRows, RowReader, RowState, RowStatus


def statuses(cache, rows_range=None):
    if rows_range is None:
        rows_range = range(len(cache))
    return [state.status for state in cache[rows_range]]


def test_new_cache_is_empty():
    assert len(LoadedRows()) == 0


def test_resize_fills_with_placeholders_and_truncates():
    cache = LoadedRows()
    cache.resize(4)
    assert statuses(cache) == [RowStatus.PLACEHOLDER] * 4
    cache.resize(2)
    assert len(cache) == 2


def test_write_loading_grows_cache():
    cache = LoadedRows()
    cache.write_loading(range(2, 5))
    assert len(cache) == 5
    assert statuses(cache) == [RowStatus.PLACEHOLDER] * 2 + [RowStatus.LOADING] * 3


def test_write_loaded_stores_rows():
    cache = LoadedRows()
    cache.resize(3)
    cache.write_loaded(["a", "b"], range(1, 3))
    assert cache[0].status is RowStatus.PLACEHOLDER
    assert cache[1] == RowState.loaded("a")
    assert cache[2].row == "b"


def test_write_loaded_with_fewer_rows_than_range():
    cache = LoadedRows()
    cache.write_loading(range(0, 4))
    cache.write_loaded(["x"], range(0, 4))
    assert statuses(cache) == [RowStatus.LOADED] + [RowStatus.LOADING] * 3


def test_write_error_is_clamped_to_length():
    cache = LoadedRows()
    cache.resize(3)
    cache.write_error("boom", range(1, 10))
    assert len(cache) == 3
    assert cache[1] == RowState.failed("boom")
    assert cache[2].error == "boom"
    assert cache[0].status is RowStatus.PLACEHOLDER


def test_write_error_outside_cache_does_nothing():
    cache = LoadedRows()
    cache.resize(2)
    cache.write_error("boom", range(5, 8))
    assert statuses(cache) == [RowStatus.PLACEHOLDER] * 2


def test_missing_range_spans_first_to_last_placeholder():
    cache = LoadedRows()
    cache.resize(6)
    cache.write_loaded(["a"], range(0, 1))
    cache.write_loading(range(2, 3))
    cache.write_loaded(["b"], range(5, 6))
    assert cache.missing_range(range(0, 6)) == range(1, 5)


def test_missing_range_none_when_nothing_missing():
    cache = LoadedRows()
    cache.write_loading(range(0, 3))
    assert cache.missing_range(range(0, 3)) is None


def test_missing_range_out_of_bounds():
    cache = LoadedRows()
    cache.resize(2)
    with pytest.raises(IndexError):
        cache.missing_range(range(0, 3))


def test_clear_keeps_length():
    cache = LoadedRows()
    cache.write_loaded(["a", "b"], range(0, 2))
    cache.clear()
    assert statuses(cache) == [RowStatus.PLACEHOLDER] * 2
    assert cache.missing_range(range(0, 2)) == range(0, 2)


def test_row_state_repr():
    assert repr(RowState.failed("bad")) == "Error(bad)"
    assert repr(RowState.loading()) == "Loading"


def test_row_reader_default_is_placeholder():
    assert RowReader().cached_row(42) == RowState.placeholder()


def test_row_reader_reads_cache():
    cache = LoadedRows()
    cache.write_loaded(["row"], range(0, 1))
    reader = RowReader(lookup=cache.__getitem__)
    assert reader.cached_row(0) == RowState.loaded("row")
    with pytest.raises(IndexError):
        reader.cached_row(1)