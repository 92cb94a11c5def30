import pytest

from structtable.controls import (
    ChangeEvent,
    DisplayKind,
    DisplayStrategy,
    PaginationController,
    ReloadController,
    Selection,
    SelectionChangeEvent,
    SelectionMode,
    TableHeadEvent,
)


def test_pagination_controller_starts_at_first_page():
    controller = PaginationController()
    assert controller.current_page == 0
    assert controller.page_count() is None


def test_next_and_previous():
    controller = PaginationController()
    controller.next()
    controller.next()
    controller.previous()
    assert controller.current_page == 1


def test_previous_saturates_at_zero():
    controller = PaginationController()
    controller.previous()
    assert controller.current_page == 0


def test_default_strategy_is_virtualization():
    assert DisplayStrategy().kind is DisplayKind.VIRTUALIZATION
    assert DisplayStrategy.virtualization() == DisplayStrategy()
    assert not DisplayStrategy.infinite_scroll().is_paginated


def test_pagination_sets_page_count():
    controller = PaginationController()
    strategy = DisplayStrategy.pagination(10, controller)
    assert strategy.is_paginated
    strategy.set_row_count(25)
    assert controller.page_count() == 25 // 10 + 1


def test_pagination_exact_multiple_adds_page():
    controller = PaginationController()
    DisplayStrategy.pagination(10, controller).set_row_count(30)
    assert controller.page_count() == 4


def test_set_row_count_ignored_without_pagination():
    strategy = DisplayStrategy.virtualization()
    strategy.set_row_count(100)
    assert strategy.controller is None


def test_pagination_creates_controller():
    strategy = DisplayStrategy.pagination(5)
    assert strategy.controller.current_page == 0


def test_pagination_rejects_bad_row_count():
    with pytest.raises(ValueError):
        DisplayStrategy.pagination(0)


def test_reload_notifies_subscribers():
    controller = ReloadController()
    calls = []
    controller.subscribe(lambda: calls.append("a"))
    controller.subscribe(lambda: calls.append("b"))
    controller.reload()
    assert calls == ["a", "b"]


def test_unsubscribe_stops_notifications():
    controller = ReloadController()
    calls = []
    unsubscribe = controller.subscribe(lambda: calls.append(1))
    controller.reload()
    unsubscribe()
    controller.reload()
    assert calls == [1]


def test_selection_none_is_always_empty():
    selection = Selection.none()
    selection.indices.add(3)
    assert selection.selected_indices() == frozenset()


def test_single_selection():
    selection = Selection.single()
    assert selection.selected_indices() == frozenset()
    selection.selected_index = 4
    assert selection.selected_indices() == frozenset({4})
    selection.clear()
    assert selection.selected_index is None
    assert selection.selected_indices() == frozenset()


def test_multiple_selection_clear():
    selection = Selection.multiple()
    selection.indices.update({1, 2, 5})
    assert selection.selected_indices() == frozenset({1, 2, 5})
    selection.clear()
    assert selection.selected_indices() == frozenset()
    assert selection.mode is SelectionMode.MULTIPLE


def test_events_hold_their_values():
    change = ChangeEvent(row_index=2, changed_row="row")
    sel = SelectionChangeEvent(selected=True, row_index=2, row="row")
    head = TableHeadEvent(index=1, shift_pressed=True)
    assert (change.row_index, change.changed_row) == (2, "row")
    assert sel.selected is True and sel.row == "row"
    assert head.index == 1 and head.shift_pressed and not head.meta_pressed