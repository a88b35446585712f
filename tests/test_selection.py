"""Tests for the selection modes."""

from slices.filter import FilterSet
from slices.selection import SelectAll, SelectMatching, selection_for


def test_empty_filter_set_selects_all():
    selection = selection_for(FilterSet())
    assert isinstance(selection, SelectAll)
    assert all(selection.selects(p) for p in range(1, 100))


def test_non_empty_filter_set_selects_matching():
    filters = FilterSet.parse(["2", "5:6"])
    selection = selection_for(filters)

    assert isinstance(selection, SelectMatching)
    assert selection.filters is filters
    assert [p for p in range(1, 10) if selection.selects(p)] == [2, 5, 6]


def test_full_range_filter_is_not_select_all():
    # ':' selects everything too, but through the filter set.
    selection = selection_for(FilterSet.parse([":"]))
    assert isinstance(selection, SelectMatching)
    assert all(selection.selects(p) for p in range(1, 100))
