from datetime import date

import pandas as pd
import pytest

from core.context import FilterState
from features.selection import apply_filters, displayed_stores, filter_records, list_stores


def test_no_filters_returns_everything(sample_records):
    out = filter_records(sample_records)
    pd.testing.assert_frame_equal(out, sample_records)


def test_empty_store_set_means_all_stores(sample_records):
    out = filter_records(sample_records, date_from=date(2025, 7, 26), stores=set())
    assert len(out) == 4
    assert set(out["store"]) == {"Magic Box", "Tee-Pop"}


def test_single_day_range(sample_records):
    out = filter_records(sample_records, date(2025, 7, 26), date(2025, 7, 26))
    assert out["date_key"].tolist() == ["2025-07-26", "2025-07-26"]


def test_bounds_are_inclusive(sample_records):
    out = filter_records(sample_records, date(2025, 7, 25), date(2025, 7, 26))
    assert sorted(set(out["date_key"])) == ["2025-07-25", "2025-07-26"]


def test_store_filter(sample_records):
    out = filter_records(sample_records, stores={"Tee-Pop"})
    assert out["store"].unique().tolist() == ["Tee-Pop"]
    assert out["date"].is_monotonic_increasing


def test_unknown_store_gives_empty_view(sample_records):
    assert filter_records(sample_records, stores={"Nope"}).empty


@pytest.mark.parametrize("f", [
    FilterState(),
    FilterState(date_from=date(2025, 7, 26)),
    FilterState(date_to=date(2025, 7, 26), stores=frozenset({"Magic Box"})),
])
def test_filter_is_idempotent(sample_records, f):
    once = apply_filters(sample_records, f)
    twice = apply_filters(once, f)
    pd.testing.assert_frame_equal(once, twice)


def test_filter_does_not_mutate_input(sample_records):
    before = sample_records.copy()
    filter_records(sample_records, date(2025, 7, 26), stores={"Tee-Pop"})
    pd.testing.assert_frame_equal(sample_records, before)


def test_list_stores_first_appearance(sample_records):
    assert list_stores(sample_records) == ["Magic Box", "Tee-Pop"]
    assert list_stores(sample_records.iloc[0:0]) == []


def test_displayed_stores():
    stores = ["Magic Box", "Tee-Pop"]
    assert displayed_stores(stores, FilterState()) == stores
    assert displayed_stores(stores, FilterState(stores=frozenset({"Tee-Pop"}))) == ["Tee-Pop"]


# -------- FilterState --------

def test_toggle_store_returns_new_state():
    f = FilterState()
    g = f.toggle_store("A")
    assert f.stores == frozenset()
    assert g.stores == frozenset({"A"})
    assert g.toggle_store("A").stores == frozenset()


def test_with_dates_and_cleared():
    f = FilterState(stores=frozenset({"A"})).with_dates(date(2025, 7, 25), None)
    assert f.date_from == date(2025, 7, 25)
    assert f.date_to is None
    assert f.stores == frozenset({"A"})
    assert f.cleared() == FilterState()
