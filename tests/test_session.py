from datetime import date

import pandas as pd
import pytest

from core.context import FilterState
from core.errors import FetchError
from core.load import SAMPLE_CSV, load_sample
from services.session import FETCH_FAILED_MSG, DashboardSession, build_snapshot

OTHER_CSV = "date,store,sales,adspend,orders,roi\n2025-08-01,Pop Up,500,100,5,\n"


class StubFetcher:
    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def session():
    s = DashboardSession(fetcher=StubFetcher(body=OTHER_CSV))
    assert s.load_sample()
    return s


def test_new_session_is_empty():
    snap = DashboardSession().snapshot
    assert snap.records.empty
    assert snap.kpis["total_sales"] == 0
    assert snap.store_totals.empty
    assert snap.daily_summary.empty
    assert snap.by_store == {}
    assert snap.stores == ()


def test_sample_load_builds_every_view(session):
    snap = session.snapshot
    assert len(snap.records) == 6
    assert len(snap.filtered) == 6
    assert snap.stores == ("Magic Box", "Tee-Pop")
    assert snap.kpis["total_sales"] == 83700
    assert snap.store_totals["store"].tolist() == ["Tee-Pop", "Magic Box"]
    assert len(snap.daily_summary) == 3
    assert set(snap.by_store) == {"Magic Box", "Tee-Pop"}


def test_toggle_store_replaces_snapshot(session):
    before = session.snapshot
    session.toggle_store("Magic Box")
    after = session.snapshot
    assert after is not before
    assert before.filters.stores == frozenset()
    assert after.filters.stores == frozenset({"Magic Box"})
    assert after.kpis["total_sales"] == 36800
    assert list(after.by_store) == ["Magic Box"]
    # store catalogue still lists every store
    assert after.stores == ("Magic Box", "Tee-Pop")

    session.toggle_store("Magic Box")
    assert session.snapshot.kpis["total_sales"] == 83700


def test_date_range_and_clear(session):
    session.toggle_store("Tee-Pop")
    session.set_date_range(date(2025, 7, 26), date(2025, 7, 26))
    snap = session.snapshot
    assert snap.filtered["date_key"].tolist() == ["2025-07-26"]
    assert snap.kpis["total_sales"] == 12000
    assert snap.daily_summary["change_pct"].tolist() == [None]

    session.clear_filters()
    assert session.snapshot.filters == FilterState()
    assert len(session.snapshot.filtered) == 6


def test_refresh_replaces_records_and_keeps_filters(session):
    session.set_date_range(date(2025, 7, 1), None)
    assert session.refresh_from_url("https://example.com/pub?output=csv")
    snap = session.snapshot
    assert snap.stores == ("Pop Up",)
    assert snap.filters.date_from == date(2025, 7, 1)
    assert snap.kpis["roi"] == pytest.approx(5.0)
    assert session.last_error is None


def test_failed_fetch_keeps_previous_records():
    fetcher = StubFetcher(error=FetchError("boom"))
    session = DashboardSession(fetcher=fetcher)
    session.load_sample()
    records = session.snapshot.records

    assert not session.refresh_from_url("https://example.com/x.csv")
    assert session.snapshot.records is records
    assert session.last_error == FETCH_FAILED_MSG
    assert fetcher.calls == ["https://example.com/x.csv"]


def test_unusable_body_keeps_previous_records():
    session = DashboardSession(fetcher=StubFetcher(body="<html>Sign in</html>"))
    session.load_sample()
    records = session.snapshot.records

    assert not session.refresh_from_url("https://example.com/x.csv")
    assert session.snapshot.records is records
    assert session.last_error == FETCH_FAILED_MSG


def test_body_with_only_bad_rows_empties_the_collection(session):
    assert session.load_text("date,store,sales,adspend,orders,roi\nnope,A,1,1,1,1\n")
    snap = session.snapshot
    assert snap.records.empty
    assert snap.kpis["roi"] == 0
    assert snap.daily_summary.empty


def test_build_snapshot_is_repeatable():
    records = load_sample()
    f = FilterState(stores=frozenset({"Tee-Pop"}))
    a = build_snapshot(records, f)
    b = build_snapshot(records, f)
    pd.testing.assert_frame_equal(a.filtered, b.filtered)
    pd.testing.assert_frame_equal(a.store_totals, b.store_totals)
    pd.testing.assert_frame_equal(a.daily_summary, b.daily_summary)
    assert dict(a.kpis) == dict(b.kpis)
    pd.testing.assert_frame_equal(records, load_sample())


def test_sample_text_matches_bundled_loader():
    s = DashboardSession()
    assert s.load_text(SAMPLE_CSV)
    pd.testing.assert_frame_equal(s.snapshot.records, load_sample())


def test_snapshot_kpis_are_read_only(session):
    kpis = session.snapshot.kpis
    with pytest.raises(TypeError):
        kpis["total_sales"] = 1
    assert session.snapshot.kpis["total_sales"] == 83700
