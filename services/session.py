# services/session.py
from __future__ import annotations
import logging
from datetime import date
from types import MappingProxyType
from typing import Callable, Optional

import pandas as pd

from core.context import DashboardSnapshot, FilterState
from core.errors import IngestError
from core.load import SAMPLE_CSV, empty_records, load_csv_text
from features.grouping import group_by_store
from features.metrics import compute_daily_summary, compute_kpis, compute_store_totals
from features.selection import apply_filters, list_stores
from services.integrations import fetch_csv_text

logger = logging.getLogger(__name__)

FETCH_FAILED_MSG = "Unable to fetch CSV. Make sure your Google Sheet is published as CSV."


def build_snapshot(records: pd.DataFrame, filters: FilterState) -> DashboardSnapshot:
    """Recomputes every derived view from (records, filters). Pure."""
    filtered = apply_filters(records, filters)
    return DashboardSnapshot(
        records=records,
        filters=filters,
        filtered=filtered,
        kpis=MappingProxyType(compute_kpis(filtered)),
        store_totals=compute_store_totals(filtered),
        daily_summary=compute_daily_summary(filtered),
        by_store=group_by_store(filtered),
        stores=tuple(list_stores(records)),
    )


class DashboardSession:
    """
    Owns the single mutable reference to the current snapshot.
    Each transition builds a new snapshot and swaps it in; nothing is patched.
    """

    def __init__(self, fetcher: Callable[[str], str] = fetch_csv_text):
        self._fetch = fetcher
        self.snapshot = build_snapshot(empty_records(), FilterState())
        self.last_error: Optional[str] = None

    # -------- ingestion --------
    def _replace_records(self, records: pd.DataFrame) -> None:
        self.snapshot = build_snapshot(records, self.snapshot.filters)

    def load_text(self, text: str) -> bool:
        try:
            records = load_csv_text(text)
        except IngestError as e:
            logger.warning("Ingest failed, keeping previous records: %s", e)
            self.last_error = str(e)
            return False
        self.last_error = None
        self._replace_records(records)
        return True

    def load_sample(self) -> bool:
        return self.load_text(SAMPLE_CSV)

    def refresh_from_url(self, url: str) -> bool:
        try:
            text = self._fetch(url)
        except IngestError as e:
            logger.warning("Refresh from %s failed: %s", url, e)
            self.last_error = FETCH_FAILED_MSG
            return False
        if not self.load_text(text):
            self.last_error = FETCH_FAILED_MSG
            return False
        return True

    # -------- filters --------
    def _set_filters(self, filters: FilterState) -> None:
        self.snapshot = build_snapshot(self.snapshot.records, filters)

    def toggle_store(self, store: str) -> None:
        self._set_filters(self.snapshot.filters.toggle_store(store))

    def set_date_range(self, date_from: Optional[date], date_to: Optional[date]) -> None:
        self._set_filters(self.snapshot.filters.with_dates(date_from, date_to))

    def clear_filters(self) -> None:
        self._set_filters(self.snapshot.filters.cleared())
