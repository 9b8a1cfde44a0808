from __future__ import annotations
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from core.context import FilterState


def _bound(d: Optional[date]) -> Optional[pd.Timestamp]:
    return None if d is None else pd.Timestamp(d).normalize()


def filter_records(
    records: pd.DataFrame,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    stores: Iterable[str] = (),
) -> pd.DataFrame:
    """
    Inclusive date range plus store membership.
    An empty store set keeps every store. Input order is preserved.
    """
    mask = pd.Series(True, index=records.index)
    lo, hi = _bound(date_from), _bound(date_to)
    if lo is not None:
        mask &= records["date"] >= lo
    if hi is not None:
        mask &= records["date"] <= hi

    store_set = set(stores)
    if store_set:
        mask &= records["store"].isin(store_set)

    return records[mask].reset_index(drop=True)


def apply_filters(records: pd.DataFrame, f: FilterState) -> pd.DataFrame:
    return filter_records(records, f.date_from, f.date_to, f.stores)


def list_stores(records: pd.DataFrame) -> List[str]:
    """Distinct stores in first-appearance order."""
    if records.empty:
        return []
    return list(pd.unique(records["store"]))


def displayed_stores(all_stores: List[str], f: FilterState) -> List[str]:
    if not f.stores:
        return list(all_stores)
    shown = [s for s in all_stores if s in f.stores]
    # selected stores absent from the current catalogue still get a section
    shown += sorted(s for s in f.stores if s not in all_stores)
    return shown
