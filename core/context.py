from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class FilterState:
    """Active filters. An empty store set means every store."""
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    stores: FrozenSet[str] = field(default_factory=frozenset)

    def toggle_store(self, store: str) -> "FilterState":
        stores = set(self.stores)
        if store in stores:
            stores.discard(store)
        else:
            stores.add(store)
        return replace(self, stores=frozenset(stores))

    def with_dates(self, date_from: Optional[date], date_to: Optional[date]) -> "FilterState":
        return replace(self, date_from=date_from, date_to=date_to)

    def cleared(self) -> "FilterState":
        return FilterState()


@dataclass(frozen=True, eq=False)
class DashboardSnapshot:
    records: pd.DataFrame
    filters: FilterState
    filtered: pd.DataFrame
    kpis: Mapping[str, float]
    store_totals: pd.DataFrame
    daily_summary: pd.DataFrame
    by_store: Dict[str, pd.DataFrame]
    stores: Tuple[str, ...]
