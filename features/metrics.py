from __future__ import annotations
from typing import List, Optional

import numpy as np
import pandas as pd

from utils.numbers import ratio, safe_ratio

STORE_TOTAL_COLUMNS = ["store", "sales", "adspend", "orders", "roi"]
DAILY_COLUMNS = ["date", "sales", "adspend", "roi", "profit", "profit_pct", "change_pct"]


def compute_kpis(records: pd.DataFrame) -> dict:
    """Sums plus ROI recomputed from the totals (not a mean of row ROI)."""
    total_sales = float(records["sales"].sum())
    total_adspend = float(records["adspend"].sum())
    total_orders = float(records["orders"].sum())
    return {
        "total_sales": total_sales,
        "total_adspend": total_adspend,
        "total_orders": total_orders,
        "roi": ratio(total_sales, total_adspend),
    }


def compute_store_totals(records: pd.DataFrame) -> pd.DataFrame:
    """Per-store sums, highest sales first; ties keep first-seen order."""
    if records.empty:
        return pd.DataFrame(columns=STORE_TOTAL_COLUMNS)
    totals = (
        records.groupby("store", sort=False)[["sales", "adspend", "orders"]]
        .sum()
        .reset_index()
    )
    totals["roi"] = safe_ratio(totals["sales"], totals["adspend"])
    totals = totals.sort_values("sales", ascending=False, kind="stable")
    return totals[STORE_TOTAL_COLUMNS].reset_index(drop=True)


def _change_pct(sales: np.ndarray) -> List[Optional[float]]:
    out: List[Optional[float]] = []
    prev = None
    for cur in sales:
        if prev is not None and prev > 0:
            out.append(float((cur - prev) / prev * 100))
        else:
            out.append(None)
        prev = cur
    return out


def compute_daily_summary(records: pd.DataFrame) -> pd.DataFrame:
    """
    One row per date key across all stores (orders are not summed here):
      date, sales, adspend, roi, profit, profit_pct, change_pct
    Sorted by date. change_pct compares with the previous row of the sorted
    result and is None on the first row or when the previous sales are 0.
    """
    if records.empty:
        return pd.DataFrame(columns=DAILY_COLUMNS)

    daily = records.groupby("date_key", sort=False).agg(
        sort_date=("date", "first"),
        sales=("sales", "sum"),
        adspend=("adspend", "sum"),
    ).reset_index()
    daily = daily.sort_values("sort_date", kind="stable").reset_index(drop=True)

    daily["roi"] = safe_ratio(daily["sales"], daily["adspend"])
    daily["profit"] = daily["sales"] - daily["adspend"]
    daily["profit_pct"] = safe_ratio(daily["profit"], daily["sales"]) * 100
    daily["change_pct"] = pd.Series(_change_pct(daily["sales"].to_numpy()), dtype=object)

    return daily.rename(columns={"date_key": "date"})[DAILY_COLUMNS]
