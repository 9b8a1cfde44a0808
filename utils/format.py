from __future__ import annotations
import math
from typing import Optional

import pandas as pd

from core.headers import nice_headers


def format_thb(n: Optional[float]) -> str:
    """Thousands separators, no decimals."""
    if n is None or (isinstance(n, float) and math.isnan(n)):
        return "-"
    return f"{n:,.0f}"


def format_money(n: Optional[float], symbol: str = "฿") -> str:
    text = format_thb(n)
    return text if text == "-" else f"{symbol}{text}"


def format_pct(x: Optional[float]) -> str:
    """Signed percentage; '-' when undefined."""
    if x is None or (isinstance(x, float) and math.isnan(x)):
        return "-"
    return f"{'+' if x >= 0 else ''}{x:.2f}%"


def format_roi(x: Optional[float]) -> str:
    return f"{(x or 0):.2f}x"


def format_orders(n: Optional[float]) -> str:
    return format_thb(n) if n else "-"


# -------- display tables --------

def store_totals_table(totals: pd.DataFrame, symbol: str = "฿", with_orders: bool = False) -> pd.DataFrame:
    cols = ["store", "sales", "adspend", "roi"] + (["orders"] if with_orders else [])
    out = totals[cols].copy()
    out["sales"] = out["sales"].map(lambda v: format_money(v, symbol))
    out["adspend"] = out["adspend"].map(lambda v: format_money(v, symbol))
    out["roi"] = out["roi"].map(format_roi)
    if with_orders:
        out["orders"] = out["orders"].map(format_orders)
    return nice_headers(out)


def daily_summary_table(daily: pd.DataFrame, symbol: str = "฿") -> pd.DataFrame:
    out = daily[["date", "adspend", "sales", "roi", "change_pct", "profit_pct", "profit"]].copy()
    out["adspend"] = out["adspend"].map(lambda v: format_money(v, symbol))
    out["sales"] = out["sales"].map(lambda v: format_money(v, symbol))
    out["roi"] = out["roi"].map(format_roi)
    out["change_pct"] = out["change_pct"].map(format_pct)
    out["profit_pct"] = out["profit_pct"].map(lambda v: f"{(v or 0):.2f}%")
    out["profit"] = out["profit"].map(lambda v: format_money(v, symbol))
    return nice_headers(out)


def store_records_table(records: pd.DataFrame, symbol: str = "฿") -> pd.DataFrame:
    out = records[["date_key", "sales", "adspend", "roi"]].copy()
    out["sales"] = out["sales"].map(lambda v: format_money(v, symbol))
    out["adspend"] = out["adspend"].map(lambda v: format_money(v, symbol))
    out["roi"] = out["roi"].map(format_roi)
    return nice_headers(out)
