from __future__ import annotations
import io
import logging
from typing import Iterable, Mapping, Union

import numpy as np
import pandas as pd

from core.errors import IngestError
from utils.numbers import safe_ratio, to_number

logger = logging.getLogger(__name__)

RAW_COLUMNS = ["date", "store", "sales", "adspend", "orders", "roi"]
RECORD_COLUMNS = ["date", "date_key", "store", "sales", "adspend", "orders", "roi"]

# Bundled dataset shown before any refresh
SAMPLE_CSV = """date,store,sales,adspend,orders,roi
2025-07-25,Magic Box,12500,4000,78,3.12
2025-07-26,Magic Box,9800,3500,60,2.8
2025-07-27,Magic Box,14500,4200,90,3.45
2025-07-25,Tee-Pop,16700,5000,88,3.34
2025-07-26,Tee-Pop,12000,3700,70,3.24
2025-07-27,Tee-Pop,18200,5200,95,3.5"""

RawRows = Union[pd.DataFrame, Iterable[Mapping[str, object]]]


def empty_records() -> pd.DataFrame:
    """Normalized collection with no rows (keeps the column dtypes)."""
    return pd.DataFrame({
        "date": pd.Series(dtype="datetime64[ns]"),
        "date_key": pd.Series(dtype=object),
        "store": pd.Series(dtype=object),
        "sales": pd.Series(dtype=float),
        "adspend": pd.Series(dtype=float),
        "orders": pd.Series(dtype=float),
        "roi": pd.Series(dtype=float),
    })


def _parse_date(token: str):
    # relative words ("today", "now") would make parsing depend on the clock
    if not token or not any(ch.isdigit() for ch in token):
        return pd.NaT
    try:
        ts = pd.Timestamp(token)
    except (ValueError, TypeError, OverflowError):
        return pd.NaT
    if pd.isna(ts):
        return pd.NaT
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    if not (pd.Timestamp.min <= ts <= pd.Timestamp.max):
        return pd.NaT
    return ts.normalize()


def _as_text(df: pd.DataFrame, col: str) -> pd.Series:
    if col not in df.columns:
        return pd.Series([""] * len(df), index=df.index, dtype=object)
    return df[col].fillna("").astype(str).str.strip()


def parse_rows(rows: RawRows) -> pd.DataFrame:
    """
    Raw text rows -> normalized performance records.

    - sales/adspend/orders/roi: float, 0 when empty or not numeric.
    - roi: the supplied value when non-zero, else sales/adspend when
      adspend > 0, else 0. A supplied roi of 0 is recomputed.
    - Rows whose date does not parse are dropped.
    - Result is sorted by date (stable, ties keep input order).
    """
    raw = rows if isinstance(rows, pd.DataFrame) else pd.DataFrame(list(rows))
    if raw.empty:
        return empty_records()

    date_key = _as_text(raw, "date")
    sales = to_number(_as_text(raw, "sales"))
    adspend = to_number(_as_text(raw, "adspend"))
    orders = to_number(_as_text(raw, "orders"))
    roi_given = pd.to_numeric(_as_text(raw, "roi"), errors="coerce").replace([np.inf, -np.inf], np.nan)

    derived = safe_ratio(sales, adspend)
    supplied = roi_given.notna() & (roi_given != 0)
    roi = np.where(supplied, roi_given.fillna(0.0), derived)

    out = pd.DataFrame({
        "date": pd.to_datetime(date_key.map(_parse_date)),
        "date_key": date_key,
        "store": _as_text(raw, "store"),
        "sales": sales,
        "adspend": adspend,
        "orders": orders,
        "roi": roi.astype(float),
    })

    valid = out["date"].notna()
    dropped = int((~valid).sum())
    if dropped:
        logger.debug("Dropped %d row(s) with an unparsable date", dropped)

    out = out[valid].sort_values("date", kind="stable").reset_index(drop=True)
    return out[RECORD_COLUMNS]


def read_csv_text(text: str) -> pd.DataFrame:
    """
    Tokenizes delimited text (header row, blank lines skipped) into raw string rows.
    Raises IngestError when the body cannot be used at all.
    """
    if text is None or not str(text).strip():
        raise IngestError("CSV body is empty")
    body = str(text).lstrip("\ufeff")

    try:
        header = pd.read_csv(io.StringIO(body), nrows=0)
        width = len(header.columns)
        raw = pd.read_csv(
            io.StringIO(body),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            index_col=False,
            # rows with extra fields keep their leading columns
            on_bad_lines=lambda fields: fields[:width],
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise IngestError(f"Could not read CSV: {e}") from e

    raw.columns = [str(c).strip() for c in raw.columns]
    if "date" not in raw.columns:
        raise IngestError("CSV has no 'date' column")
    missing = [c for c in RAW_COLUMNS if c not in raw.columns]
    if missing:
        logger.debug("CSV lacks column(s) %s, treated as empty", missing)
    return raw


def load_csv_text(text: str) -> pd.DataFrame:
    raw = read_csv_text(text)
    records = parse_rows(raw)
    logger.info("Parsed %d CSV row(s), kept %d record(s)", len(raw), len(records))
    return records


def load_sample() -> pd.DataFrame:
    return load_csv_text(SAMPLE_CSV)
