"""Shared pytest fixtures for the test suite."""

import pandas as pd
import pytest

from core.load import RECORD_COLUMNS, load_sample


@pytest.fixture
def sample_records():
    """The bundled six-row dataset, normalized."""
    return load_sample()


@pytest.fixture
def make_records():
    """Builds a normalized frame directly, in the given row order (no sorting)."""
    def _make(rows):
        frame = pd.DataFrame(
            [
                {
                    "date": pd.Timestamp(r["date"]),
                    "date_key": r["date"],
                    "store": r.get("store", "A"),
                    "sales": float(r.get("sales", 0)),
                    "adspend": float(r.get("adspend", 0)),
                    "orders": float(r.get("orders", 0)),
                    "roi": float(r.get("roi", 0)),
                }
                for r in rows
            ],
            columns=RECORD_COLUMNS,
        )
        return frame
    return _make
