from __future__ import annotations
from typing import Dict

import pandas as pd


def group_by_store(records: pd.DataFrame) -> Dict[str, pd.DataFrame]:
    """store -> its records, keeping the input (date ascending) order."""
    if records.empty:
        return {}
    return {
        store: frame.reset_index(drop=True)
        for store, frame in records.groupby("store", sort=False)
    }
