import pandas as pd

RENAME_MAP = {
    "date": "Date",
    "date_key": "Date",
    "store": "Store",
    "sales": "Sales",
    "adspend": "Ad Spend",
    "orders": "Orders",
    "roi": "ROI",
    "change_pct": "+/- %",
    "profit_pct": "Profit %",
    "profit": "Net Profit",
}

def nice_headers(df: pd.DataFrame) -> pd.DataFrame:
    return df.rename(columns={k: v for k, v in RENAME_MAP.items() if k in df.columns})
