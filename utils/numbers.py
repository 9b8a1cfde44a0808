from __future__ import annotations
import numpy as np
import pandas as pd


def safe_ratio(num, den) -> np.ndarray:
    """num / den element-wise, 0 wherever den is not strictly positive."""
    num = np.asarray(num, dtype=float)
    den = np.asarray(den, dtype=float)
    out = np.zeros(np.broadcast(num, den).shape, dtype=float)
    np.divide(num, den, out=out, where=den > 0)
    return out


def ratio(num: float, den: float) -> float:
    return float(num) / float(den) if den > 0 else 0.0


def to_number(col: pd.Series) -> pd.Series:
    """Float coercion; anything unparsable or infinite becomes 0."""
    num = pd.to_numeric(col, errors="coerce").replace([np.inf, -np.inf], np.nan)
    return num.fillna(0.0).astype(float)
