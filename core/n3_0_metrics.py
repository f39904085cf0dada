# notebook 3- 0- shared rate helpers

from __future__ import annotations

import numpy as np
import pandas as pd

# (output column, numerator, denominator)
RATE_DEFS = {
    "ctr": ("clicks", "impressions"),
    "conversion_rate": ("conversions", "clicks"),
    "cpc": ("spend", "clicks"),
    "cpa": ("spend", "conversions"),
    "roas": ("revenue", "spend"),
}

ENGAGEMENT_RATES = ["ctr", "conversion_rate"]
ALL_RATES = list(RATE_DEFS)


def safe_ratio(num: float, den: float) -> float:
    """num / den, or 0.0 when den is zero / missing."""
    if den is None or pd.isna(den) or den == 0:
        return 0.0
    return float(num) / float(den)


def safe_ratio_series(num: pd.Series, den: pd.Series) -> pd.Series:
    """Vectorized safe_ratio: zero denominators give 0, never inf / NaN."""
    out = num / den.replace({0: np.nan})
    return out.replace([np.inf, -np.inf], np.nan).fillna(0.0)


def add_rate_columns(df: pd.DataFrame, rates: list[str]) -> pd.DataFrame:
    """
    Recompute rate metrics from summed totals (ratio of sums, never a
    mean of per-row rates).
    """
    df = df.copy()

    for rate in rates:
        num, den = RATE_DEFS[rate]
        df[rate] = safe_ratio_series(df[num].astype(float), df[den].astype(float))

    return df


def to_percent(x: float, ndigits: int = 2) -> float:
    """Fraction -> percent, rounded: 0.12345 -> 12.35"""
    return round(x * 100, ndigits)
