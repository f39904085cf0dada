# notebook 4- 1- presentation adapters

"""
Chart / table contracts consumed by the dashboard widgets.

Line points   {label, value, tooltip_label}
Bar points    {label, value, color}
Bubble points {region, country, value, color, latitude, longitude}
Table rows    display strings + raw "_sort_*" numeric keys
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

SPEND_COLOR = "#f87171"
REVENUE_COLOR = "#4ade80"


# ==================================================
# Formatters
# ==================================================
def format_int(value: float) -> str:
    """1234.0 -> '1,234'"""
    return f"{value:,.0f}"


def format_money(value: float, decimals: int = 2) -> str:
    """1234.5 -> '$1,234.50' ; negatives keep the sign in front."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_pct(fraction: float, decimals: int = 2) -> str:
    """0.1234 -> '12.34%'"""
    return f"{fraction * 100:.{decimals}f}%"


def format_roas(value: float) -> str:
    """2.5 -> '2.50x'"""
    return f"{value:.2f}x"


def format_compact(value: float) -> str:
    """Compact notation, 1 decimal max: 1234 -> '1.2K', 2500000 -> '2.5M'"""
    abs_value = abs(value)

    for threshold, suffix in ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K")):
        if abs_value >= threshold:
            scaled = f"{value / threshold:.1f}".rstrip("0").rstrip(".")
            return f"{scaled}{suffix}"

    return f"{value:.1f}".rstrip("0").rstrip(".")


# ==================================================
# Point builders
# ==================================================
def line_points(
        df: pd.DataFrame,
        value_col: str,
        series_name: str,
) -> List[Dict[str, Any]]:
    """
    Weekly time series. Label is MM-DD of week_start; tooltip names the
    full week range.
    """
    return [
        {
            "label": str(row["week_start"])[5:],
            "value": float(row[value_col]),
            "tooltip_label": f"{series_name} ({row['week_start']} to {row['week_end']})",
        }
        for _, row in df.iterrows()
    ]


def bar_points(
        series: pd.Series,
        color: str,
) -> List[Dict[str, Any]]:
    """Categorical bars from an index -> value series (order kept)."""
    return [
        {"label": str(label), "value": float(value), "color": color}
        for label, value in series.items()
    ]


def bubble_points(
        df: pd.DataFrame,
        value_col: str,
) -> List[Dict[str, Any]]:
    """Geo bubbles; df must already carry latitude / longitude / color."""
    return [
        {
            "region": row["region"],
            "country": row["country"],
            "value": float(row[value_col]),
            "color": row["color"],
            "latitude": float(row["latitude"]),
            "longitude": float(row["longitude"]),
        }
        for _, row in df.iterrows()
    ]


# ==================================================
# Sortable table rows
# ==================================================
COUNT_COLS = ["impressions", "clicks", "conversions"]
RATE_COLS = ["ctr", "conversion_rate"]


def sortable_rows(
        df: pd.DataFrame,
        label_col: str,
        count_cols: Optional[List[str]] = None,
        rate_cols: Optional[List[str]] = None,
) -> List[Dict[str, Any]]:
    """
    Table rows with display strings and raw numeric sort keys.

    {"age_group": "18-24", "clicks": "1,234", "_sort_clicks": 1234.0,
     "ctr": "2.50%", "_sort_ctr": 0.025, ...}
    """
    count_cols = COUNT_COLS if count_cols is None else count_cols
    rate_cols = RATE_COLS if rate_cols is None else rate_cols

    rows: List[Dict[str, Any]] = []

    for _, r in df.iterrows():
        row: Dict[str, Any] = {label_col: r[label_col]}

        for col in count_cols:
            row[col] = format_int(r[col])
            row[f"_sort_{col}"] = float(r[col])

        for col in rate_cols:
            row[col] = format_pct(r[col])
            row[f"_sort_{col}"] = float(r[col])

        rows.append(row)

    return rows
