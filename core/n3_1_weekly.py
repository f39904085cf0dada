# notebook 3- 1- weekly aggregation

# ========================================================
# MARK: WEEKLY TIMELINE — aggregate by week_start
# ========================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import pandas as pd

from core.n2_2_flatten import METRIC_COLS, build_weekly_fact
from core.n3_0_metrics import ENGAGEMENT_RATES, add_rate_columns, safe_ratio
from core.n4_1_presentation import line_points

WEEKLY_AGG_COLS = ["week_start", "week_end"] + METRIC_COLS + ENGAGEMENT_RATES


@dataclass
class WeeklyView:
    weekly: pd.DataFrame
    total_revenue: float = 0.0
    total_spend: float = 0.0
    avg_conversion_rate: float = 0.0
    revenue_chart: List[Dict[str, Any]] = field(default_factory=list)
    spend_chart: List[Dict[str, Any]] = field(default_factory=list)


def aggregate_weekly(weekly_df: pd.DataFrame) -> pd.DataFrame:
    """
    Aggregate the weekly fact table into one row per week_start.

    - sum metrics across campaigns (same week_start collides -> summed)
    - keep the first-seen week_end verbatim
    - recompute ctr / conversion_rate from the totals
    - sort ascending by parsed week_start (unparseable last)
    """
    if weekly_df.empty:
        return pd.DataFrame(columns=WEEKLY_AGG_COLS)

    df_agg = (
        weekly_df
        .groupby("week_start", sort=False, dropna=False)[METRIC_COLS]
        .sum()
        .reset_index()
    )

    # week_end of the first record per week, nulls included
    first_seen = weekly_df.drop_duplicates("week_start", keep="first")
    df_agg = df_agg.merge(
        first_seen[["week_start", "week_end"]],
        on="week_start",
        how="left",
        sort=False,
    )

    df_agg = add_rate_columns(df_agg, ENGAGEMENT_RATES)

    # ----------------------------------
    # Chronological order (stable)
    # ----------------------------------
    # per-value parsing: mixed date formats
    parsed = pd.to_datetime(df_agg["week_start"], errors="coerce", format="mixed")
    df_agg = (
        df_agg
        .assign(_parsed=parsed)
        .sort_values("_parsed", kind="mergesort", na_position="last")
        .drop(columns="_parsed")
        .reset_index(drop=True)
    )

    return df_agg[WEEKLY_AGG_COLS]


def build_weekly_view(campaigns: Sequence[Dict[str, Any]]) -> WeeklyView:
    """Weekly totals + line-chart series. Empty input -> all zero."""
    weekly = aggregate_weekly(build_weekly_fact(campaigns))

    if weekly.empty:
        return WeeklyView(weekly=weekly)

    total_clicks = float(weekly["clicks"].sum())
    total_conversions = float(weekly["conversions"].sum())

    return WeeklyView(
        weekly=weekly,
        total_revenue=float(weekly["revenue"].sum()),
        total_spend=float(weekly["spend"].sum()),
        # ratio of sums, not a mean of weekly rates
        avg_conversion_rate=safe_ratio(total_conversions, total_clicks),
        revenue_chart=line_points(weekly, "revenue", "Revenue"),
        spend_chart=line_points(weekly, "spend", "Spend"),
    )
