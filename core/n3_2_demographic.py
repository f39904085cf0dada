# notebook 3- 2- demographic aggregation

# ========================================================
# MARK: DEMOGRAPHICS — gender x age group with redistributed financials
# ========================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import pandas as pd

from core.n1_1_cleaning import age_group_sort_key
from core.n2_2_flatten import ENGAGEMENT_COLS, build_demographic_fact
from core.n3_0_metrics import ENGAGEMENT_RATES, add_rate_columns, safe_ratio_series
from core.n4_1_presentation import REVENUE_COLOR, SPEND_COLOR, bar_points, sortable_rows

GROUP_COLS = ["gender", "age_group"]
FINANCIAL_COLS = ["spend", "revenue"]
DEMOGRAPHIC_AGG_COLS = GROUP_COLS + ENGAGEMENT_COLS + FINANCIAL_COLS + ENGAGEMENT_RATES

GENDERS = ("Male", "Female")


@dataclass
class GenderTotals:
    total_clicks: float = 0.0
    total_spend: float = 0.0
    total_revenue: float = 0.0


@dataclass
class DemographicView:
    groups: pd.DataFrame
    male: pd.DataFrame
    female: pd.DataFrame
    male_totals: GenderTotals = field(default_factory=GenderTotals)
    female_totals: GenderTotals = field(default_factory=GenderTotals)
    spend_chart: List[Dict[str, Any]] = field(default_factory=list)
    revenue_chart: List[Dict[str, Any]] = field(default_factory=list)
    male_table: List[Dict[str, Any]] = field(default_factory=list)
    female_table: List[Dict[str, Any]] = field(default_factory=list)


# ----------------------------------
# 1. Redistribution
# ----------------------------------
def redistribute_financials(demo_df: pd.DataFrame) -> pd.DataFrame:
    """
    Allocate each campaign's spend / revenue across its demographic rows
    in proportion to percentage_of_audience.

    ratio = pct / sum(pct within the campaign)   (0 if that sum is 0)

    A campaign whose audience percentages sum to 0 contributes no
    financials, even when its engagement counts are non-zero.
    """
    df = demo_df.copy()

    audience_total = (
        df.groupby("campaign_pos")["percentage_of_audience"].transform("sum")
    )
    df["audience_ratio"] = safe_ratio_series(
        df["percentage_of_audience"].astype(float),
        audience_total.astype(float),
    )

    df["spend"] = df["campaign_spend"] * df["audience_ratio"]
    df["revenue"] = df["campaign_revenue"] * df["audience_ratio"]

    return df


# ----------------------------------
# 2. Group by gender x age group
# ----------------------------------
def aggregate_demographics(demo_df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per (gender, age_group) in first-seen order.

    Engagement is summed straight from the records; spend / revenue are
    sums of the redistributed values.
    """
    if demo_df.empty:
        return pd.DataFrame(columns=DEMOGRAPHIC_AGG_COLS)

    df = redistribute_financials(demo_df)

    df_agg = (
        df
        .groupby(GROUP_COLS, sort=False, dropna=False)[ENGAGEMENT_COLS + FINANCIAL_COLS]
        .sum()
        .reset_index()
    )

    df_agg = add_rate_columns(df_agg, ENGAGEMENT_RATES)

    return df_agg[DEMOGRAPHIC_AGG_COLS]


# ----------------------------------
# 3. Derived views
# ----------------------------------
def gender_totals(df: pd.DataFrame) -> GenderTotals:
    if df.empty:
        return GenderTotals()

    return GenderTotals(
        total_clicks=float(df["clicks"].sum()),
        total_spend=float(df["spend"].sum()),
        total_revenue=float(df["revenue"].sum()),
    )


def age_group_financials(groups: pd.DataFrame) -> pd.DataFrame:
    """
    Spend / revenue per age group summed across genders, ordered by the
    leading integer of the label (malformed labels last, first-seen order).
    """
    if groups.empty:
        return pd.DataFrame(columns=FINANCIAL_COLS)

    by_age = groups.groupby("age_group", sort=False)[FINANCIAL_COLS].sum()

    ordered = sorted(by_age.index, key=age_group_sort_key)
    return by_age.loc[ordered]


def build_demographic_view(campaigns: Sequence[Dict[str, Any]]) -> DemographicView:
    groups = aggregate_demographics(build_demographic_fact(campaigns))

    male = groups[groups["gender"] == "Male"].reset_index(drop=True)
    female = groups[groups["gender"] == "Female"].reset_index(drop=True)

    by_age = age_group_financials(groups)

    return DemographicView(
        groups=groups,
        male=male,
        female=female,
        male_totals=gender_totals(male),
        female_totals=gender_totals(female),
        spend_chart=bar_points(by_age["spend"], SPEND_COLOR),
        revenue_chart=bar_points(by_age["revenue"], REVENUE_COLOR),
        male_table=sortable_rows(male, "age_group"),
        female_table=sortable_rows(female, "age_group"),
    )
