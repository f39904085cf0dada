# notebook 2- 2-flatten nested campaigns into fact tables

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import pandas as pd

from core.n1_1_cleaning import clean_label, coerce_metric_columns, to_number

METRIC_COLS = ["impressions", "clicks", "conversions", "spend", "revenue"]
ENGAGEMENT_COLS = ["impressions", "clicks", "conversions"]

# Parent identity carried on every fact row
CAMPAIGN_COLS = ["campaign_pos", "campaign_id", "campaign_name"]

WEEKLY_COLS = CAMPAIGN_COLS + ["week_start", "week_end"] + METRIC_COLS
DEMOGRAPHIC_COLS = CAMPAIGN_COLS + [
    "campaign_spend",
    "campaign_revenue",
    "gender",
    "age_group",
    "percentage_of_audience",
] + ENGAGEMENT_COLS
DEVICE_COLS = CAMPAIGN_COLS + ["device"] + METRIC_COLS
REGIONAL_COLS = CAMPAIGN_COLS + ["region", "country"] + METRIC_COLS

RECORD_KEYS = (
    "weekly_performance",
    "demographic_breakdown",
    "device_performance",
    "regional_performance",
)


# ----------------------------------
# Internal: schema guards
# ----------------------------------
def _campaign(campaign: Any, pos: int) -> Dict[str, Any]:
    if not isinstance(campaign, dict):
        raise ValueError(
            f"❌ campaigns[{pos}] is not an object (got {type(campaign).__name__})"
        )
    return campaign


def _records(campaign: Dict[str, Any], key: str, pos: int) -> List[Dict[str, Any]]:
    """
    Sub-record collection of a campaign.

    Missing / null -> [] ; present but not a list -> ValueError.
    """
    value = campaign.get(key)

    if value is None:
        return []

    if not isinstance(value, list):
        raise ValueError(f"❌ campaigns[{pos}].{key} is not an array")

    for i, item in enumerate(value):
        if not isinstance(item, dict):
            raise ValueError(f"❌ campaigns[{pos}].{key}[{i}] is not an object")

    return value


def validate_campaigns(campaigns: Sequence[Any]) -> None:
    """Run the schema guards over every campaign and sub-record collection."""
    for pos, raw in enumerate(campaigns):
        campaign = _campaign(raw, pos)
        for key in RECORD_KEYS:
            _records(campaign, key, pos)


def _parent(campaign: Dict[str, Any], pos: int) -> Dict[str, Any]:
    return {
        "campaign_pos": pos,
        "campaign_id": campaign.get("id"),
        "campaign_name": campaign.get("name"),
    }


def _frame(rows: List[Dict[str, Any]], cols: List[str], numeric: List[str]) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=cols)
    return coerce_metric_columns(df, numeric)


# ==================================================
# Fact table builders
# ==================================================
def build_weekly_fact(campaigns: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    """One row per (campaign, weekly record)."""
    rows: List[Dict[str, Any]] = []

    for pos, raw in enumerate(campaigns):
        campaign = _campaign(raw, pos)
        parent = _parent(campaign, pos)

        for week in _records(campaign, "weekly_performance", pos):
            rows.append({
                **parent,
                "week_start": week.get("week_start"),
                "week_end": week.get("week_end"),
                **{m: week.get(m) for m in METRIC_COLS},
            })

    return _frame(rows, WEEKLY_COLS, METRIC_COLS)


def build_demographic_fact(campaigns: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    """
    One row per (campaign, demographic record).

    Engagement counts come from record["performance"]; the parent campaign
    spend / revenue ride along for redistribution.
    """
    rows: List[Dict[str, Any]] = []

    for pos, raw in enumerate(campaigns):
        campaign = _campaign(raw, pos)
        parent = _parent(campaign, pos)
        campaign_spend = to_number(campaign.get("spend"))
        campaign_revenue = to_number(campaign.get("revenue"))

        for demo in _records(campaign, "demographic_breakdown", pos):
            perf = demo.get("performance") or {}
            rows.append({
                **parent,
                "campaign_spend": campaign_spend,
                "campaign_revenue": campaign_revenue,
                "gender": clean_label(demo.get("gender")),
                "age_group": clean_label(demo.get("age_group")),
                "percentage_of_audience": demo.get("percentage_of_audience"),
                **{m: perf.get(m) for m in ENGAGEMENT_COLS},
            })

    return _frame(
        rows,
        DEMOGRAPHIC_COLS,
        ["campaign_spend", "campaign_revenue", "percentage_of_audience"] + ENGAGEMENT_COLS,
    )


def build_device_fact(campaigns: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    """One row per (campaign, device record). Device labels are trimmed, not filtered."""
    rows: List[Dict[str, Any]] = []

    for pos, raw in enumerate(campaigns):
        campaign = _campaign(raw, pos)
        parent = _parent(campaign, pos)

        for dev in _records(campaign, "device_performance", pos):
            rows.append({
                **parent,
                "device": clean_label(dev.get("device")),
                **{m: dev.get(m) for m in METRIC_COLS},
            })

    return _frame(rows, DEVICE_COLS, METRIC_COLS)


def build_regional_fact(campaigns: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    """One row per (campaign, regional record)."""
    rows: List[Dict[str, Any]] = []

    for pos, raw in enumerate(campaigns):
        campaign = _campaign(raw, pos)
        parent = _parent(campaign, pos)

        for reg in _records(campaign, "regional_performance", pos):
            rows.append({
                **parent,
                "region": reg.get("region"),
                "country": reg.get("country"),
                **{m: reg.get(m) for m in METRIC_COLS},
            })

    return _frame(rows, REGIONAL_COLS, METRIC_COLS)
