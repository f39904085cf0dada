# notebook 3- 4- regional aggregation

# ========================================================
# MARK: REGIONS — region x country with geo enrichment
# ========================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import pandas as pd

from core.n1_2_geo import is_unmapped, lookup
from core.n2_2_flatten import METRIC_COLS, build_regional_fact
from core.n3_0_metrics import ALL_RATES, add_rate_columns
from core.n4_1_presentation import bubble_points

logger = logging.getLogger(__name__)

GEO_COLS = ["latitude", "longitude", "color"]
REGIONAL_AGG_COLS = ["region_key", "region", "country"] + METRIC_COLS + ALL_RATES + GEO_COLS

NO_TOP_REGION = "N/A"


@dataclass
class RegionView:
    regions: pd.DataFrame
    total_revenue: float = 0.0
    total_spend: float = 0.0
    average_roas: float = 0.0
    top_region: str = NO_TOP_REGION
    revenue_map: List[Dict[str, Any]] = field(default_factory=list)
    spend_map: List[Dict[str, Any]] = field(default_factory=list)


def region_key(region: Any, country: Any) -> str:
    """Plain concatenation; distinct pairs can in principle collide."""
    return f"{region}-{country}"


def aggregate_regions(regional_df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per region-country key, enriched with coordinates.

    - region / country / geo come from the first record seen for the key
      (the lookup is not repeated for later records)
    - all five rates from summed totals
    - keys that resolve to exactly (0, 0) are dropped
    - sorted by revenue descending; ties keep first-seen order
    """
    if regional_df.empty:
        return pd.DataFrame(columns=REGIONAL_AGG_COLS)

    df = regional_df.copy()
    df["region_key"] = [region_key(r, c) for r, c in zip(df["region"], df["country"])]

    # identity from the first row of each key; groupby first() would skip nulls
    first_rows = df.drop_duplicates("region_key", keep="first").set_index("region_key")

    df_agg = (
        df
        .groupby("region_key", sort=False)[METRIC_COLS]
        .sum()
    )
    df_agg["region"] = first_rows["region"]
    df_agg["country"] = first_rows["country"]
    df_agg = df_agg.reset_index()

    # ----------------------------------
    # Geo enrichment (first encounter)
    # ----------------------------------
    positions = [lookup(r) for r in df_agg["region"]]
    df_agg["latitude"] = [p.lat for p in positions]
    df_agg["longitude"] = [p.lon for p in positions]
    df_agg["color"] = [p.color for p in positions]

    df_agg = add_rate_columns(df_agg, ALL_RATES)

    unmapped = pd.Series(
        [is_unmapped(lat, lon) for lat, lon in zip(df_agg["latitude"], df_agg["longitude"])],
        index=df_agg.index,
        dtype=bool,
    )
    if unmapped.any():
        logger.debug(
            "Dropping unmapped regions: %s",
            df_agg.loc[unmapped, "region_key"].tolist(),
        )
    df_agg = df_agg.loc[~unmapped]

    df_agg = (
        df_agg
        .sort_values("revenue", ascending=False, kind="mergesort")
        .reset_index(drop=True)
    )

    return df_agg[REGIONAL_AGG_COLS]


def build_region_view(campaigns: Sequence[Dict[str, Any]]) -> RegionView:
    """
    Regional totals and bubble-map data.

    average_roas is the plain mean of per-region ROAS values (mean of
    ratios), unlike every other rate in the dashboard.
    """
    regions = aggregate_regions(build_regional_fact(campaigns))

    if regions.empty:
        return RegionView(regions=regions)

    return RegionView(
        regions=regions,
        total_revenue=float(regions["revenue"].sum()),
        total_spend=float(regions["spend"].sum()),
        average_roas=float(regions["roas"].mean()),
        top_region=str(regions.iloc[0]["region"]),
        revenue_map=bubble_points(regions, "revenue"),
        spend_map=bubble_points(regions, "spend"),
    )
