# notebook 3- 3- device aggregation

# ========================================================
# MARK: DEVICES — Mobile vs Desktop
# ========================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from core.n1_1_cleaning import KEY_DEVICES, normalize_device
from core.n2_2_flatten import ENGAGEMENT_COLS, METRIC_COLS, build_device_fact
from core.n3_0_metrics import safe_ratio, to_percent

logger = logging.getLogger(__name__)

DEVICE_AGG_COLS = [
    "device",
    "total_impressions",
    "total_clicks",
    "total_conversions",
    "total_spend",
    "total_revenue",
    "average_ctr",
    "average_conversion_rate",
]


@dataclass
class DeviceComparison:
    mobile_revenue: float
    desktop_revenue: float
    revenue_delta: float
    delta_pct: float
    mobile_revenue_share: float
    leader: str
    mobile_conversion_rate: float
    desktop_conversion_rate: float

    @property
    def mobile_converts_better(self) -> bool:
        return self.mobile_conversion_rate > self.desktop_conversion_rate


@dataclass
class DeviceView:
    devices: pd.DataFrame
    comparison: Optional[DeviceComparison] = None
    missing_devices: List[str] = field(default_factory=list)
    chart_rows: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing_devices


def aggregate_devices(device_df: pd.DataFrame) -> pd.DataFrame:
    """
    Totals per key device (Mobile first, then Desktop).

    - labels are matched exactly after trimming; anything else is dropped
    - a device with zero impressions, clicks AND conversions is omitted
    - ctr / conversion rate are percentages rounded to 2 decimals
    - spend / revenue rounded to 2 decimals
    """
    if device_df.empty:
        return pd.DataFrame(columns=DEVICE_AGG_COLS)

    df = device_df.copy()
    df["device"] = df["device"].map(normalize_device)

    dropped = df["device"].isna()
    if dropped.any():
        logger.debug(
            "Dropping %s device rows with unrecognized labels: %s",
            int(dropped.sum()),
            sorted(set(device_df.loc[dropped, "device"].astype(str))),
        )
    df = df[~dropped]

    totals = (
        df
        .groupby("device")[METRIC_COLS]
        .sum()
        .reindex(list(KEY_DEVICES), fill_value=0)
    )

    # drop devices with no engagement at all
    totals = totals[(totals[ENGAGEMENT_COLS] > 0).any(axis=1)]

    rows = []
    for device, t in totals.iterrows():
        rows.append({
            "device": device,
            "total_impressions": t["impressions"],
            "total_clicks": t["clicks"],
            "total_conversions": t["conversions"],
            "total_spend": round(float(t["spend"]), 2),
            "total_revenue": round(float(t["revenue"]), 2),
            "average_ctr": to_percent(safe_ratio(t["clicks"], t["impressions"])),
            "average_conversion_rate": to_percent(safe_ratio(t["conversions"], t["clicks"])),
        })

    return pd.DataFrame(rows, columns=DEVICE_AGG_COLS)


def compare_devices(devices: pd.DataFrame) -> Optional[DeviceComparison]:
    """
    Mobile vs Desktop revenue comparison.

    None when either device is absent; the caller shows a warning instead.
    A zero Desktop revenue is replaced by 1 as the delta_pct base.
    """
    by_device = devices.set_index("device")

    if not set(KEY_DEVICES).issubset(by_device.index):
        return None

    mobile = by_device.loc["Mobile"]
    desktop = by_device.loc["Desktop"]

    mobile_revenue = float(mobile["total_revenue"])
    desktop_revenue = float(desktop["total_revenue"])

    delta = mobile_revenue - desktop_revenue
    base = desktop_revenue if desktop_revenue != 0 else 1.0

    return DeviceComparison(
        mobile_revenue=mobile_revenue,
        desktop_revenue=desktop_revenue,
        revenue_delta=delta,
        delta_pct=abs(delta) / base * 100,
        mobile_revenue_share=safe_ratio(mobile_revenue, mobile_revenue + desktop_revenue) * 100,
        leader="Mobile" if mobile_revenue > desktop_revenue else "Desktop",
        mobile_conversion_rate=float(mobile["average_conversion_rate"]),
        desktop_conversion_rate=float(desktop["average_conversion_rate"]),
    )


def device_chart_rows(devices: pd.DataFrame) -> List[Dict[str, Any]]:
    """Grouped-bar rows: one per metric, one column per device."""
    by_device = devices.set_index("device")

    metrics = [
        ("Revenue", "total_revenue"),
        ("Conversions", "total_conversions"),
        ("Total Spend", "total_spend"),
    ]

    return [
        {"metric": label, **{d: float(by_device.at[d, col]) for d in by_device.index}}
        for label, col in metrics
    ]


def build_device_view(campaigns: Sequence[Dict[str, Any]]) -> DeviceView:
    devices = aggregate_devices(build_device_fact(campaigns))

    present = set(devices["device"])
    missing = [d for d in KEY_DEVICES if d not in present]

    if missing:
        return DeviceView(devices=devices, missing_devices=missing)

    return DeviceView(
        devices=devices,
        comparison=compare_devices(devices),
        chart_rows=device_chart_rows(devices),
    )
