# notebook 3- 5- all views

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Sequence

from core.n3_1_weekly import WeeklyView, build_weekly_view
from core.n3_2_demographic import DemographicView, build_demographic_view
from core.n3_3_device import DeviceView, build_device_view
from core.n3_4_regional import RegionView, build_region_view

logger = logging.getLogger(__name__)


@dataclass
class DashboardViews:
    weekly: WeeklyView
    demographic: DemographicView
    device: DeviceView
    region: RegionView

    def summary(self) -> Dict[str, Any]:
        """Headline numbers of every view, JSON-serializable."""
        comparison = self.device.comparison

        return {
            "weekly": {
                "weeks": len(self.weekly.weekly),
                "total_revenue": self.weekly.total_revenue,
                "total_spend": self.weekly.total_spend,
                "avg_conversion_rate": self.weekly.avg_conversion_rate,
            },
            "demographic": {
                "groups": len(self.demographic.groups),
                "male": asdict(self.demographic.male_totals),
                "female": asdict(self.demographic.female_totals),
            },
            "device": {
                "devices": self.device.devices["device"].tolist(),
                "missing_devices": list(self.device.missing_devices),
                "comparison": asdict(comparison) if comparison is not None else None,
            },
            "region": {
                "regions": len(self.region.regions),
                "total_revenue": self.region.total_revenue,
                "total_spend": self.region.total_spend,
                "average_roas": self.region.average_roas,
                "top_region": self.region.top_region,
            },
        }


def build_dashboard(campaigns: Sequence[Dict[str, Any]]) -> DashboardViews:
    """Run the four aggregations over one campaign list."""
    logger.info("Building dashboard views for %s campaigns", len(campaigns))

    return DashboardViews(
        weekly=build_weekly_view(campaigns),
        demographic=build_demographic_view(campaigns),
        device=build_device_view(campaigns),
        region=build_region_view(campaigns),
    )
