from __future__ import annotations

import copy

import pytest


def make_campaign(cid=1, spend=0.0, revenue=0.0, **sub_records):
    campaign = {
        "id": cid,
        "name": f"Campaign {cid}",
        "spend": spend,
        "revenue": revenue,
        "weekly_performance": [],
        "demographic_breakdown": [],
        "device_performance": [],
        "regional_performance": [],
    }
    campaign.update(sub_records)
    return campaign


def week(start, end, impressions=0, clicks=0, conversions=0, spend=0.0, revenue=0.0):
    return {
        "week_start": start,
        "week_end": end,
        "impressions": impressions,
        "clicks": clicks,
        "conversions": conversions,
        "spend": spend,
        "revenue": revenue,
    }


def demo(gender, age_group, pct, impressions=0, clicks=0, conversions=0):
    return {
        "gender": gender,
        "age_group": age_group,
        "percentage_of_audience": pct,
        "performance": {
            "impressions": impressions,
            "clicks": clicks,
            "conversions": conversions,
        },
    }


def device(name, impressions=0, clicks=0, conversions=0, spend=0.0, revenue=0.0):
    return {
        "device": name,
        "impressions": impressions,
        "clicks": clicks,
        "conversions": conversions,
        "spend": spend,
        "revenue": revenue,
    }


def region(name, country, impressions=0, clicks=0, conversions=0, spend=0.0, revenue=0.0):
    return {
        "region": name,
        "country": country,
        "impressions": impressions,
        "clicks": clicks,
        "conversions": conversions,
        "spend": spend,
        "revenue": revenue,
    }


SAMPLE_CAMPAIGNS = [
    make_campaign(
        cid=101,
        spend=1000.0,
        revenue=4000.0,
        weekly_performance=[
            week("2024-01-08", "2024-01-14", 2000, 100, 10, 300.0, 1200.0),
            week("2024-01-01", "2024-01-07", 1000, 50, 5, 200.0, 800.0),
        ],
        demographic_breakdown=[
            demo("Male", "25-34", 60, 1200, 60, 6),
            demo("Female", "18-24", 40, 800, 40, 4),
        ],
        device_performance=[
            device("Mobile", 2000, 100, 10, 600.0, 2400.0),
            device("Desktop", 1000, 50, 5, 400.0, 1600.0),
        ],
        regional_performance=[
            region("Dubai", "UAE", 1500, 75, 8, 500.0, 2500.0),
            region("London", "UK", 1500, 75, 7, 500.0, 1500.0),
        ],
    ),
    make_campaign(
        cid=102,
        spend=500.0,
        revenue=1000.0,
        weekly_performance=[
            week("2024-01-01", "2024-01-07", 500, 25, 0, 100.0, 200.0),
        ],
        demographic_breakdown=[
            demo("Male", "25-34", 50, 300, 15, 1),
            demo("Female", "25-34", 50, 200, 10, 0),
        ],
        device_performance=[
            device(" Mobile ", 500, 25, 1, 250.0, 600.0),
            device("Tablet", 100, 5, 0, 50.0, 0.0),
        ],
        regional_performance=[
            region("Dubai", "UAE", 400, 20, 1, 300.0, 600.0),
            region("Atlantis", "Ocean", 100, 5, 0, 200.0, 400.0),
        ],
    ),
]


@pytest.fixture
def campaigns():
    return copy.deepcopy(SAMPLE_CAMPAIGNS)
