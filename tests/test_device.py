from __future__ import annotations

import pytest

from conftest import device, make_campaign
from core.n2_2_flatten import build_device_fact
from core.n3_3_device import aggregate_devices, build_device_view, compare_devices


def test_unknown_devices_are_dropped():
    campaigns = [
        make_campaign(
            1,
            device_performance=[
                device("Mobile", impressions=100, clicks=10),
                device("Tablet", impressions=50, clicks=5),
            ],
        )
    ]

    devices = aggregate_devices(build_device_fact(campaigns))

    assert devices["device"].tolist() == ["Mobile"]
    assert devices.loc[0, "total_clicks"] == 10


def test_labels_are_trimmed_but_case_sensitive():
    campaigns = [
        make_campaign(
            1,
            device_performance=[
                device("  Desktop ", impressions=10, clicks=1),
                device("mobile", impressions=10, clicks=1),
            ],
        )
    ]

    devices = aggregate_devices(build_device_fact(campaigns))

    assert devices["device"].tolist() == ["Desktop"]


def test_totals_and_percent_rates(campaigns):
    devices = aggregate_devices(build_device_fact(campaigns)).set_index("device")

    mobile = devices.loc["Mobile"]
    assert mobile["total_impressions"] == 2500
    assert mobile["total_clicks"] == 125
    assert mobile["total_conversions"] == 11
    assert mobile["total_spend"] == pytest.approx(850.0)
    assert mobile["total_revenue"] == pytest.approx(3000.0)
    assert mobile["average_ctr"] == pytest.approx(5.0)
    assert mobile["average_conversion_rate"] == pytest.approx(8.8)


def test_mobile_listed_before_desktop(campaigns):
    devices = aggregate_devices(build_device_fact(campaigns))

    assert devices["device"].tolist() == ["Mobile", "Desktop"]


def test_rates_rounded_to_two_decimals():
    campaigns = [make_campaign(1, device_performance=[device("Desktop", impressions=3, clicks=1, conversions=1)])]

    devices = aggregate_devices(build_device_fact(campaigns))

    assert devices.loc[0, "average_ctr"] == pytest.approx(33.33)
    assert devices.loc[0, "average_conversion_rate"] == pytest.approx(100.0)


def test_all_zero_device_is_omitted():
    campaigns = [
        make_campaign(
            1,
            device_performance=[
                device("Mobile", spend=10.0, revenue=20.0),
                device("Desktop", impressions=10),
            ],
        )
    ]

    devices = aggregate_devices(build_device_fact(campaigns))

    assert devices["device"].tolist() == ["Desktop"]


def test_comparison_metrics(campaigns):
    view = build_device_view(campaigns)
    cmp = view.comparison

    assert view.is_complete
    assert cmp.revenue_delta == pytest.approx(1400.0)
    assert cmp.delta_pct == pytest.approx(1400.0 / 1600.0 * 100)
    assert cmp.mobile_revenue_share == pytest.approx(3000.0 / 4600.0 * 100)
    assert cmp.leader == "Mobile"
    assert cmp.mobile_converts_better is False


def test_zero_desktop_revenue_uses_unit_base():
    campaigns = [
        make_campaign(
            1,
            device_performance=[
                device("Mobile", impressions=10, revenue=50.0),
                device("Desktop", impressions=10, revenue=0.0),
            ],
        )
    ]

    cmp = build_device_view(campaigns).comparison

    assert cmp.delta_pct == pytest.approx(5000.0)
    assert cmp.mobile_revenue_share == pytest.approx(100.0)


def test_zero_combined_revenue_share_is_zero():
    campaigns = [
        make_campaign(
            1,
            device_performance=[device("Mobile", impressions=10), device("Desktop", impressions=10)],
        )
    ]

    cmp = build_device_view(campaigns).comparison

    assert cmp.mobile_revenue_share == 0
    assert cmp.leader == "Desktop"


def test_missing_device_gives_incomplete_view():
    campaigns = [make_campaign(1, device_performance=[device("Mobile", impressions=100, clicks=10)])]

    view = build_device_view(campaigns)

    assert not view.is_complete
    assert view.missing_devices == ["Desktop"]
    assert view.comparison is None
    assert view.chart_rows == []


def test_compare_devices_returns_none_when_incomplete():
    campaigns = [make_campaign(1, device_performance=[device("Desktop", impressions=1)])]

    assert compare_devices(aggregate_devices(build_device_fact(campaigns))) is None


def test_chart_rows(campaigns):
    rows = build_device_view(campaigns).chart_rows

    assert [r["metric"] for r in rows] == ["Revenue", "Conversions", "Total Spend"]
    assert rows[0] == {"metric": "Revenue", "Mobile": 3000.0, "Desktop": 1600.0}


def test_empty_campaign_list():
    view = build_device_view([])

    assert view.devices.empty
    assert view.missing_devices == ["Mobile", "Desktop"]
    assert view.comparison is None
