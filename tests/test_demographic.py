from __future__ import annotations

import pytest

from conftest import demo, make_campaign
from core.n2_2_flatten import build_demographic_fact
from core.n3_2_demographic import (
    age_group_financials,
    aggregate_demographics,
    build_demographic_view,
    redistribute_financials,
)


def test_spend_split_by_audience_share():
    campaigns = [
        make_campaign(
            1,
            spend=200,
            revenue=1000,
            demographic_breakdown=[demo("Male", "18-24", 30), demo("Female", "18-24", 70)],
        )
    ]

    df = redistribute_financials(build_demographic_fact(campaigns))

    assert df["spend"].tolist() == pytest.approx([60.0, 140.0])
    assert df["revenue"].tolist() == pytest.approx([300.0, 700.0])


def test_redistributed_spend_sums_to_campaign_spend(campaigns):
    df = redistribute_financials(build_demographic_fact(campaigns))

    per_campaign = df.groupby("campaign_id")["spend"].sum()
    assert per_campaign[101] == pytest.approx(1000.0)
    assert per_campaign[102] == pytest.approx(500.0)


def test_percentages_not_summing_to_100_are_normalized():
    campaigns = [
        make_campaign(
            1,
            spend=90,
            demographic_breakdown=[demo("Male", "18-24", 10), demo("Male", "25-34", 20)],
        )
    ]

    df = redistribute_financials(build_demographic_fact(campaigns))

    assert df["spend"].tolist() == pytest.approx([30.0, 60.0])


def test_zero_audience_total_contributes_no_financials():
    campaigns = [
        make_campaign(
            1,
            spend=500,
            revenue=900,
            demographic_breakdown=[
                demo("Male", "18-24", 0, impressions=100, clicks=10, conversions=1),
                demo("Female", "18-24", 0, impressions=50, clicks=5, conversions=0),
            ],
        )
    ]

    groups = aggregate_demographics(build_demographic_fact(campaigns))

    assert groups["spend"].tolist() == [0, 0]
    assert groups["revenue"].tolist() == [0, 0]
    assert groups["impressions"].tolist() == [100, 50]
    assert groups["clicks"].tolist() == [10, 5]


def test_missing_percentage_is_treated_as_zero():
    record = demo("Male", "18-24", None, impressions=10)
    campaigns = [make_campaign(1, spend=100, demographic_breakdown=[record])]

    groups = aggregate_demographics(build_demographic_fact(campaigns))

    assert groups.loc[0, "spend"] == 0
    assert groups.loc[0, "impressions"] == 10


def test_groups_keyed_by_gender_and_age(campaigns):
    groups = aggregate_demographics(build_demographic_fact(campaigns))

    keys = list(zip(groups["gender"], groups["age_group"]))
    assert keys == [("Male", "25-34"), ("Female", "18-24"), ("Female", "25-34")]

    male = groups.iloc[0]
    assert male["impressions"] == 1500
    assert male["clicks"] == 75
    # 60% of 1000 + 50% of 500
    assert male["spend"] == pytest.approx(850.0)
    assert male["revenue"] == pytest.approx(2400.0 + 500.0)
    assert male["ctr"] == pytest.approx(75 / 1500)
    assert male["conversion_rate"] == pytest.approx(7 / 75)


def test_gender_totals(campaigns):
    view = build_demographic_view(campaigns)

    assert view.male_totals.total_clicks == 75
    assert view.male_totals.total_spend == pytest.approx(850.0)
    assert view.female_totals.total_clicks == 50
    assert view.female_totals.total_spend == pytest.approx(400.0 + 250.0)
    assert view.female_totals.total_revenue == pytest.approx(1600.0 + 500.0)


def test_age_chart_sorted_by_leading_integer(campaigns):
    view = build_demographic_view(campaigns)

    assert [p["label"] for p in view.spend_chart] == ["18-24", "25-34"]
    assert view.spend_chart[0]["value"] == pytest.approx(400.0)
    assert view.spend_chart[1]["value"] == pytest.approx(1100.0)
    assert view.spend_chart[0]["color"] == "#f87171"
    assert view.revenue_chart[1]["color"] == "#4ade80"


def test_malformed_age_labels_sort_last_in_first_seen_order():
    campaigns = [
        make_campaign(
            1,
            spend=100,
            demographic_breakdown=[
                demo("Male", "Unknown", 10),
                demo("Male", "65+", 10),
                demo("Male", "n/a", 10),
                demo("Male", "18-24", 10),
            ],
        )
    ]

    groups = aggregate_demographics(build_demographic_fact(campaigns))
    by_age = age_group_financials(groups)

    assert by_age.index.tolist() == ["18-24", "65+", "Unknown", "n/a"]


def test_table_rows_carry_display_and_sort_keys(campaigns):
    view = build_demographic_view(campaigns)

    row = view.male_table[0]
    assert row["age_group"] == "25-34"
    assert row["impressions"] == "1,500"
    assert row["_sort_impressions"] == 1500
    assert row["ctr"] == "5.00%"
    assert row["_sort_ctr"] == pytest.approx(0.05)
    assert row["conversion_rate"] == "9.33%"


def test_empty_campaign_list():
    view = build_demographic_view([])

    assert view.groups.empty
    assert view.male_totals.total_spend == 0
    assert view.female_totals.total_clicks == 0
    assert view.spend_chart == []
    assert view.male_table == []
