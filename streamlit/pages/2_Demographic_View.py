from __future__ import annotations

import pandas as pd
import streamlit as st

from core.n2_1_api_ingestion import load_dashboard_data
from core.n3_2_demographic import build_demographic_view
from core.n4_1_presentation import REVENUE_COLOR, SPEND_COLOR, format_int, format_money

st.set_page_config(
    page_title="Demographic Performance",
    layout="wide",
)

st.title("🧑‍🤝‍🧑 Demographic Performance")
st.caption("Spend and revenue are allocated to each audience by its share of the campaign")

# ========================================
# LOAD DATA
# ========================================
@st.cache_data(show_spinner=False)
def compute_view(campaigns):
    return build_demographic_view(campaigns)


with st.spinner("Loading demographic data..."):
    campaigns, error = load_dashboard_data()

if error:
    st.error(f"Error loading data: {error}")

view = compute_view(campaigns)

# ========================================
# GENDER CARDS
# ========================================
st.subheader("Gender Performance Summary")

cols = st.columns(6)

for offset, (gender, totals) in enumerate(
    [("Male", view.male_totals), ("Female", view.female_totals)]
):
    base = offset * 3
    cols[base].metric(f"Clicks ({gender})", format_int(totals.total_clicks))
    cols[base + 1].metric(f"Spend ({gender})", format_money(totals.total_spend))
    cols[base + 2].metric(f"Revenue ({gender})", format_money(totals.total_revenue))

st.divider()

# ========================================
# AGE GROUP BARS
# ========================================
st.subheader("Financial Metrics by Age Group")

left, right = st.columns(2)

with left:
    st.caption("Total Spend by Age Group")
    if view.spend_chart:
        st.bar_chart(
            pd.DataFrame(view.spend_chart).set_index("label")["value"],
            color=SPEND_COLOR,
        )

with right:
    st.caption("Total Revenue by Age Group")
    if view.revenue_chart:
        st.bar_chart(
            pd.DataFrame(view.revenue_chart).set_index("label")["value"],
            color=REVENUE_COLOR,
        )

st.divider()

# ========================================
# SORTABLE TABLES (default: conversion rate desc)
# ========================================
st.subheader("Detailed Performance by Age & Gender")

DISPLAY_COLS = ["age_group", "impressions", "clicks", "conversions", "ctr", "conversion_rate"]


def render_table(title: str, rows: list, empty_message: str) -> None:
    st.caption(title)

    if not rows:
        st.info(empty_message)
        return

    table = (
        pd.DataFrame(rows)
        .sort_values("_sort_conversion_rate", ascending=False, kind="mergesort")
    )
    st.dataframe(table[DISPLAY_COLS], use_container_width=True, hide_index=True)


left, right = st.columns(2)

with left:
    render_table(
        "Campaign Performance (Male Age Groups)",
        view.male_table,
        "No male demographic data available.",
    )

with right:
    render_table(
        "Campaign Performance (Female Age Groups)",
        view.female_table,
        "No female demographic data available.",
    )
