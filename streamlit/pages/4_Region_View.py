from __future__ import annotations

import pandas as pd
import streamlit as st

from core.n2_1_api_ingestion import load_dashboard_data
from core.n3_4_regional import build_region_view
from core.n4_1_presentation import format_money, format_roas

st.set_page_config(
    page_title="Regional Performance",
    layout="wide",
)

st.title("🗺 Regional Performance")
st.caption("Revenue and spend by mapped region")

# ========================================
# LOAD DATA
# ========================================
@st.cache_data(show_spinner=False)
def compute_view(campaigns):
    return build_region_view(campaigns)


with st.spinner("Loading regional data..."):
    campaigns, error = load_dashboard_data()

if error:
    st.error(f"Error loading data: {error}")

view = compute_view(campaigns)

# ========================================
# KPI STRIP
# ========================================
c1, c2, c3, c4 = st.columns(4)

c1.metric("Total Revenue", format_money(view.total_revenue, 0))
c2.metric("Total Spend", format_money(view.total_spend, 0))
c3.metric("Average ROAS", format_roas(view.average_roas))
c4.metric("Top Region", view.top_region)

st.divider()

# ========================================
# BUBBLE MAPS
# ========================================
if not view.revenue_map:
    st.info("No mapped regional data available.")
    st.stop()


def render_bubbles(title: str, points: list) -> None:
    st.subheader(title)

    df = pd.DataFrame(points)
    peak = df["value"].max() or 1
    # bubble radius in meters, scaled to the largest value
    df["size"] = 20_000 + 180_000 * df["value"] / peak

    st.map(df, latitude="latitude", longitude="longitude", size="size", color="color")


left, right = st.columns(2)

with left:
    render_bubbles("Revenue by Region (Bubble Size = Revenue)", view.revenue_map)

with right:
    render_bubbles("Spend by Region (Bubble Size = Spend)", view.spend_map)

st.subheader("Region Detail")
st.dataframe(
    view.regions.drop(columns=["region_key"]),
    use_container_width=True,
    hide_index=True,
)
