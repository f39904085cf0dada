from __future__ import annotations

import streamlit as st

from core.n2_1_api_ingestion import load_dashboard_data
from core.n3_5_dashboard import build_dashboard
from core.n4_1_presentation import format_money, format_pct, format_roas

st.set_page_config(
    page_title="Overview",
    layout="wide",
)

st.title("🏠 Overview")
st.caption("Headline metrics across every view")

# ========================================
# LOAD DATA (one fetch per page view)
# ========================================
@st.cache_data(show_spinner=False)
def compute_views(campaigns):
    return build_dashboard(campaigns)


with st.spinner("Loading campaign data..."):
    campaigns, error = load_dashboard_data()

if error:
    st.error(f"Error loading data: {error}")

views = compute_views(campaigns)

# ========================================
# KPI STRIP
# ========================================
c1, c2, c3, c4 = st.columns(4)

c1.metric("Campaigns", f"{len(campaigns):,}")
c2.metric("Total Revenue (weekly)", format_money(views.weekly.total_revenue))
c3.metric("Avg Conversion Rate", format_pct(views.weekly.avg_conversion_rate))
c4.metric("Top Region", views.region.top_region)

st.divider()

d1, d2, d3 = st.columns(3)

d1.metric("Total Spend (weekly)", format_money(views.weekly.total_spend))
d2.metric("Average ROAS (regions)", format_roas(views.region.average_roas))

if views.device.comparison is not None:
    d3.metric(
        "Mobile Revenue Share",
        f"{views.device.comparison.mobile_revenue_share:.1f}%",
    )
else:
    d3.metric("Mobile Revenue Share", "N/A")

st.caption("Open a view from the sidebar for the full breakdown.")
