from __future__ import annotations

import pandas as pd
import streamlit as st

from core.n2_1_api_ingestion import load_dashboard_data
from core.n3_1_weekly import build_weekly_view
from core.n4_1_presentation import REVENUE_COLOR, SPEND_COLOR, format_money, format_pct

st.set_page_config(
    page_title="Weekly Performance",
    layout="wide",
)

st.title("🕒 Weekly Performance")
st.caption("Revenue and spend across all campaigns, week by week")

# ========================================
# LOAD DATA
# ========================================
@st.cache_data(show_spinner=False)
def compute_view(campaigns):
    return build_weekly_view(campaigns)


with st.spinner("Loading weekly data..."):
    campaigns, error = load_dashboard_data()

if error:
    st.error(f"Error loading data: {error}")

view = compute_view(campaigns)

# ========================================
# KPI STRIP
# ========================================
c1, c2, c3 = st.columns(3)

c1.metric("Total Revenue", format_money(view.total_revenue))
c2.metric("Total Spend", format_money(view.total_spend))
c3.metric("Avg Conversion Rate", format_pct(view.avg_conversion_rate))

st.divider()

# =======================================
# LINE CHARTS
# =======================================
if view.weekly.empty:
    st.info("No weekly performance data available.")
    st.stop()

left, right = st.columns(2)

with left:
    st.subheader("📈 Revenue by Week")
    revenue_df = pd.DataFrame(view.revenue_chart).set_index("label")
    st.line_chart(revenue_df["value"], color=REVENUE_COLOR)

with right:
    st.subheader("💸 Spend by Week")
    spend_df = pd.DataFrame(view.spend_chart).set_index("label")
    st.line_chart(spend_df["value"], color=SPEND_COLOR)

# =======================================
# DETAIL TABLE
# =======================================
st.subheader("Weekly Detail")

st.dataframe(
    view.weekly,
    use_container_width=True,
    hide_index=True,
    column_config={
        "ctr": st.column_config.NumberColumn("CTR", format="%.4f"),
        "conversion_rate": st.column_config.NumberColumn("Conv. Rate", format="%.4f"),
    },
)
