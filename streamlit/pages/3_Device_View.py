from __future__ import annotations

import pandas as pd
import streamlit as st

from core.n2_1_api_ingestion import load_dashboard_data
from core.n3_3_device import build_device_view
from core.n4_1_presentation import format_compact, format_money

st.set_page_config(
    page_title="Device Performance",
    layout="wide",
)

st.title("📱 Device Performance Breakdown")
st.caption("A cross-campaign analysis of Mobile vs. Desktop engagement and financial results.")

# ========================================
# LOAD DATA
# ========================================
@st.cache_data(show_spinner=False)
def compute_view(campaigns):
    return build_device_view(campaigns)


with st.spinner("Loading device data..."):
    campaigns, error = load_dashboard_data()

view = compute_view(campaigns)

# ========================================
# ERROR / MISSING DEVICE STATES
# ========================================
if error:
    st.error(f"Failed to load device data: {error}")
    st.stop()

if not view.is_complete:
    available = ", ".join(view.devices["device"]) or "none"
    st.warning(
        f"Missing key device data: {', '.join(view.missing_devices)}. "
        f"Available devices: {available}."
    )
    st.stop()

cmp = view.comparison
mobile = view.devices.set_index("device").loc["Mobile"]
desktop = view.devices.set_index("device").loc["Desktop"]

# ========================================
# KPI STRIP
# ========================================
c1, c2, c3, c4 = st.columns(4)

c1.metric(
    "Mobile Revenue Share",
    f"{cmp.mobile_revenue_share:.1f}%",
    help=f"{format_money(cmp.mobile_revenue, 0)} of combined total revenue",
)

c2.metric(
    "Desktop Conversions",
    format_compact(desktop["total_conversions"]),
    help=f"Mobile: {format_compact(mobile['total_conversions'])} conversions",
)

c3.metric(
    f"{cmp.leader} Revenue Lead",
    format_money(abs(cmp.revenue_delta), 0),
    delta=f"{cmp.leader} leads by {cmp.delta_pct:.1f}%",
    delta_color="normal" if cmp.revenue_delta >= 0 else "inverse",
)

c4.metric(
    "Avg. Conversion Rate",
    f"{cmp.mobile_conversion_rate}% / {cmp.desktop_conversion_rate}%",
    help=f"CR is {'higher' if cmp.mobile_converts_better else 'lower'} on Mobile",
)

st.divider()

# ========================================
# GROUPED BARS
# ========================================
st.subheader("📊 Mobile vs Desktop")

chart_df = pd.DataFrame(view.chart_rows).set_index("metric")

for metric, row in chart_df.iterrows():
    st.caption(metric)
    st.bar_chart(row, horizontal=True)

st.subheader("Device Totals")
st.dataframe(view.devices, use_container_width=True, hide_index=True)
