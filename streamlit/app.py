from __future__ import annotations

import streamlit as st

# ===================================================
# APP CONFIG
# ===================================================
st.set_page_config(
    page_title="Campaign Performance Dashboard",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ===============================================
# HEADER
# ================================================
st.markdown(
    """
    <style>
        .app-title {
            font-size: 26px;
            font-weight: 600;
            margin-bottom: 0;
        }
        .app-subtitle {
            font-size: 14px;
            color: #666;
        }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown("<div class='app-title'> 📊 Campaign Performance Dashboard</div>", unsafe_allow_html=True)
st.markdown("<div class='app-subtitle'> Weekly, audience, device and regional views across all campaigns</div>", unsafe_allow_html=True)


# ===================================================
# SIDEBAR
# ===================================================
st.sidebar.title("Navigation")

st.sidebar.markdown("---")

st.sidebar.page_link(
    "pages/0_Home.py",
    label="🏠 Overview",
)

st.sidebar.page_link(
    "pages/1_Weekly_View.py",
    label="🕒 Weekly Performance",
)

st.sidebar.page_link(
    "pages/2_Demographic_View.py",
    label="🧑‍🤝‍🧑 Demographic Performance",
)

st.sidebar.page_link(
    "pages/3_Device_View.py",
    label="📱 Device Performance",
)

st.sidebar.page_link(
    "pages/4_Region_View.py",
    label="🗺 Regional Performance",
)

# ===================================================
# FOOTER
# ===================================================
st.sidebar.markdown("---")
st.sidebar.caption("Data is fetched live on every page view.")
