import streamlit as st

from utils.format import format_money, format_roi, format_thb

def kpi_cards(kpis: dict, symbol: str = "฿"):
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Sales", format_money(kpis["total_sales"], symbol))
    col2.metric("Ad Spend", format_money(kpis["total_adspend"], symbol))
    col3.metric("ROI", format_roi(kpis["roi"]))
    col4.metric("Orders", format_thb(kpis["total_orders"]))
