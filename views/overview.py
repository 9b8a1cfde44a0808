from __future__ import annotations
import streamlit as st

from views.base import BaseView
from ui.charts import daily_sales_chart
from utils.format import daily_summary_table, store_totals_table

class OverviewView(BaseView):
    """Daily trend chart, totals by store and the daily summary."""

    def render(self):
        with st.container(border=True):
            st.subheader("Daily Sales vs Ad Spend")
            daily_sales_chart(self.snap.daily_summary)

        with st.container(border=True):
            st.subheader("Total by Store")
            st.dataframe(
                store_totals_table(self.snap.store_totals, self.symbol),
                use_container_width=True, hide_index=True,
            )
            st.subheader("Daily Summary")
            st.dataframe(
                daily_summary_table(self.snap.daily_summary, self.symbol),
                use_container_width=True, hide_index=True,
            )
