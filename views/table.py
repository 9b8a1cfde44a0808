from __future__ import annotations
import streamlit as st

from features.selection import displayed_stores
from views.base import BaseView
from utils.format import store_records_table, store_totals_table

class TableView(BaseView):
    """Store totals (with orders) and each displayed store's daily records."""

    def render(self):
        st.subheader("Total by Store")
        st.dataframe(
            store_totals_table(self.snap.store_totals, self.symbol, with_orders=True),
            use_container_width=True, hide_index=True,
        )

        for store in displayed_stores(list(self.snap.stores), self.snap.filters):
            st.markdown(f"#### {store} Daily Records")
            rows = self.snap.by_store.get(store)
            if rows is None or rows.empty:
                st.info("No records.")
                continue
            st.dataframe(store_records_table(rows, self.symbol), use_container_width=True, hide_index=True)
