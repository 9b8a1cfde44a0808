from __future__ import annotations
import streamlit as st

from features.selection import displayed_stores
from views.base import BaseView
from ui.charts import store_sales_roi_chart

class ByStoreView(BaseView):
    def render(self):
        for store in displayed_stores(list(self.snap.stores), self.snap.filters):
            with st.container(border=True):
                st.subheader(store)
                store_sales_roi_chart(self.snap.by_store.get(store))
