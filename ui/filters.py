from __future__ import annotations
import streamlit as st

from core.context import FilterState
from services.session import DashboardSession

def _default_kw_for(key: str, **kwargs):
    """Returns kwargs (e.g. value=...) only while the key is not in session_state yet."""
    return {} if key in st.session_state else kwargs

class FilterPanel:
    def __init__(self, session: DashboardSession, key_prefix: str = "flt_"):
        self.session = session
        self.k = key_prefix

    def _store_key(self, store: str) -> str:
        return f"{self.k}store:{store}"

    def _clear(self):
        # Widgets must be reset before they are instantiated on the next run
        for key in [k for k in st.session_state.keys() if str(k).startswith(self.k)]:
            del st.session_state[key]
        self.session.clear_filters()

    def render(self) -> FilterState:
        snap = self.session.snapshot
        f = snap.filters

        with st.container(border=True):
            c1, c2, c3 = st.columns(3)
            d_from = c1.date_input(
                "From date", key=f"{self.k}from",
                **_default_kw_for(f"{self.k}from", value=f.date_from),
            )
            d_to = c2.date_input(
                "To date", key=f"{self.k}to",
                **_default_kw_for(f"{self.k}to", value=f.date_to),
            )

            c3.markdown("**Stores**")
            checked = {
                s: c3.checkbox(
                    s, key=self._store_key(s),
                    **_default_kw_for(self._store_key(s), value=s in f.stores),
                )
                for s in snap.stores
            }

            st.button("Clear filters", on_click=self._clear)

        if (d_from, d_to) != (f.date_from, f.date_to):
            self.session.set_date_range(d_from, d_to)
        for store, on in checked.items():
            if on != (store in self.session.snapshot.filters.stores):
                self.session.toggle_store(store)

        return self.session.snapshot.filters
