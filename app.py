from __future__ import annotations
import logging
import streamlit as st

from core.config import get_settings
from services.session import DashboardSession
from ui.filters import FilterPanel
from ui.kpis import kpi_cards
from ui.navigation import tab_bar
from views.by_store import ByStoreView
from views.overview import OverviewView
from views.table import TableView

st.set_page_config(page_title="FB Shops Performance Dashboard", layout="wide")

SESSION_KEY = "dashboard_session"

def get_session() -> DashboardSession:
    """One session per browser tab; the bundled sample is loaded on first run."""
    if SESSION_KEY not in st.session_state:
        session = DashboardSession()
        session.load_sample()
        st.session_state[SESSION_KEY] = session
    return st.session_state[SESSION_KEY]

def header(session: DashboardSession, default_url: str | None):
    left, right = st.columns([2, 3])
    with left:
        st.title("FB Shops Performance Dashboard")
        st.caption("Daily sales • Ad spend • ROI • Orders — per shop & overall")
    with right:
        url = st.text_input("CSV URL", value=default_url or "", placeholder="https://.../pub?output=csv")
        if st.button("Refresh from URL"):
            if not session.refresh_from_url(url):
                st.error(session.last_error)

def main():
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    session = get_session()
    header(session, settings.CSV_URL)

    # KPIs sit above the filters but are filled once this run's filters are applied
    kpi_box = st.container()
    FilterPanel(session).render()

    snap = session.snapshot
    with kpi_box:
        kpi_cards(snap.kpis, settings.CURRENCY_SYMBOL)

    tab_overview, tab_store, tab_table = tab_bar()
    with tab_overview:
        OverviewView(snap, settings.CURRENCY_SYMBOL).render()
    with tab_store:
        ByStoreView(snap, settings.CURRENCY_SYMBOL).render()
    with tab_table:
        TableView(snap, settings.CURRENCY_SYMBOL).render()

    st.caption("Tip: In Google Sheets, use File → Share → Publish to web → CSV and paste the URL above for one-click refresh.")

if __name__ == "__main__":
    main()
