from __future__ import annotations
import streamlit as st

TABS = ["Overview", "By Store", "Table"]

def tab_bar():
    """
    Main tabs. Returns the containers in TABS order:
    Overview | By Store | Table
    """
    return st.tabs(TABS)
