import pandas as pd
import altair as alt
import streamlit as st

def _ensure_cols(df: pd.DataFrame, cols: list[str], fill=0):
    """Makes sure the columns exist before charting."""
    for c in cols:
        if c not in df.columns:
            df[c] = fill
    return df

def daily_sales_chart(daily: pd.DataFrame):
    """
    Expects the daily summary columns:
      - date (date key)
      - sales
      - adspend
    Melted to long format (Series, Amount) so both lines share one encoding.
    """
    if daily is None or daily.empty:
        st.info("No data for the selected filters.")
        return

    daily = _ensure_cols(daily.copy(), ["sales", "adspend"])
    long_df = pd.melt(
        daily,
        id_vars=["date"],
        value_vars=["sales", "adspend"],
        var_name="Series",
        value_name="Amount",
    )
    long_df["Series"] = long_df["Series"].map({"sales": "Sales", "adspend": "Ad Spend"})
    long_df["Amount"] = pd.to_numeric(long_df["Amount"], errors="coerce").fillna(0)

    chart = (
        alt.Chart(long_df)
        .mark_line(point=True)
        .encode(
            x=alt.X("date:O", title="Date", sort=None),
            y=alt.Y("Amount:Q", title=None),
            color=alt.Color("Series:N", title=None),
            tooltip=["date:O", "Series:N", alt.Tooltip("Amount:Q", format=",.0f")],
        )
        .properties(height=320)
    )
    st.altair_chart(chart, use_container_width=True)

def store_sales_roi_chart(records: pd.DataFrame):
    """Sales (left axis) and ROI (right axis) for one store's records."""
    if records is None or records.empty:
        st.info("No records for this store.")
        return

    base = alt.Chart(records).encode(x=alt.X("date_key:O", title="Date", sort=None))
    sales = base.mark_line(point=True).encode(
        y=alt.Y("sales:Q", title="Sales", axis=alt.Axis(orient="left")),
        tooltip=["date_key:O", alt.Tooltip("sales:Q", format=",.0f")],
    )
    roi = base.mark_line(point=True, color="#f58518").encode(
        y=alt.Y("roi:Q", title="ROI", axis=alt.Axis(orient="right")),
        tooltip=["date_key:O", alt.Tooltip("roi:Q", format=".2f")],
    )
    chart = alt.layer(sales, roi).resolve_scale(y="independent").properties(height=300)
    st.altair_chart(chart, use_container_width=True)
