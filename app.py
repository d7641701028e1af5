# app.py
import pandas as pd
import streamlit as st
from datetime import date

from daycount import (
    DEFAULT_CONVENTION,
    ConventionName,
    ConventionNotFound,
    day_count,
    day_count_fraction,
    list_conventions,
)
from daycount_table import conventions_table


# ---------------------------
# Micro-caching wrappers
# ---------------------------
@st.cache_data(show_spinner=False, ttl=300)
def cached_conventions_table(
    date1: date, date2: date, date3: date | None, compounding: int
) -> pd.DataFrame:
    return conventions_table(date1, date2, date3, compounding)


# ---------------------------
# Page config
# ---------------------------
st.set_page_config(page_title="Day-Count Calculator", page_icon="📅", layout="wide")

st.title("📅 Day-Count Calculator")
st.caption(
    "Accrued days and coupon fractions under 30/360, Actual/360 and Actual/Actual conventions."
)

names = sorted(list_conventions())
default_idx = names.index(DEFAULT_CONVENTION) if DEFAULT_CONVENTION in names else 0

# ---- INPUTS ----
with st.expander("⚙️ Period Inputs", expanded=True):
    colA, colB, colC = st.columns(3)
    date1 = colA.date_input(
        "Accrual start (last coupon)",
        value=date(2007, 1, 31),
        help="Start date for interest accrual.",
    )
    date2 = colB.date_input(
        "Accrual end (settlement)",
        value=date(2007, 2, 28),
        help="Date through which interest is accrued.",
    )
    use_date3 = colC.checkbox("Next coupon date (ACTACT only)", value=False)
    date3 = (
        colC.date_input("Next coupon date", value=date(2007, 7, 31)) if use_date3 else None
    )

    col1, col2 = st.columns(2)
    convention: ConventionName = col1.selectbox("Convention", names, index=default_idx)
    compounding = int(
        col2.number_input(
            "Compounding frequency (per year)",
            min_value=1,
            max_value=12,
            value=2,
            step=1,
            help="Coupon periods per year. Only used by ACTACT.",
        )
    )

# ---- RESULTS ----
st.subheader(f"Result — {convention}")
try:
    days = day_count(date1, date2, convention)
    frac = day_count_fraction(date1, date2, date3, compounding, convention)
except ConventionNotFound as e:
    st.error(f"Unknown convention: {e.name}")
    st.stop()
except ValueError as e:
    st.error(f"Input error: {e}")
    st.stop()

m1, m2 = st.columns(2)
m1.metric("Days", f"{days:,.0f}")
m2.metric("Fraction", f"{frac:.6f}")

if days < 0:
    st.info("• Accrual end is before accrual start, so the count is negative.")

st.markdown("### All conventions")
try:
    table = cached_conventions_table(date1, date2, date3, compounding)
except ValueError as e:
    st.error(f"Input error: {e}")
    st.stop()

st.dataframe(
    table.style.format(
        {"Days": "{:.0f}", "Fraction": "{:.6f}"}, na_rep="—"
    ),
    use_container_width=True,
)
