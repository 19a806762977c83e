"""Streamlit UI for the restaurant seating manager with CSV previews and validations."""
from __future__ import annotations

# Add src to sys.path so restaurant_seating can be found
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st

from restaurant_seating.cli import run_rounds
from restaurant_seating.csv_loader import load_restaurant, read_frame
from restaurant_seating.report import summarize, table_rows, waiting_rows

# -----------------------------
# Helpers
# -----------------------------

def uploadedfile_to_df(uploaded_file) -> pd.DataFrame | None:
    """Read a Streamlit UploadedFile or file-like object into a DataFrame."""
    if uploaded_file is None:
        return None
    if hasattr(uploaded_file, "read"):
        uploaded_file.seek(0)
        return pd.read_csv(io.StringIO(uploaded_file.read().decode("utf-8")))
    return pd.read_csv(uploaded_file)

def df_to_csvio(df: pd.DataFrame) -> io.StringIO:
    """Serialize a DataFrame to a StringIO CSV buffer positioned at start."""
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    buf.seek(0)
    return buf

def preview_upload(uploaded_file, file_label: str) -> pd.DataFrame | None:
    """Read an upload for preview, reporting unreadable files with ``st.error``."""
    try:
        return read_frame(uploaded_file, file_label)
    except ValueError as e:
        st.error(f"Error in {e}")
        return None
    finally:
        uploaded_file.seek(0)

def validate_columns(df: pd.DataFrame, required: list[str], file_label: str) -> bool:
    """Check required columns and show an error if any are missing."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        st.error(f"Error in {file_label}: missing columns: {', '.join(missing)}")
        return False
    return True

# -----------------------------
# Sidebar options
# -----------------------------

st.sidebar.header("Seating Options")
limit_rounds = st.sidebar.checkbox(
    "Limit number of seatings",
    value=False,
    help="Stop after a fixed number of parties instead of seating everyone who fits.",
)
max_rounds = st.sidebar.number_input(
    "Parties to seat",
    min_value=0,
    max_value=500,
    value=1,
    disabled=not limit_rounds,
)

# -----------------------------
# Main UI and previews
# -----------------------------

st.title("Restaurant Seating")

_tables_file = st.file_uploader("Tables CSV", type="csv")
_parties_file = st.file_uploader("Parties CSV", type="csv")

tables_df = parties_df = None
tables_valid = parties_valid = False

if _tables_file is not None:
    tables_df = preview_upload(_tables_file, "tables.csv")
if tables_df is not None:
    st.subheader("Tables preview")
    st.dataframe(tables_df, use_container_width=True)
    tables_valid = validate_columns(tables_df, ["capacity"], "tables.csv")

if _parties_file is not None:
    parties_df = preview_upload(_parties_file, "parties.csv")
if parties_df is not None:
    st.subheader("Parties preview")
    st.dataframe(parties_df, use_container_width=True)
    parties_valid = validate_columns(parties_df, ["size"], "parties.csv")

# -----------------------------
# Run button
# -----------------------------

run_disabled = not (_tables_file and _parties_file and tables_valid and parties_valid)
run_clicked = st.button("Seat parties", disabled=run_disabled, key="seat_parties_button")

# -----------------------------
# Seat
# -----------------------------

if run_clicked and not run_disabled:
    try:
        tables_df_run = uploadedfile_to_df(_tables_file)
        parties_df_run = uploadedfile_to_df(_parties_file)
        if tables_df_run is None or parties_df_run is None:
            st.error("One or more input files could not be read. Please upload valid CSV files.")
            st.stop()

        restaurant = load_restaurant(df_to_csvio(tables_df_run), df_to_csvio(parties_df_run))
        seatings = run_rounds(restaurant, int(max_rounds) if limit_rounds else None)

        st.subheader("Seatings")
        st.dataframe(pd.DataFrame(seatings, columns=["party", "table"]), use_container_width=True)

        report_df = pd.DataFrame(table_rows(restaurant))
        st.subheader("Tables")
        st.dataframe(report_df, use_container_width=True)

        st.subheader("Still waiting")
        st.dataframe(
            pd.DataFrame(waiting_rows(restaurant), columns=["party", "size", "vip"]),
            use_container_width=True,
        )

        s = summarize(restaurant)
        st.subheader("Summary")
        cols = st.columns(3)
        cols[0].metric("Filled tables", f"{s['filled_tables']}/{s['tables']}")
        cols[1].metric("Guests seated", s["seated_guests"])
        cols[2].metric("Utilization", f"{s['utilization']:.0%}")

        st.download_button(
            "Download table report as CSV",
            report_df.to_csv(index=False).encode("utf-8"),
            file_name="table_report.csv",
        )

    except ValueError as e:
        st.error(f"Input validation error: {e}")
        st.stop()
    except Exception as e:
        st.exception(e)
        st.stop()
