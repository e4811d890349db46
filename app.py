"""Streamlit UI for SeatingPlanner with CSV previews and validations."""
from __future__ import annotations

# Add src to sys.path so seating_planner can be found without installing
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st

from seating_planner.csv_loader import (
    load_blacklist,
    load_guests,
    load_relationships,
    load_tables,
)
from seating_planner.scoring import build_report
from seating_planner.solver import SeatingModel, assignment_map
from seating_planner.weights import PreferenceMode

# -----------------------------
# Helpers
# -----------------------------

def uploadedfile_to_df(uploaded_file) -> pd.DataFrame | None:
    """Read a Streamlit UploadedFile or file-like object into a DataFrame."""
    if uploaded_file is None:
        return None
    if hasattr(uploaded_file, "read"):
        uploaded_file.seek(0)
        return pd.read_csv(io.StringIO(uploaded_file.read().decode("utf-8")), dtype=str)
    return pd.read_csv(uploaded_file, dtype=str)

def df_to_csvio(df: pd.DataFrame) -> io.StringIO:
    """Serialize a DataFrame to a StringIO CSV buffer positioned at start."""
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    buf.seek(0)
    return buf

def validate_columns(df: pd.DataFrame, required: list[str], file_label: str) -> bool:
    """Check required columns and show an error if any are missing."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        st.error(f"Error in {file_label}: missing columns: {', '.join(missing)}")
        return False
    return True

def validate_pair_guests(guests_df: pd.DataFrame, pair_df: pd.DataFrame, file_label: str) -> bool:
    """Ensure guest1_id/guest2_id values exist in guests."""
    guest_ids = set(guests_df["id"].astype(str))
    bad_rows = []
    for idx, row in pair_df.iterrows():
        a = str(row["guest1_id"])
        b = str(row["guest2_id"])
        if a not in guest_ids or b not in guest_ids:
            bad_rows.append((idx, a, b))
    if bad_rows:
        st.error(
            f"Error: {file_label} references unknown guest ids: "
            + ", ".join([f"row {i+2}: {a}, {b}" for i, a, b in bad_rows])
            + f". Fix guests.csv or {file_label}."
        )
        return False
    return True

def build_and_solve(
    guests_df: pd.DataFrame,
    tables_df: pd.DataFrame,
    rel_df: pd.DataFrame,
    blacklist_df: pd.DataFrame | None,
    preference: str,
    auto_tables: bool,
    default_capacity: int,
):
    """Run loaders, build model, and solve assignments."""
    guests = load_guests(df_to_csvio(guests_df))
    tables = load_tables(df_to_csvio(tables_df))

    valid_ids = {g.id for g in guests}
    relationships = load_relationships(df_to_csvio(rel_df), valid_ids)
    blacklist = load_blacklist(df_to_csvio(blacklist_df), valid_ids) if blacklist_df is not None else []

    model = SeatingModel(
        preference=preference,
        auto_tables=auto_tables,
        default_table_capacity=default_capacity,
    )
    seated = model.solve(guests, tables, relationships, blacklist)
    report = build_report(seated, model.build_matrix(guests, relationships, blacklist), guests)
    return guests, seated, report

# -----------------------------
# Sidebar options
# -----------------------------

st.sidebar.header("Seating Options")
preference = st.sidebar.selectbox(
    "Seating preference",
    [m.value for m in PreferenceMode],
    help="FAMILY_FIRST and RELATIONSHIPS_FIRST give family or close friends 1.5x weight.",
)
auto_tables = st.sidebar.checkbox(
    "Add tables when seats run out",
    value=False,
    help="Append generic tables so every guest gets a seat.",
)
default_capacity = st.sidebar.number_input(
    "Seats per added table",
    min_value=1,
    max_value=50,
    value=8,
)

# -----------------------------
# Main UI and previews
# -----------------------------

st.title("Seating Planner")

_guests_file = st.file_uploader("Guests CSV", type="csv")
_relationships_file = st.file_uploader("Relationships CSV", type="csv")
_blacklist_file = st.file_uploader("Blacklist CSV (optional)", type="csv")
_tables_file = st.file_uploader("Tables CSV", type="csv")

previews = [
    (_guests_file, "Guests preview", ["id", "name"], "guests.csv"),
    (_relationships_file, "Relationships preview", ["guest1_id", "guest2_id"], "relationships.csv"),
    (_blacklist_file, "Blacklist preview", ["guest1_id", "guest2_id"], "blacklist.csv"),
    (_tables_file, "Tables preview", ["id", "capacity"], "tables.csv"),
]
for upload, title, required, label in previews:
    if upload is None:
        continue
    df = uploadedfile_to_df(upload)
    st.subheader(title)
    st.dataframe(df, use_container_width=True)
    validate_columns(df, required, label)

# -----------------------------
# Run button
# -----------------------------

# Keep the button disabled until all required files are provided
run_disabled = not (_guests_file and _relationships_file and _tables_file)
run_clicked = st.button("Run solver", disabled=run_disabled, key="run_solver_button")

# -----------------------------
# Solve
# -----------------------------

if run_clicked and not run_disabled:
    try:
        guests_df_run = uploadedfile_to_df(_guests_file)
        tables_df_run = uploadedfile_to_df(_tables_file)
        rel_df_run = uploadedfile_to_df(_relationships_file)
        blacklist_df_run = uploadedfile_to_df(_blacklist_file)

        # Validate again before solving
        if not validate_columns(guests_df_run, ["id", "name"], "guests.csv"):
            st.stop()
        if not validate_columns(rel_df_run, ["guest1_id", "guest2_id"], "relationships.csv"):
            st.stop()
        if not validate_columns(tables_df_run, ["id", "capacity"], "tables.csv"):
            st.stop()
        if not validate_pair_guests(guests_df_run, rel_df_run, "relationships.csv"):
            st.stop()
        if blacklist_df_run is not None:
            if not validate_columns(blacklist_df_run, ["guest1_id", "guest2_id"], "blacklist.csv"):
                st.stop()
            if not validate_pair_guests(guests_df_run, blacklist_df_run, "blacklist.csv"):
                st.stop()

        guests, seated, report = build_and_solve(
            guests_df_run,
            tables_df_run,
            rel_df_run,
            blacklist_df_run,
            preference=preference,
            auto_tables=auto_tables,
            default_capacity=int(default_capacity),
        )

        names = {g.id: g.name or g.id for g in guests}
        assignments = assignment_map(seated)
        result_df = (
            pd.DataFrame(
                {
                    "guest": [names[gid] for gid in assignments],
                    "table": list(assignments.values()),
                }
            )
            .sort_values("table")
            .reset_index(drop=True)
        )
        st.subheader("Assignments")
        st.dataframe(result_df, use_container_width=True)

        st.subheader("Table report")
        st.dataframe(pd.DataFrame(report), use_container_width=True)

        csv_bytes = result_df.to_csv(index=False).encode("utf-8")
        st.download_button(
            "Download assignments as CSV",
            csv_bytes,
            file_name="assignments.csv",
        )

    except ValueError as e:
        st.error(f"Input validation error: {e}")
        st.stop()
