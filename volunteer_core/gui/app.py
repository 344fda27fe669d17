# volunteer_core/gui/app.py
from __future__ import annotations

from dataclasses import replace
from io import BytesIO
from pathlib import Path
import sys

import streamlit as st

# streamlit runs from the script directory; put the repository root on the path
ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from volunteer_core.config import DEFAULT_CONFIG
from volunteer_core.io_layer.paths import InputPaths
from volunteer_core.io_layer.xlsx_reader import InputFormatError
from volunteer_core.pipeline import run_allocation
from volunteer_core.reporting.export_xlsx import export_result_xlsx
from volunteer_core.validation.validator import ValidationError


def _export_result_bytes(result, cfg) -> bytes:
    """Styled workbook in memory for the download button"""
    buf = BytesIO()
    export_result_xlsx(buf, result, cfg)
    return buf.getvalue()


def main():
    cfg = DEFAULT_CONFIG

    st.title("School Event Volunteer Scheduler")

    st.header("Input")
    uploaded = st.file_uploader("Sign-up workbook (xlsx)", type=["xlsx"])
    input_path = st.text_input("...or a path on this machine").strip()
    variables_sheet = st.text_input("Variables sheet", value=InputPaths.variables_sheet_name)
    responses_sheet = st.text_input("Responses sheet", value=InputPaths.responses_sheet_name)

    st.header("Settings")
    seed = st.number_input("Random seed", value=cfg.default_seed, step=1)
    alternates = st.number_input("Alternates per teacher", min_value=0, max_value=10,
                                 value=cfg.alternates_per_teacher)
    include_summary = st.checkbox("Add Summary sheet", value=cfg.include_summary_sheet)

    cfg2 = replace(cfg, alternates_per_teacher=int(alternates), include_summary_sheet=include_summary)

    run = st.button("Assign volunteers")
    if not run:
        st.stop()

    if uploaded is None and not input_path:
        st.error("Choose a workbook or enter its path.")
        st.stop()
    source = BytesIO(uploaded.getvalue()) if uploaded is not None else input_path

    try:
        out = run_allocation(
            source,
            seed=int(seed),
            cfg=cfg2,
            variables_sheet=variables_sheet,
            responses_sheet=responses_sheet,
        )
    except FileNotFoundError:
        st.error(f"File not found: {input_path}")
        st.stop()
    except InputFormatError as e:
        st.error(f"Cannot read the workbook: {e}")
        st.stop()
    except ValidationError as e:
        st.error(e.message)
        st.stop()

    for w in out.warnings:
        st.warning(w.message)

    st.success(f"Assigned {len(out.assignment_df)} volunteer slots (seed {out.result.seed}).")

    tab1, tab2 = st.tabs(["Assignments", "Fill summary"])
    with tab1:
        st.dataframe(out.assignment_df, use_container_width=True)
    with tab2:
        st.dataframe(out.summary_df, use_container_width=True)

    st.download_button(
        label="Download assignment workbook",
        data=_export_result_bytes(out.result, cfg2),
        file_name="output.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )


if __name__ == "__main__":
    main()
