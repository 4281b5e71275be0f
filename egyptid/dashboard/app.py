import logging

import streamlit as st

from egyptid.decoder.extractor import try_extract
from egyptid.decoder.governorates import GOVERNORATES
from egyptid.presentation.age import calculate_age
from egyptid.presentation.formatter import format_birthdate
from egyptid.telemetry import init_telemetry

logger = logging.getLogger("egyptid.dashboard")

init_telemetry()

# --- PAGE CONFIGURATION ---
st.set_page_config(
    page_title="Egyptian National ID Decoder",
    layout="centered",
    initial_sidebar_state="expanded"
)

# --- SIDEBAR: GOVERNORATE REFERENCE ---
with st.sidebar:
    st.header("Governorate Codes")
    st.caption("Digits 8-9 of the ID")
    st.dataframe(
        [{"Code": code, "Governorate": name} for code, name in GOVERNORATES.items()],
        hide_index=True,
        use_container_width=True,
    )

# --- MAIN WORKSPACE ---
st.title("Egyptian National ID Decoder")
st.markdown("#### Extract birth date, governorate and gender from a 14-digit ID")

if "last_result" not in st.session_state:
    st.session_state.last_result = None

with st.form("national_id_form"):
    national_id = st.text_input(
        "National ID",
        max_chars=14,
        placeholder="29902150112305",
        help="Exactly 14 digits, no spaces."
    )
    submitted = st.form_submit_button("Decode", type="primary", use_container_width=True)

if submitted:
    st.session_state.last_result = try_extract(national_id)
    logger.info(
        "Decode submitted: %s",
        "ok" if st.session_state.last_result.ok else st.session_state.last_result.error_kind,
    )

result = st.session_state.last_result

if result is not None:
    if result.ok:
        info = result.info
        col_gender, col_birth = st.columns(2)
        col_gender.metric("Gender", info.gender.value)
        col_birth.metric("Birth Date", format_birthdate(info))

        col_gov, col_age = st.columns(2)
        col_gov.metric("Governorate", info.governorate)
        col_age.metric("Age", f"{calculate_age(info.birthdate)} years")
    else:
        st.error(f"Error: {result.error_message}")
