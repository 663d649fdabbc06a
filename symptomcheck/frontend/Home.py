"""Streamlit entrypoint for SymptomCheck."""
from __future__ import annotations

import asyncio

import httpx
import streamlit as st

from symptomcheck.frontend.components import results_panel, symptom_picker
from symptomcheck.frontend.utils import api_client, state

st.set_page_config(page_title="SymptomCheck", layout="wide")
st.title("SymptomCheck")
st.caption("Informational tool only. It does not replace a medical consultation.")

checker_state = state.get_state(st.session_state)


def refresh_catalog(reload: bool = False) -> None:
    try:
        if reload:
            checker_state.catalog = asyncio.run(api_client.reload_catalog())
        else:
            checker_state.catalog = asyncio.run(api_client.catalog_status())
        checker_state.symptoms = asyncio.run(api_client.list_symptoms())
    except httpx.HTTPError as exc:
        checker_state.catalog = None
        checker_state.symptoms = []
        st.error(f"Could not reach the SymptomCheck API: {exc}")


if checker_state.catalog is None:
    with st.spinner("Loading condition data..."):
        refresh_catalog()

catalog = checker_state.catalog or {}
if catalog.get("state") == "degraded":
    st.warning(f"Running on fallback data from the {catalog.get('source')} source.")
elif catalog.get("state") == "no_data":
    st.error("No condition data could be loaded.")
    if st.button("Retry loading"):
        refresh_catalog(reload=True)
        st.rerun()

col_pick, col_result = st.columns([1.0, 1.4])

with col_pick:
    symptom_picker.render_symptom_picker(checker_state)
    if st.button("Predict", type="primary"):
        if not checker_state.can_submit:
            st.warning("Please select at least one symptom.")
        else:
            with st.spinner("Matching symptoms..."):
                try:
                    checker_state.last_outcome = asyncio.run(api_client.predict(checker_state.selected))
                except httpx.HTTPError as exc:
                    st.error(f"Prediction failed: {exc}")
    if st.button("Clear selection"):
        checker_state.clear()
        st.rerun()

with col_result:
    if checker_state.last_outcome:
        results_panel.render_results(checker_state.last_outcome)
    else:
        st.info("Select symptoms and press Predict to see matching conditions.")
