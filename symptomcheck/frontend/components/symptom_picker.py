"""Searchable symptom selector."""
from __future__ import annotations

import streamlit as st

from ..utils.state import CheckerState, filter_symptoms, find_symptom

MAX_OPTIONS = 40


def _add_first_match(state: CheckerState) -> None:
    match = find_symptom(state.symptoms, st.session_state.get("symptom_search", ""))
    if match:
        state.add(match)
        st.session_state["symptom_search"] = ""


def render_symptom_picker(state: CheckerState) -> None:
    st.subheader("Symptoms")
    col_search, col_add = st.columns([3, 1])
    term = col_search.text_input("Search symptoms", key="symptom_search", placeholder="e.g. fever")
    col_add.button("Add match", on_click=_add_first_match, args=(state,), use_container_width=True)

    options = filter_symptoms(state.symptoms, term)
    if not options:
        st.caption("No symptom matches the search.")
    for symptom in options[:MAX_OPTIONS]:
        st.button(
            symptom,
            key=f"option_{symptom}",
            type="primary" if state.is_selected(symptom) else "secondary",
            on_click=state.toggle,
            args=(symptom,),
        )
    if len(options) > MAX_OPTIONS:
        st.caption(f"Showing {MAX_OPTIONS} of {len(options)} symptoms. Refine the search to see more.")

    st.markdown("**Selected**")
    if not state.selected:
        st.caption("Nothing selected yet.")
    for symptom in list(state.selected):
        st.button(f"✕ {symptom}", key=f"selected_{symptom}", on_click=state.remove, args=(symptom,))
