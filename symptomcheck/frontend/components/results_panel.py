"""Render prediction cards and the match chart."""
from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from ..utils.charts import predictions_frame


def render_results(outcome: Dict[str, Any]) -> None:
    st.subheader("Results")
    for warning in outcome.get("warnings", []):
        st.warning(warning)

    state = outcome.get("state")
    predictions = outcome.get("predictions", [])
    if state == "no_data":
        st.error("No condition data is loaded, so nothing can be matched. Try reloading the catalog.")
        return
    if not predictions:
        st.info("No matching diseases found. Please try different symptoms.")
        return

    frame = predictions_frame(predictions)
    st.bar_chart(frame, x="label", y="match_percentage")

    for prediction in predictions:
        with st.container(border=True):
            st.markdown(f"#### {prediction['disease']}")
            st.caption(f"Match: {float(prediction['match_percentage']):.1f}%")
            if prediction.get("description"):
                st.write(prediction["description"])
            st.markdown("**Precautions:**")
            st.write("\n".join(f"- {item}" for item in prediction.get("precautions", [])) or "-")
            st.markdown("**Medications:**")
            st.write("\n".join(f"- {item}" for item in prediction.get("medications", [])) or "-")
