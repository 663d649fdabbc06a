"""Chart data preparation for prediction results."""
from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd


def predictions_frame(predictions: List[Dict[str, Any]]) -> pd.DataFrame:
    """One row per condition with its match percentage rounded to one decimal.

    ``label`` carries a zero-padded rank prefix. Chart axes order categories
    by value, so sorting on the label keeps the bars in ranked order.
    """

    rows = [
        {
            "label": f"{rank:02d}. {item['disease']}",
            "disease": item["disease"],
            "match_percentage": round(float(item["match_percentage"]), 1),
        }
        for rank, item in enumerate(predictions, start=1)
    ]
    return pd.DataFrame(rows, columns=["label", "disease", "match_percentage"])
