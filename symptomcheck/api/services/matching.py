"""Symptom matching, ranking and symptom index derivation."""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from ..schemas.catalog import ConditionRecord, Prediction

MAX_RESULTS = 10


def _as_record(name: Any, value: Any) -> ConditionRecord:
    if isinstance(value, ConditionRecord):
        return value
    try:
        return ConditionRecord.from_raw(str(name), value)
    except ValidationError:
        # Blank keys cannot be validated; score them as symptom-less records.
        return ConditionRecord.model_construct(
            name=str(name), description="", symptoms=[], precautions=[], medications=[]
        )


def build_symptom_index(catalog: Mapping[str, Any]) -> List[str]:
    """Return every distinct symptom in the catalog, sorted ascending.

    Deduplication is by exact value, so ``"Fever"`` and ``"fever"`` are both
    kept; case folding for display or search is left to the caller.
    """

    seen = set()
    for name, value in list(catalog.items()):
        seen.update(_as_record(name, value).symptoms)
    return sorted(seen)


def match_percentage(symptoms: List[str], selected_lower: frozenset) -> float:
    """Share of a record's symptoms present in the lowercased selection, in percent."""

    overlap = sum(1 for symptom in symptoms if symptom.lower() in selected_lower)
    base = len(symptoms) or 1
    return overlap / base * 100


def score(catalog: Mapping[str, Any], selection: Iterable[str]) -> List[Prediction]:
    """Rank catalog records against a symptom selection.

    Records without any overlap are dropped, the rest are ordered by match
    percentage (highest first, ties kept in catalog order) and capped at
    ``MAX_RESULTS``. Neither argument is mutated.
    """

    selected_lower = frozenset(str(item).lower() for item in selection)
    if not selected_lower:
        return []

    scored = []
    for name, value in list(catalog.items()):
        record = _as_record(name, value)
        percentage = match_percentage(record.symptoms, selected_lower)
        if percentage <= 0:
            continue
        scored.append(
            Prediction(
                disease=str(name),
                match_percentage=percentage,
                description=record.description,
                precautions=list(record.precautions),
                medications=list(record.medications),
            )
        )
    scored.sort(key=lambda prediction: prediction.match_percentage, reverse=True)
    return scored[:MAX_RESULTS]
