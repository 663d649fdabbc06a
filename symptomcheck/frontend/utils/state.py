"""Session state helpers for Streamlit."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


def filter_symptoms(symptoms: Sequence[str], term: str) -> List[str]:
    """Case-insensitive substring filter that keeps index order."""

    needle = term.strip().lower()
    if not needle:
        return list(symptoms)
    return [symptom for symptom in symptoms if needle in symptom.lower()]


def find_symptom(symptoms: Sequence[str], term: str) -> Optional[str]:
    """Return the exact (case-insensitive) match for ``term``, else the first partial match."""

    needle = term.strip().lower()
    if not needle:
        return None
    for symptom in symptoms:
        if symptom.lower() == needle:
            return symptom
    for symptom in symptoms:
        if needle in symptom.lower():
            return symptom
    return None


@dataclass
class CheckerState:
    symptoms: List[str] = field(default_factory=list)
    selected: List[str] = field(default_factory=list)
    catalog: Optional[Dict[str, Any]] = None
    last_outcome: Optional[Dict[str, Any]] = None

    def is_selected(self, symptom: str) -> bool:
        return symptom in self.selected

    def add(self, symptom: str) -> None:
        if symptom not in self.selected:
            self.selected.append(symptom)

    def remove(self, symptom: str) -> None:
        if symptom in self.selected:
            self.selected.remove(symptom)

    def toggle(self, symptom: str) -> None:
        if self.is_selected(symptom):
            self.remove(symptom)
        else:
            self.add(symptom)

    def clear(self) -> None:
        self.selected.clear()
        self.last_outcome = None

    @property
    def can_submit(self) -> bool:
        return bool(self.selected)


def get_state(session_state) -> CheckerState:
    if "checker_state" not in session_state:
        session_state.checker_state = CheckerState()
    return session_state.checker_state
