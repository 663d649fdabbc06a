"""Value objects describing catalog loads and prediction runs."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from ..schemas.catalog import Prediction


class LoadState(str, Enum):
    READY = "ready"
    DEGRADED = "degraded"
    NO_DATA = "no_data"


class PredictionState(str, Enum):
    OK = "ok"
    NO_MATCHES = "no_matches"
    NO_DATA = "no_data"


@dataclass
class SourceAttempt:
    source: str
    ok: bool
    reason: Optional[str] = None
    record_count: int = 0


@dataclass
class LoadReport:
    state: LoadState
    source: Optional[str] = None
    record_count: int = 0
    symptom_count: int = 0
    attempts: List[SourceAttempt] = field(default_factory=list)
    loaded_at: Optional[datetime] = None

    @property
    def warnings(self) -> List[str]:
        return [f"{attempt.source}: {attempt.reason}" for attempt in self.attempts if not attempt.ok]


@dataclass
class PredictionOutcome:
    predictions: List[Prediction]
    engine: str
    state: PredictionState
    warnings: List[str] = field(default_factory=list)
