"""Prediction orchestration: remote scoring first when enabled, local engine otherwise."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import httpx

from ..clients.remote import RemoteCatalogClient, RemoteServiceError
from ..models.catalog import PredictionOutcome, PredictionState
from ..repositories.catalog_store import CatalogStore
from . import matching

logger = logging.getLogger(__name__)


class PredictionService:
    """Score a symptom selection against the loaded catalog."""

    def __init__(self, store: CatalogStore, *, remote: Optional[RemoteCatalogClient] = None) -> None:
        self.store = store
        self.remote = remote

    async def predict(self, selection: Iterable[str]) -> PredictionOutcome:
        symptoms: List[str] = list(dict.fromkeys(selection))
        warnings: List[str] = []
        if self.remote is not None:
            try:
                response = await self.remote.predict(symptoms)
            except (httpx.HTTPError, RemoteServiceError) as exc:
                logger.warning("Remote prediction failed, using local engine: %s", exc)
                warnings.append(f"remote prediction unavailable: {exc}")
            else:
                state = PredictionState.OK if response.predictions else PredictionState.NO_MATCHES
                return PredictionOutcome(predictions=response.predictions, engine="remote", state=state)
        return self.predict_local(symptoms, warnings)

    def predict_local(self, symptoms: List[str], warnings: Optional[List[str]] = None) -> PredictionOutcome:
        warnings = list(warnings or [])
        if self.store.is_empty:
            return PredictionOutcome(predictions=[], engine="local", state=PredictionState.NO_DATA, warnings=warnings)
        predictions = matching.score(self.store.catalog, symptoms)
        state = PredictionState.OK if predictions else PredictionState.NO_MATCHES
        return PredictionOutcome(predictions=predictions, engine="local", state=state, warnings=warnings)
