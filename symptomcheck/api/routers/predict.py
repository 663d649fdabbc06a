"""Symptom prediction endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_prediction_service
from ..schemas.catalog import PredictionOutcomeResponse, PredictRequest
from ..services.prediction_service import PredictionService

router = APIRouter(tags=["predict"])


@router.post("/predict", response_model=PredictionOutcomeResponse)
async def predict(
    payload: PredictRequest,
    service: PredictionService = Depends(get_prediction_service),
) -> PredictionOutcomeResponse:
    outcome = await service.predict(payload.symptoms)
    return PredictionOutcomeResponse(
        predictions=outcome.predictions,
        engine=outcome.engine,
        state=outcome.state.value,
        warnings=outcome.warnings,
    )
