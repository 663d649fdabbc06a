"""Endpoints exposing the loaded catalog and its symptom index."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_catalog_loader, get_catalog_store
from ..models.catalog import LoadReport, LoadState
from ..repositories.catalog_store import CatalogStore
from ..schemas.catalog import CatalogStatusResponse, DiseasesResponse, SourceAttemptInfo, SymptomsResponse
from ..services.catalog_loader import CatalogLoader

router = APIRouter(tags=["catalog"])


def _status(report: LoadReport) -> CatalogStatusResponse:
    return CatalogStatusResponse(
        state=report.state.value,
        source=report.source,
        record_count=report.record_count,
        symptom_count=report.symptom_count,
        loaded_at=report.loaded_at,
        attempts=[SourceAttemptInfo(**vars(attempt)) for attempt in report.attempts],
        warnings=report.warnings,
    )


@router.get("/diseases", response_model=DiseasesResponse)
def list_diseases(store: CatalogStore = Depends(get_catalog_store)) -> DiseasesResponse:
    return DiseasesResponse(diseases=store.records())


@router.get("/symptoms", response_model=SymptomsResponse)
def list_symptoms(store: CatalogStore = Depends(get_catalog_store)) -> SymptomsResponse:
    symptoms = store.symptoms
    return SymptomsResponse(symptoms=symptoms, total=len(symptoms))


@router.get("/catalog/status", response_model=CatalogStatusResponse)
def catalog_status(loader: CatalogLoader = Depends(get_catalog_loader)) -> CatalogStatusResponse:
    report = loader.last_report or LoadReport(state=LoadState.NO_DATA)
    return _status(report)


@router.post("/catalog/reload", response_model=CatalogStatusResponse)
async def reload_catalog(loader: CatalogLoader = Depends(get_catalog_loader)) -> CatalogStatusResponse:
    report = await loader.load()
    return _status(report)
