"""Health check endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_catalog_loader, get_catalog_store
from ..repositories.catalog_store import CatalogStore
from ..services.catalog_loader import CatalogLoader

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
def healthcheck(
    store: CatalogStore = Depends(get_catalog_store),
    loader: CatalogLoader = Depends(get_catalog_loader),
) -> dict[str, str | int | None]:
    report = loader.last_report
    return {
        "status": "ok",
        "catalog_state": report.state.value if report else "not_loaded",
        "catalog_source": store.source,
        "records": len(store),
    }
