"""Shared service instances and their FastAPI dependencies."""
from __future__ import annotations

from .clients.remote import RemoteCatalogClient
from .core.config import Settings, settings
from .repositories.catalog_store import CatalogStore
from .services.catalog_loader import CatalogLoader
from .services.catalog_sources import build_sources
from .services.prediction_service import PredictionService


def build_services(cfg: Settings = settings) -> tuple[CatalogStore, CatalogLoader, PredictionService]:
    store = CatalogStore()
    loader = CatalogLoader(store, build_sources(cfg))
    remote = None
    if cfg.remote_predict_enabled and cfg.remote_configured:
        remote = RemoteCatalogClient(cfg)
    return store, loader, PredictionService(store, remote=remote)


catalog_store, catalog_loader, prediction_service = build_services()


def get_catalog_store() -> CatalogStore:
    return catalog_store


def get_catalog_loader() -> CatalogLoader:
    return catalog_loader


def get_prediction_service() -> PredictionService:
    return prediction_service
