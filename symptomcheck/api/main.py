"""FastAPI application bootstrap."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import deps
from .core.config import settings
from .core.logging import register_middleware, setup_logging
from .routers import catalog, health, predict

setup_logging(settings.log_level)
logger = logging.getLogger("symptomcheck")


@asynccontextmanager
async def lifespan(_: FastAPI):
    report = await deps.get_catalog_loader().load()
    logger.info("SymptomCheck started with catalog state %s", report.state.value)
    yield


app = FastAPI(title="SymptomCheck API", version="0.1.0", lifespan=lifespan)

register_middleware(app)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(predict.router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "SymptomCheck API", "health": "/health"}
