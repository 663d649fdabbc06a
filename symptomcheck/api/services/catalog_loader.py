"""Populate the catalog store from the first source that succeeds."""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from ..models.catalog import LoadReport, LoadState, SourceAttempt
from ..repositories.catalog_store import CatalogStore
from .catalog_sources import CatalogSource

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Try each source in precedence order and adopt the first usable catalog.

    Only one load runs at a time: a caller arriving while a load is in flight
    receives that load's report.
    """

    def __init__(self, store: CatalogStore, sources: Sequence[CatalogSource]) -> None:
        self.store = store
        self.sources: List[CatalogSource] = list(sources)
        self.last_report: Optional[LoadReport] = None
        self._inflight: Optional[asyncio.Future] = None

    @property
    def loading(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def load(self) -> LoadReport:
        if not self.loading:
            self._inflight = asyncio.ensure_future(self._run())
        return await asyncio.shield(self._inflight)

    async def _run(self) -> LoadReport:
        attempts: List[SourceAttempt] = []
        for source in self.sources:
            result = await source.attempt()
            if not result.ok:
                logger.warning("Catalog source %s unavailable: %s", result.source, result.reason)
                attempts.append(SourceAttempt(source=result.source, ok=False, reason=result.reason))
                continue

            self.store.replace(result.catalog, result.source)
            attempts.append(SourceAttempt(source=result.source, ok=True, record_count=len(self.store)))
            state = LoadState.READY if len(attempts) == 1 else LoadState.DEGRADED
            logger.info(
                "Catalog loaded from %s: %s conditions, %s symptoms (%s)",
                result.source,
                len(self.store),
                len(self.store.symptoms),
                state.value,
            )
            self.last_report = LoadReport(
                state=state,
                source=result.source,
                record_count=len(self.store),
                symptom_count=len(self.store.symptoms),
                attempts=attempts,
                loaded_at=self.store.loaded_at,
            )
            return self.last_report

        self.store.clear()
        logger.error("No catalog source produced data (%s tried)", len(attempts))
        self.last_report = LoadReport(state=LoadState.NO_DATA, attempts=attempts, loaded_at=self.store.loaded_at)
        return self.last_report
