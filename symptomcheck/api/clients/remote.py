"""HTTP client for the optional remote condition data service."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from ..core.config import Settings, settings
from ..schemas.catalog import PredictResponse

logger = logging.getLogger(__name__)


class RemoteServiceError(Exception):
    """The remote service answered, but not with something usable."""


class RemoteCatalogClient:
    """Talk to a service exposing ``GET /diseases`` and ``POST /predict``."""

    def __init__(
        self,
        cfg: Settings = settings,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.cfg = cfg
        self.base_url = (base_url if base_url is not None else cfg.remote_base_url).rstrip("/")
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.cfg.request_timeout_s,
            headers={"Accept": "application/json"},
            transport=self.transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        attempts = max(1, self.cfg.remote_retry_attempts)
        for attempt in range(attempts):
            try:
                async with self._client() as client:
                    response = await client.request(method, path, **kwargs)
                break
            except httpx.TransportError as exc:
                logger.warning("Remote %s %s failed (attempt %s): %s", method, path, attempt + 1, exc)
                if attempt == attempts - 1:
                    raise
                await asyncio.sleep(0.5 * 2 ** attempt)
        if response.is_error:
            raise RemoteServiceError(f"{method} {path} returned HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteServiceError(f"{method} {path} returned invalid JSON") from exc

    async def fetch_diseases(self) -> Any:
        """Return the raw ``/diseases`` payload."""

        return await self._request("GET", "/diseases")

    async def predict(self, symptoms: List[str]) -> PredictResponse:
        payload = await self._request("POST", "/predict", json={"symptoms": list(symptoms)})
        try:
            return PredictResponse.model_validate(payload)
        except ValidationError as exc:
            raise RemoteServiceError("/predict returned an unexpected shape") from exc
