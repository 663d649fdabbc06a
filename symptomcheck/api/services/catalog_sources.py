"""Catalog source strategies tried in order by the catalog loader."""
from __future__ import annotations

import asyncio
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import httpx
from pydantic import ValidationError

from ..clients.remote import RemoteCatalogClient, RemoteServiceError
from ..core.config import Settings
from ..schemas.catalog import ConditionRecord

logger = logging.getLogger(__name__)


class SourceUnavailable(Exception):
    """A source could not produce a usable catalog."""


def records_from_payload(payload: Any) -> List[ConditionRecord]:
    """Convert a decoded JSON payload into condition records.

    Accepts ``{"diseases": [...]}``, a bare list of records, or a mapping of
    name to record (at top level or under ``"diseases"``). Entries that
    cannot be keyed by a name are skipped.
    """

    if isinstance(payload, Mapping) and "diseases" in payload:
        payload = payload["diseases"]

    records: List[ConditionRecord] = []
    if isinstance(payload, list):
        for item in payload:
            if not isinstance(item, Mapping):
                continue
            try:
                records.append(ConditionRecord.model_validate(item))
            except ValidationError:
                logger.debug("Skipping record without a usable name: %r", item)
    elif isinstance(payload, Mapping):
        for name, raw in payload.items():
            if not isinstance(name, str) or not isinstance(raw, Mapping):
                continue
            try:
                records.append(ConditionRecord.from_raw(name, raw))
            except ValidationError:
                logger.debug("Skipping record without a usable name: %r", name)
    else:
        raise SourceUnavailable(f"unexpected payload shape ({type(payload).__name__})")
    return records


def to_catalog(records: Iterable[ConditionRecord]) -> Dict[str, ConditionRecord]:
    catalog: Dict[str, ConditionRecord] = {}
    for record in records:
        catalog[record.name] = record
    return catalog


def expand_seed(seed: Sequence[ConditionRecord], target: int) -> List[ConditionRecord]:
    """Clone seed records until exactly ``target`` entries exist.

    Seeds sharing a name are merged first (last one wins), so every entry in
    the result has a distinct name. The first pass keeps the seed names, later
    passes append ``" #2"``, ``" #3"`` and so on. Every other field is deep
    copied unchanged.
    """

    unique = list(to_catalog(seed).values())
    if not unique or target <= 0:
        return []
    expanded: List[ConditionRecord] = []
    copies = math.ceil(target / len(unique))
    for copy_number in range(1, copies + 1):
        suffix = "" if copy_number == 1 else f" #{copy_number}"
        for record in unique:
            expanded.append(record.model_copy(update={"name": f"{record.name}{suffix}"}, deep=True))
            if len(expanded) >= target:
                return expanded
    return expanded


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


@dataclass
class SourceResult:
    source: str
    catalog: Optional[Dict[str, ConditionRecord]] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.catalog is not None


class CatalogSource:
    """Base class: subclasses implement ``fetch`` and may raise freely."""

    name = "source"

    async def fetch(self) -> Dict[str, ConditionRecord]:
        raise NotImplementedError

    async def attempt(self) -> SourceResult:
        try:
            catalog = await self.fetch()
        except (SourceUnavailable, RemoteServiceError) as exc:
            return SourceResult(self.name, reason=str(exc))
        except httpx.HTTPError as exc:
            return SourceResult(self.name, reason=f"transport error: {exc}")
        except (OSError, ValueError) as exc:
            return SourceResult(self.name, reason=f"unreadable data: {exc}")
        if not catalog:
            return SourceResult(self.name, reason="no usable records")
        return SourceResult(self.name, catalog=catalog)


class RemoteSource(CatalogSource):
    name = "remote"

    def __init__(self, client: RemoteCatalogClient) -> None:
        self.client = client

    async def fetch(self) -> Dict[str, ConditionRecord]:
        payload = await self.client.fetch_diseases()
        return to_catalog(records_from_payload(payload))


class BundledSource(CatalogSource):
    name = "bundled"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    async def fetch(self) -> Dict[str, ConditionRecord]:
        if not self.path.exists():
            raise SourceUnavailable(f"bundled dataset not found at {self.path}")
        payload = await asyncio.to_thread(_read_json, self.path)
        return to_catalog(records_from_payload(payload))


class DemoSource(CatalogSource):
    """Expand a small seed list into a larger, uniquely named demo catalog."""

    name = "demo"

    def __init__(
        self,
        seed_location: str,
        target_size: int,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.seed_location = seed_location
        self.target_size = target_size
        self.timeout = timeout
        self.transport = transport

    async def load_seed(self) -> Any:
        if self.seed_location.startswith(("http://", "https://")):
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.seed_location, headers={"Accept": "application/json"})
                response.raise_for_status()
                return response.json()
        path = Path(self.seed_location)
        if not path.exists():
            raise SourceUnavailable(f"seed dataset not found at {path}")
        return await asyncio.to_thread(_read_json, path)

    async def fetch(self) -> Dict[str, ConditionRecord]:
        seed = records_from_payload(await self.load_seed())
        return to_catalog(expand_seed(seed, self.target_size))


def build_sources(cfg: Settings) -> List[CatalogSource]:
    """Return the configured sources in precedence order."""

    sources: List[CatalogSource] = []
    if cfg.remote_enabled and cfg.remote_configured:
        sources.append(RemoteSource(RemoteCatalogClient(cfg)))
    if cfg.bundled_dataset_path is not None:
        sources.append(BundledSource(cfg.bundled_dataset_path))
    if cfg.demo_enabled:
        sources.append(DemoSource(cfg.demo_seed_location, cfg.demo_target_size, timeout=cfg.request_timeout_s))
    return sources
