"""In-memory owner of the loaded condition catalog."""
from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..schemas.catalog import ConditionRecord
from ..services.matching import build_symptom_index


class CatalogStore:
    """Hold the current catalog and the symptom index derived from it.

    The catalog is only ever replaced wholesale; readers get a read-only view
    of whichever snapshot was current when they asked.
    """

    def __init__(self) -> None:
        self._snapshot: Tuple[Mapping[str, ConditionRecord], Tuple[str, ...]] = (MappingProxyType({}), ())
        self.source: Optional[str] = None
        self.loaded_at: Optional[datetime] = None

    @property
    def catalog(self) -> Mapping[str, ConditionRecord]:
        return self._snapshot[0]

    @property
    def symptoms(self) -> List[str]:
        return list(self._snapshot[1])

    @property
    def is_empty(self) -> bool:
        return not self._snapshot[0]

    def __len__(self) -> int:
        return len(self._snapshot[0])

    def replace(self, catalog: Mapping[str, ConditionRecord], source: Optional[str]) -> None:
        frozen: Dict[str, ConditionRecord] = dict(catalog)
        index = tuple(build_symptom_index(frozen))
        self._snapshot = (MappingProxyType(frozen), index)
        self.source = source
        self.loaded_at = datetime.now(timezone.utc)

    def clear(self) -> None:
        self.replace({}, None)

    def records(self) -> List[ConditionRecord]:
        return list(self._snapshot[0].values())
