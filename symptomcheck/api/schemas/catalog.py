"""Pydantic schemas for catalog records and predictions."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict
from pydantic.functional_validators import field_validator


def coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return ""


def coerce_string_list(value: Any) -> List[str]:
    """Keep string-like items of a list, dropping everything else."""

    if not isinstance(value, (list, tuple)):
        return []
    items: List[str] = []
    for item in value:
        if isinstance(item, str):
            items.append(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            items.append(str(item))
    return items


class ConditionRecord(BaseModel):
    """Symptom, description, precaution and medication profile of one condition."""

    name: str = Field(..., min_length=1)
    description: str = ""
    symptoms: List[str] = Field(default_factory=list)
    precautions: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value: Any) -> str:
        return coerce_text(value)

    @field_validator("symptoms", "precautions", "medications", mode="before")
    @classmethod
    def default_sequences(cls, value: Any) -> List[str]:
        return coerce_string_list(value)

    @classmethod
    def from_raw(cls, name: str, raw: Any) -> "ConditionRecord":
        """Build a record from an arbitrary value, treating non-mappings as empty."""

        data: Dict[str, Any] = dict(raw) if isinstance(raw, Mapping) else {}
        data["name"] = name
        return cls.model_validate(data)


class Prediction(BaseModel):
    disease: str
    match_percentage: float = Field(ge=0.0, le=100.0)
    description: str = ""
    precautions: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value: Any) -> str:
        return coerce_text(value)

    @field_validator("precautions", "medications", mode="before")
    @classmethod
    def default_sequences(cls, value: Any) -> List[str]:
        return coerce_string_list(value)


class DiseasesResponse(BaseModel):
    diseases: List[ConditionRecord]


class SymptomsResponse(BaseModel):
    symptoms: List[str]
    total: int


class PredictRequest(BaseModel):
    symptoms: List[str] = Field(..., min_length=1)


class PredictResponse(BaseModel):
    """Remote prediction payload; the local service returns a superset of it."""

    predictions: List[Prediction]


class PredictionOutcomeResponse(PredictResponse):
    engine: str
    state: str
    warnings: List[str] = Field(default_factory=list)


class SourceAttemptInfo(BaseModel):
    source: str
    ok: bool
    reason: Optional[str] = None
    record_count: int = 0


class CatalogStatusResponse(BaseModel):
    state: str
    source: Optional[str] = None
    record_count: int
    symptom_count: int
    loaded_at: Optional[datetime] = None
    attempts: List[SourceAttemptInfo] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
