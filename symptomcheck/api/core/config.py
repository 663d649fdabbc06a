"""Application configuration loaded from the environment."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = ROOT / "data"
DEFAULT_SEED_PATH = DATA_DIR / "disease.json"


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    ui_port: int = Field(default=8501, alias="UI_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_allow_origins: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")

    remote_enabled: bool = Field(default=False, alias="REMOTE_ENABLED")
    remote_base_url: str = Field(default="", alias="REMOTE_BASE_URL")
    remote_predict_enabled: bool = Field(default=False, alias="REMOTE_PREDICT_ENABLED")
    remote_retry_attempts: int = Field(default=1, ge=1, alias="REMOTE_RETRY_ATTEMPTS")
    request_timeout_s: float = Field(default=10.0, gt=0, alias="REQUEST_TIMEOUT_S")

    bundled_dataset_path: Optional[Path] = Field(default=None, alias="BUNDLED_DATASET_PATH")
    demo_enabled: bool = Field(default=True, alias="DEMO_ENABLED")
    demo_seed_location: str = Field(default=str(DEFAULT_SEED_PATH), alias="DEMO_SEED_LOCATION")
    demo_target_size: int = Field(default=500, ge=1, alias="DEMO_TARGET_SIZE")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("bundled_dataset_path", mode="before")
    @classmethod
    def _empty_path_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def allowed_origins(self) -> List[str]:
        items = [item.strip() for item in self.cors_allow_origins.split(",") if item.strip()]
        return items or ["*"]

    @property
    def remote_configured(self) -> bool:
        return bool(self.remote_base_url.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
