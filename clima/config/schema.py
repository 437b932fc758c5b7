"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from clima.ingest.forecast_client import FORECAST_BASE_URL
from clima.ingest.geocoding_client import GEOCODING_BASE_URL


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding_base_url: str = GEOCODING_BASE_URL
    forecast_base_url: str = FORECAST_BASE_URL
    language: str = Field(default="pt", min_length=2)
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/clima.db"


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ClimaConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    storage: StorageConfig = StorageConfig()
    logging: LoggingConfig = LoggingConfig()
