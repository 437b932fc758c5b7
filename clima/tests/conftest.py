"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from clima.config.schema import ClimaConfig


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def berlin_geocoding(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "geocoding_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def berlin_forecast(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "forecast_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "clima.db"


@pytest.fixture
def clima_config(db_path: Path) -> ClimaConfig:
    """Config pointed at fake API hosts and a temporary database."""
    return ClimaConfig(
        api={
            "geocoding_base_url": "https://test-geo.example.com",
            "forecast_base_url": "https://test-forecast.example.com",
        },
        storage={"db_path": str(db_path)},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path, db_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {
            "geocoding_base_url": "https://test-geo.example.com",
            "forecast_base_url": "https://test-forecast.example.com",
            "timeout_seconds": 5.0,
        },
        "storage": {"db_path": str(db_path)},
    }
    path = tmp_path / "clima_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
