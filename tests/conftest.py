"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from datatable_helpers.config.constants import ENV_OUTPUT_FORMAT
from datatable_helpers.config.manager import ConfigManager
from datatable_helpers.models.table import DataTable


@pytest.fixture(autouse=True)
def _clear_format_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_OUTPUT_FORMAT, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def table() -> DataTable:
    """Return an empty table."""
    return DataTable("people")


@pytest.fixture
def sample_records() -> list[dict]:
    """Records as they would be read from a file."""
    return [
        {"name": "Ada", "age": 36, "city": "London"},
        {"name": "<b>Bob</b>", "age": None, "city": "Paris"},
    ]


@pytest.fixture
def records_json(tmp_path: Path, sample_records: list[dict]) -> Path:
    path = tmp_path / "people.json"
    path.write_text(json.dumps(sample_records))
    return path


@pytest.fixture
def records_csv(tmp_path: Path) -> Path:
    path = tmp_path / "people.csv"
    path.write_text("name,city\nAda,London\nBob,Paris\n")
    return path


@pytest.fixture
def records_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "people.yaml"
    path.write_text("items:\n  - name: Ada\n    age: 36\n  - name: Bob\n    age: 41\n")
    return path
