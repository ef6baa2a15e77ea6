"""Shared helpers for CLI commands — options, record loading, record models."""

from __future__ import annotations

import csv
import json
import keyword
import re
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from pydantic import BaseModel, Field, create_model

from datatable_helpers.config.manager import ConfigManager
from datatable_helpers.errors import RecordLoadError

# Shared Typer option type aliases
PathArg = Annotated[
    Path,
    typer.Argument(help="JSON, CSV, or YAML file of records", exists=True, dir_okay=False),
]
FormatOpt = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format (table, html, html-raw, csv, json, yaml)"),
]
TitleOpt = Annotated[
    str | None,
    typer.Option("--title", "-t", help="Table title"),
]


def get_manager() -> ConfigManager:
    return ConfigManager()


def extract_items(data: Any, *fallback_keys: str) -> list[Any]:
    """Extract a list of records from a loaded document.

    Tries ``data`` directly if it's a list, then checks ``items``, then
    each *fallback_keys* in order, falling back to an empty list.
    """
    if isinstance(data, list):
        return list(data)
    if isinstance(data, dict):
        if "items" in data:
            return list(data["items"])
        for key in fallback_keys:
            if key in data:
                return list(data[key])
    return []


def load_records(path: Path) -> list[dict[str, Any]]:
    """Load a list of records (dicts) from a JSON, CSV, or YAML file."""
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
        if suffix == ".csv":
            return [dict(r) for r in csv.DictReader(text.splitlines())]
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        elif suffix == ".json":
            data = json.loads(text)
        else:
            raise RecordLoadError(f"Unsupported file type '{suffix or path.name}'. Use .json, .csv, .yaml, or .yml.")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RecordLoadError(f"Cannot read {path}: {exc}") from exc

    items = extract_items(data, "records", "rows")
    bad = [i for i, item in enumerate(items) if not isinstance(item, dict)]
    if bad:
        raise RecordLoadError(f"Item {bad[0]} in {path} is not an object.")
    return items


def _field_name(key: str, index: int, used: set[str]) -> str:
    name = re.sub(r"\W+", "_", key).strip("_").lower()
    if (
        not name
        or name[0].isdigit()
        or keyword.iskeyword(name)
        or name.startswith("model_")
        or hasattr(BaseModel, name)
    ):
        name = f"column_{index}"
    while name in used:
        name = f"{name}_{index}"
    used.add(name)
    return name


def _column_title(key: str, index: int, used: set[str]) -> str:
    # Column names are unique ignoring case
    title = key
    while title.casefold() in used:
        title = f"{title}_{index}"
    used.add(title.casefold())
    return title


def _infer_type(values: list[Any]) -> Any:
    kinds = {type(v) for v in values if v is not None}
    if len(kinds) == 1:
        return kinds.pop()
    if kinds == {int, float}:
        return float
    return Any


def build_record_model(records: list[dict[str, Any]], name: str = "Record") -> type[BaseModel]:
    """Build a pydantic model for *records*.

    One optional field per key, in order of first appearance. Field names are
    identifier-safe. Each field's alias is the original key and its title is
    the column header: the key itself, suffixed with its position when it
    clashes with an earlier key ignoring case.
    """
    keys: list[str] = []
    for record in records:
        for key in record:
            if key not in keys:
                keys.append(key)

    used: set[str] = set()
    used_titles: set[str] = set()
    fields: dict[str, Any] = {}
    for index, key in enumerate(keys):
        value_type = _infer_type([r.get(key) for r in records])
        fields[_field_name(str(key), index, used)] = (
            value_type | None if value_type is not Any else Any,
            Field(default=None, title=_column_title(str(key), index, used_titles),
                  alias=str(key)),
        )
    return create_model(name, **fields)
