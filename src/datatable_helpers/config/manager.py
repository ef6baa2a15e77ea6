"""Configuration manager — read/write TOML config, resolve output settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from datatable_helpers.config.constants import (
    CONFIG_FILE,
    DEFAULT_FORMAT,
    ENV_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)
from datatable_helpers.config.models import CLIConfig
from datatable_helpers.errors import ConfigurationError

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        try:
            data = tomllib.loads(raw.decode())
            return CLIConfig(**data)
        except (tomllib.TOMLDecodeError, ValidationError) as exc:
            raise ConfigurationError(f"Invalid config file {self.config_path}: {exc}") from exc

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = self.config.model_dump(exclude_none=True)
        # Remove defaults to keep config clean
        if data.get("default_format") == DEFAULT_FORMAT:
            del data["default_format"]
        if data.get("escape_html") is True:
            del data["escape_html"]
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        temp.write_bytes(tomli_w.dumps(data).encode())
        temp.replace(self.config_path)

    def set_format(self, fmt: str) -> None:
        self._config = self.config.model_copy(
            update={"default_format": CLIConfig(default_format=fmt).default_format},
        )
        self.save()

    def set_escape(self, escape: bool) -> None:
        self.config.escape_html = escape
        self.save()

    def set_title(self, title: str | None) -> None:
        self.config.title = title or None
        self.save()

    def reset(self) -> bool:
        self._config = CLIConfig()
        if not self.config_path.exists():
            return False
        self.config_path.unlink()
        return True

    def resolve_format(self, fmt: str | None = None) -> str:
        """Resolve the output format.

        Precedence: CLI flag > env var > config file.
        """
        resolved = fmt or os.environ.get(ENV_OUTPUT_FORMAT) or self.config.default_format
        resolved = resolved.strip().lower()
        if resolved not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format '{resolved}'. "
                f"Choose one of: {', '.join(OUTPUT_FORMATS)}."
            )
        return resolved
