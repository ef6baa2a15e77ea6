"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "datatable-helpers"
APP_AUTHOR = "datatable-helpers"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_OUTPUT_FORMAT = "DATATABLE_HELPERS_FORMAT"

# Output defaults
OUTPUT_FORMATS = ("table", "html", "html-raw", "csv", "json", "yaml")
DEFAULT_FORMAT = "table"
