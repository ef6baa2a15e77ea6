"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from datatable_helpers.config.constants import DEFAULT_FORMAT, OUTPUT_FORMATS


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_format: str = Field(default=DEFAULT_FORMAT, description="Output format used when --format is omitted")
    escape_html: bool = Field(default=True, description="HTML-escape headers and cells in 'html' output")
    title: str | None = Field(default=None, description="Title shown above rendered tables")

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v
