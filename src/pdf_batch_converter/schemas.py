"""Pydantic schemas for runtime validation of batch inputs."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pdf_batch_converter.application.discovery import normalize_extension
from pdf_batch_converter.application.options import (
    DEFAULT_EXTENSION,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_OUTPUT_DIRNAME,
    DEFAULT_SUFFIX,
)

_SEPARATORS = {"/", "\\", os.sep}


def _reject_separators(value: str, label: str) -> str:
    if any(sep in value for sep in _SEPARATORS):
        raise ValueError(f"{label} cannot contain path separators.")
    return value


class BatchRunConfig(BaseModel):
    """Validated input for a directory batch conversion."""

    model_config = ConfigDict(extra="forbid")

    source_root: Path
    output_root: Path | None = None
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    extension: str = DEFAULT_EXTENSION
    suffix: str = DEFAULT_SUFFIX
    sequential: bool = False

    @field_validator("source_root", "output_root")
    @classmethod
    def _absolute(cls, value: Path | None) -> Path | None:
        if value is None:
            return None
        return Path(os.path.abspath(value))

    @field_validator("max_concurrency")
    @classmethod
    def _clamp_concurrency(cls, value: int) -> int:
        return max(1, value)

    @field_validator("extension")
    @classmethod
    def _validate_extension(cls, value: str) -> str:
        normalized = normalize_extension(value)
        if normalized == ".":
            raise ValueError("extension cannot be empty.")
        return _reject_separators(normalized, "extension")

    @field_validator("suffix")
    @classmethod
    def _validate_suffix(cls, value: str) -> str:
        if not value:
            raise ValueError("suffix cannot be empty.")
        return _reject_separators(value, "suffix")

    @property
    def resolved_output_root(self) -> Path:
        """Output root, defaulting to a fixed subdirectory of the source root."""
        return self.output_root or self.source_root / DEFAULT_OUTPUT_DIRNAME


class ConverterResolutionConfig(BaseModel):
    """Validated input for converter plugin resolution."""

    model_config = ConfigDict(extra="forbid")

    extension: str = Field(default=DEFAULT_EXTENSION, min_length=1)
    converter_name: str | None = None
    converter_modules: list[str] = Field(default_factory=list)

    @field_validator("extension")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_extension(value)

    @field_validator("converter_name")
    @classmethod
    def _strip_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None
