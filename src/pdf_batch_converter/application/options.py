"""Typed option objects shared across batch use-cases."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_EXTENSION = ".pdf"
DEFAULT_SUFFIX = "_new"
DEFAULT_MAX_CONCURRENCY = 2
DEFAULT_OUTPUT_DIRNAME = "pdf_output"


@dataclass(frozen=True)
class NamingOptions:
    """Output file naming configuration."""

    suffix: str = DEFAULT_SUFFIX
    extension: str = DEFAULT_EXTENSION


@dataclass(frozen=True)
class BatchOptions:
    """Shared batch options passed through use-cases."""

    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    sequential: bool = False
    naming: NamingOptions = NamingOptions()
