"""Application use-cases orchestrating batch conversion workflows."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from pdf_batch_converter.application.aggregator import aggregate
from pdf_batch_converter.application.discovery import RecursiveFileDiscoverer
from pdf_batch_converter.application.dispatcher import ConversionDispatcher
from pdf_batch_converter.application.options import BatchOptions, NamingOptions
from pdf_batch_converter.application.ports import DocumentConverter, FileDiscoverer
from pdf_batch_converter.application.results import BatchReport
from pdf_batch_converter.errors import InvalidConfigurationError
from pdf_batch_converter.plugins.registry import create_default_registry
from pdf_batch_converter.schemas import BatchRunConfig

logger = logging.getLogger(__name__)


def convert_directory(
    *,
    source_root: Path,
    output_root: Path | None,
    options: BatchOptions,
    converter: DocumentConverter | None = None,
    converter_name: str | None = None,
    converter_modules: Iterable[str] | None = None,
    discoverer: FileDiscoverer | None = None,
) -> BatchReport:
    """Use-case: discover source files and convert them into a mirrored tree.

    Raises
    ------
    InvalidConfigurationError
        If the batch parameters are invalid.
    PluginError
        If no converter was given and none can be resolved.
    RootNotFoundError
        If ``source_root`` is not an existing directory.
    """
    try:
        config = BatchRunConfig(
            source_root=source_root,
            output_root=output_root,
            max_concurrency=options.max_concurrency,
            extension=options.naming.extension,
            suffix=options.naming.suffix,
            sequential=options.sequential,
        )
    except ValidationError as exc:
        raise InvalidConfigurationError(f"Invalid batch parameters: {exc}") from exc

    if converter is None:
        registry = create_default_registry(extra_modules=converter_modules)
        converter = registry.resolve(config.extension, converter_name)
    discoverer = discoverer or RecursiveFileDiscoverer()

    resolved_output = config.resolved_output_root
    exclude = [resolved_output] if resolved_output.is_relative_to(config.source_root) else []
    files = discoverer.discover(config.source_root, config.extension, exclude=exclude)
    logger.info(
        "Found %d %s files under %s", len(files), config.extension, config.source_root
    )
    if not files:
        return aggregate([], total_elapsed=0.0, output_root=resolved_output)

    dispatcher = ConversionDispatcher(converter, resolved_output, suffix=config.suffix)
    if config.sequential:
        return dispatcher.run_sequential(files, config.source_root)
    return dispatcher.run_parallel(files, config.source_root, config.max_concurrency)


def build_batch_options(
    *,
    max_concurrency: int = 2,
    sequential: bool = False,
    extension: str = ".pdf",
    suffix: str = "_new",
) -> BatchOptions:
    """Build typed option object from command/API params."""
    return BatchOptions(
        max_concurrency=max_concurrency,
        sequential=sequential,
        naming=NamingOptions(suffix=suffix, extension=extension),
    )
