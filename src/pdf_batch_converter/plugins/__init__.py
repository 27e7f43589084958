"""Plugin interfaces and registry for single-file converters."""

from .base import ConverterPlugin
from .registry import PluginRegistry, create_default_registry

__all__ = ["ConverterPlugin", "PluginRegistry", "create_default_registry"]
