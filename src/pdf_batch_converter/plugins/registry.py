"""Plugin registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from pydantic import ValidationError

from pdf_batch_converter.errors import PluginError
from pdf_batch_converter.plugins.base import ConverterPlugin
from pdf_batch_converter.plugins.builtins import PypdfRewritePlugin
from pdf_batch_converter.schemas import ConverterResolutionConfig


class PluginRegistry:
    """Registry for converter plugins."""

    def __init__(self) -> None:
        self._plugins: dict[str, ConverterPlugin] = {}

    def register(self, plugin: ConverterPlugin) -> None:
        """Register plugin instance by unique name.

        Parameters
        ----------
        plugin : ConverterPlugin
            Plugin instance to register. A later plugin with the same name
            replaces the earlier one.

        Raises
        ------
        PluginError
            If plugin does not provide a valid name.
        """
        name = getattr(plugin, "name", "").strip()
        if not name:
            raise PluginError("Plugin must define a non-empty 'name'.")
        self._plugins[name] = plugin

    def names(self) -> list[str]:
        """Return sorted registered plugin names."""
        return sorted(self._plugins.keys())

    def get(self, name: str) -> ConverterPlugin:
        """Get plugin by name.

        Raises
        ------
        PluginError
            If plugin name is not registered.
        """
        try:
            return self._plugins[name]
        except KeyError as exc:
            raise PluginError(
                f"Unknown converter '{name}'. Available converters: {', '.join(self.names())}"
            ) from exc

    def resolve(self, extension: str, plugin_name: str | None = None) -> ConverterPlugin:
        """Resolve plugin either explicitly or by ``can_handle`` lookup.

        Parameters
        ----------
        extension : str
            Extension of the files that will be converted.
        plugin_name : str | None, default=None
            Explicit plugin name.

        Returns
        -------
        ConverterPlugin
            Resolved plugin.

        Raises
        ------
        PluginError
            If no plugin (or multiple plugins) can handle the extension.
        """
        try:
            payload = ConverterResolutionConfig(
                extension=extension,
                converter_name=plugin_name,
            )
        except ValidationError as exc:
            raise PluginError(f"Invalid converter resolution options: {exc}") from exc

        if payload.converter_name:
            return self.get(payload.converter_name)

        matches = [
            plugin
            for plugin in self._plugins.values()
            if plugin.can_handle(payload.extension)
        ]
        if not matches:
            raise PluginError(
                f"No converter can handle '{payload.extension}' files. "
                f"Available converters: {', '.join(self.names())}"
            )
        if len(matches) > 1:
            names = ", ".join(plugin.name for plugin in matches)
            raise PluginError(
                f"Multiple converters can handle '{payload.extension}' files "
                f"({names}). Pass --converter explicitly."
            )
        return matches[0]

    def load_module(self, module_or_path: str) -> None:
        """Load converter plugins from module name or file path.

        .. warning::
            This executes code from the specified module. Only load plugins
            from trusted sources.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Parameters
    ----------
    module_or_path : str
        Python module path or local ``.py`` file path.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    PluginError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise PluginError(f"Unable to load plugin module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise PluginError(f"Unable to execute plugin module {candidate}: {exc}") from exc
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise PluginError(
            f"Unable to import plugin module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: PluginRegistry) -> None:
    """Register plugin definitions found in module.

    The module must expose ``register_plugins(registry)``, ``PLUGINS`` or
    ``PLUGIN``, checked in that order.
    """
    if hasattr(module, "register_plugins"):
        module.register_plugins(registry)
        return

    plugins_obj = getattr(module, "PLUGINS", None)
    if plugins_obj is not None:
        for plugin in plugins_obj:
            registry.register(plugin)
        return

    plugin_obj = getattr(module, "PLUGIN", None)
    if plugin_obj is not None:
        registry.register(plugin_obj)
        return

    raise PluginError(
        "Plugin module must expose register_plugins(registry), PLUGINS, or PLUGIN."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> PluginRegistry:
    """Create registry with the built-in converters plus ``extra_modules``."""
    registry = PluginRegistry()
    registry.register(PypdfRewritePlugin())
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
