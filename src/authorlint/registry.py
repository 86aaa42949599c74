# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Plugin registry resolving analysis plugin identifiers."""

import hashlib
import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

from authorlint.errors import PluginResolutionError
from authorlint.plugin import AnalysisPlugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Map plugin identifiers to plugin implementations.

    Identifiers are looked up in this order: statically registered plugins,
    file paths (relative to the project directory), importable module names.
    Dynamically loaded plugins are cached so a module is executed once.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._registered: dict[str, AnalysisPlugin] = {}
        self._loaded: dict[str, AnalysisPlugin] = {}

    def register(self, identifier: str, plugin: AnalysisPlugin) -> None:
        """Bind an identifier to a plugin implementation.

        Args:
            identifier: Identifier used by ``analysis.plugin`` entries.
            plugin: Any object exposing a callable ``process``.

        Raises:
            ValueError: If the identifier is empty or the plugin has no ``process``.
        """
        if not identifier:
            raise ValueError("Plugin identifier must not be empty.")
        if not callable(getattr(plugin, "process", None)):
            raise ValueError(f"Plugin {identifier!r} does not expose process(args).")
        self._registered[identifier] = plugin

    def resolve(self, identifier: str, base_path: Path | None = None) -> AnalysisPlugin:
        """Resolve an identifier to a plugin.

        Args:
            identifier: Registered name, plugin file path or module name.
            base_path: Directory used for relative file identifiers.

        Returns:
            Plugin exposing ``process(args)``.

        Raises:
            PluginResolutionError: If the plugin cannot be found or fails to load.
        """
        if identifier in self._registered:
            return self._registered[identifier]
        if not identifier:
            raise PluginResolutionError("Plugin identifier must not be empty.")

        if _looks_like_path(identifier):
            plugin_path = _find_plugin_file(identifier, base_path or Path.cwd())
            cache_key = str(plugin_path)
            if cache_key not in self._loaded:
                self._loaded[cache_key] = _check_entry_point(
                    identifier, _load_module_from_path(identifier, plugin_path)
                )
            return self._loaded[cache_key]

        if identifier not in self._loaded:
            self._loaded[identifier] = _check_entry_point(
                identifier, _import_module(identifier)
            )
        return self._loaded[identifier]


def _looks_like_path(identifier: str) -> bool:
    return (
        identifier.startswith((".", "/", "~"))
        or "/" in identifier
        or "\\" in identifier
        or identifier.endswith(".py")
    )


def _find_plugin_file(identifier: str, base_path: Path) -> Path:
    """Locate the file behind a path-like identifier.

    ``name``, ``name.py`` and ``name/__init__.py`` are tried in that order.
    """
    path = Path(identifier).expanduser()
    if not path.is_absolute():
        path = base_path / path
    candidates = [path, path / "__init__.py"]
    if path.name and path.suffix != ".py":
        candidates.insert(1, path.with_name(f"{path.name}.py"))
    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()
    raise PluginResolutionError(f"Plugin file not found: {identifier} (base_path={base_path})")


def _load_module_from_path(identifier: str, path: Path) -> ModuleType:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    stem = path.parent.name if path.name == "__init__.py" else path.stem
    module_name = f"authorlint_plugin_{stem}_{digest}"
    search_locations = [str(path.parent)] if path.name == "__init__.py" else None
    spec = importlib.util.spec_from_file_location(
        module_name, str(path), submodule_search_locations=search_locations
    )
    if spec is None or spec.loader is None:
        raise PluginResolutionError(f"Unable to import plugin file: {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        logger.warning(f"Plugin failed while loading (plugin={identifier} path={path} error={exc})")
        raise PluginResolutionError(f"Cannot load plugin {identifier}: {exc}") from exc
    logger.debug(f"Loaded plugin from file (plugin={identifier} path={path})")
    return module


def _import_module(identifier: str) -> ModuleType:
    try:
        module = importlib.import_module(identifier)
    except Exception as exc:
        logger.warning(f"Plugin import failed (plugin={identifier} error={exc})")
        raise PluginResolutionError(f"Cannot load plugin {identifier}: {exc}") from exc
    logger.debug(f"Imported plugin module (plugin={identifier})")
    return module


def _check_entry_point(identifier: str, module: ModuleType) -> AnalysisPlugin:
    if not callable(getattr(module, "process", None)):
        raise PluginResolutionError(f"Plugin {identifier} does not expose process(args).")
    return module  # type: ignore[return-value]
