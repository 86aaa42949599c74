# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from pathlib import Path

import pytest

from authorlint.errors import PluginResolutionError
from authorlint.plugin import AnalysisArguments
from authorlint.registry import PluginRegistry


class _StaticPlugin:
    def __init__(self) -> None:
        self.calls: list[AnalysisArguments] = []

    def process(self, args: AnalysisArguments) -> None:
        self.calls.append(args)


PLUGIN_SOURCE = "\n".join(
    [
        "LOADS = []",
        "LOADS.append(1)",
        "",
        "def process(args):",
        "    args.output.write_info('plugin ran')",
        "",
    ]
)


def test_reg_001_registered_plugin_wins(tmp_path: Path) -> None:
    registry = PluginRegistry()
    plugin = _StaticPlugin()

    registry.register("./spellcheck", plugin)

    assert registry.resolve("./spellcheck", base_path=tmp_path) is plugin


def test_reg_002_register_rejects_objects_without_process() -> None:
    registry = PluginRegistry()

    with pytest.raises(ValueError):
        registry.register("broken", object())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        registry.register("", _StaticPlugin())


def test_reg_003_relative_file_plugin_resolves_without_suffix(
    tmp_path: Path, write_file
) -> None:
    write_file(tmp_path / "spellcheck.py", PLUGIN_SOURCE)
    registry = PluginRegistry()

    plugin = registry.resolve("./spellcheck", base_path=tmp_path)

    assert callable(plugin.process)


def test_reg_004_file_plugin_is_loaded_once(tmp_path: Path, write_file) -> None:
    write_file(tmp_path / "plugins" / "style.py", PLUGIN_SOURCE)
    registry = PluginRegistry()

    first = registry.resolve("plugins/style.py", base_path=tmp_path)
    second = registry.resolve("./plugins/style", base_path=tmp_path)

    assert first is second
    assert first.LOADS == [1]  # type: ignore[attr-defined]


def test_reg_005_package_directory_plugin_resolves(tmp_path: Path, write_file) -> None:
    write_file(tmp_path / "grammar" / "__init__.py", "from .rules import process\n")
    write_file(
        tmp_path / "grammar" / "rules.py",
        "def process(args):\n    return None\n",
    )
    registry = PluginRegistry()

    plugin = registry.resolve("./grammar", base_path=tmp_path)

    assert callable(plugin.process)


def test_reg_006_missing_file_plugin_fails_resolution(tmp_path: Path) -> None:
    registry = PluginRegistry()

    with pytest.raises(PluginResolutionError):
        registry.resolve("./missing", base_path=tmp_path)


def test_reg_007_load_time_error_fails_resolution(tmp_path: Path, write_file) -> None:
    write_file(tmp_path / "boom.py", "raise RuntimeError('boom at import')\n")
    registry = PluginRegistry()

    with pytest.raises(PluginResolutionError) as exc_info:
        registry.resolve("./boom", base_path=tmp_path)

    assert "boom at import" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_reg_008_plugin_without_process_fails_resolution(
    tmp_path: Path, write_file
) -> None:
    write_file(tmp_path / "empty.py", "VALUE = 1\n")
    registry = PluginRegistry()

    with pytest.raises(PluginResolutionError):
        registry.resolve("./empty", base_path=tmp_path)


def test_reg_009_module_name_is_imported(tmp_path: Path, write_file, monkeypatch) -> None:
    write_file(tmp_path / "authorlint_test_plugin_mod.py", PLUGIN_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    registry = PluginRegistry()

    plugin = registry.resolve("authorlint_test_plugin_mod")

    assert callable(plugin.process)


def test_reg_010_unknown_module_name_fails_resolution() -> None:
    registry = PluginRegistry()

    with pytest.raises(PluginResolutionError):
        registry.resolve("authorlint_no_such_plugin_module")
