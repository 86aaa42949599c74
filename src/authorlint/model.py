# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for loaded content and project configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from authorlint.errors import ProjectLoadError


@dataclass(frozen=True)
class Location:
    """Represent a half-open range inside one document.

    Attributes:
        path: Document path the range belongs to.
        begin_line: Start line (0-based).
        begin_column: Start column (0-based).
        end_line: End line (0-based).
        end_column: End column (0-based, exclusive).
    """

    path: str
    begin_line: int
    begin_column: int
    end_line: int
    end_column: int

    def __post_init__(self) -> None:
        if self.begin_line > self.end_line:
            raise ValueError(
                f"begin_line must not exceed end_line ({self.begin_line} > {self.end_line})"
            )
        if self.begin_line == self.end_line and self.begin_column > self.end_column:
            raise ValueError(
                f"begin_column must not exceed end_column ({self.begin_column} > {self.end_column})"
            )

    @classmethod
    def at(cls, path: str, line: int = 0, column: int = 0) -> "Location":
        """Build a zero-width location at one position."""
        return cls(
            path=path,
            begin_line=line,
            begin_column=column,
            end_line=line,
            end_column=column,
        )

    def __str__(self) -> str:
        return f"{self.path}:{self.begin_line + 1}:{self.begin_column + 1}"


@dataclass(frozen=True)
class Line:
    """Represent one physical line of a document."""

    location: Location
    text: str


@dataclass(frozen=True)
class Analysis:
    """Represent one configured analysis.

    Attributes:
        name: Display name used to attribute diagnostics.
        plugin: Plugin identifier (module name or path).
        settings: Plugin specific settings, passed through untouched.
    """

    name: str
    plugin: str
    settings: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Analysis":
        """Build an analysis from one project file entry.

        Args:
            data: Parsed ``analysis`` list entry.

        Returns:
            Analysis with unknown keys collected into ``settings`` unless the
            entry carries an explicit ``settings`` value.

        Raises:
            ProjectLoadError: If ``name`` or ``plugin`` is missing or not a string.
        """
        name = data.get("name")
        plugin = data.get("plugin")
        if not isinstance(name, str) or not isinstance(plugin, str):
            raise ProjectLoadError(
                f"Analysis entries require string 'name' and 'plugin' fields: {data!r}"
            )
        if "settings" in data:
            settings = data["settings"]
        else:
            settings = {
                key: value
                for key, value in data.items()
                if key not in {"name", "plugin"}
            }
        return cls(name=name, plugin=plugin, settings=settings)


@dataclass(frozen=True)
class Project:
    """Represent a loaded project configuration.

    Attributes:
        analysis: Analyses to run, in configured order.
        path: Project file path; ``None`` for projects built in memory.
        data: Raw parsed project object, including fields the core ignores.
    """

    analysis: tuple[Analysis, ...]
    path: Path | None = None
    data: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Any, path: Path | None = None) -> "Project":
        """Build a project from a parsed project file.

        Args:
            data: Parsed JSON object.
            path: Location of the project file, if any.

        Returns:
            Immutable project.

        Raises:
            ProjectLoadError: If the object has no usable ``analysis`` list.
        """
        if not isinstance(data, dict):
            raise ProjectLoadError(f"Project file must contain a JSON object (path={path})")
        entries = data.get("analysis")
        if not isinstance(entries, list):
            raise ProjectLoadError(f"Project file requires an 'analysis' list (path={path})")
        analysis = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise ProjectLoadError(
                    f"Analysis entries must be JSON objects (path={path} entry={entry!r})"
                )
            analysis.append(Analysis.from_dict(entry))
        return cls(analysis=tuple(analysis), path=path, data=data)

    @property
    def base_path(self) -> Path:
        """Directory used to resolve relative plugin identifiers."""
        if self.path is None:
            return Path.cwd()
        return self.path.parent


@dataclass
class Content:
    """Represent one loaded document.

    ``lines`` is only mutated while loading (the metadata header is cut off);
    consumers treat it as read-only.
    """

    path: str
    project: Project | None = None
    lines: list[Line] = field(default_factory=list)
    metadata: dict[str, Any] | None = None

    def index_of_text(self, needle: str, from_index: int = 0) -> int:
        """Find the first line whose text equals ``needle``.

        Args:
            needle: Exact line text to look for.
            from_index: First line index to inspect.

        Returns:
            Index of the matching line, or ``-1`` when there is none.
        """
        for index in range(max(0, from_index), len(self.lines)):
            if self.lines[index].text == needle:
                return index
        return -1

    def get_text(self, from_index: int, to_index: int) -> str:
        """Join the text of ``lines[from_index:to_index]`` with line feeds."""
        return "\n".join(line.text for line in self.lines[from_index:to_index])
