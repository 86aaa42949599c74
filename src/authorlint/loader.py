# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Content and project loading."""

import concurrent.futures
import json
import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from authorlint.errors import AuthorlintError, ContentLoadError, ProjectLoadError
from authorlint.metadata import extract_metadata
from authorlint.model import Content, Line, Location, Project

logger = logging.getLogger(__name__)

PROJECT_FILE_NAME = "project.aipj"


@dataclass(frozen=True)
class LoadContentOptions:
    """Describe options shared by every load in one run.

    Attributes:
        project_path: Explicit project file; ``None`` searches upward from
            each content path.
    """

    project_path: Path | None = None


@dataclass(frozen=True)
class LoadOutcome:
    """Represent the result of loading one content path.

    Attributes:
        content_path: Path as requested by the caller.
        content: Loaded content; ``None`` when the file is absent or loading failed.
        error: Fatal load failure for this path, if any.
    """

    content_path: str
    content: Content | None
    error: Exception | None = None


def find_project_path(content_path: Path) -> Path | None:
    """Search upward for a project file next to or above ``content_path``.

    The file name is matched case-insensitively. The search starts in the
    content's directory (or in ``content_path`` itself when it is a directory)
    and stops at the first directory holding a project file.

    Args:
        content_path: Content file or directory.

    Returns:
        Path of the nearest project file, or ``None`` when no ancestor has one.
    """
    start = content_path.resolve()
    directory = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        try:
            entries = sorted(candidate_dir.iterdir())
        except OSError as exc:
            logger.debug(f"Skipping unreadable directory (path={candidate_dir} error={exc})")
            continue
        for entry in entries:
            if entry.name.lower() == PROJECT_FILE_NAME and entry.is_file():
                return entry
    return None


class Loader:
    """Load content files together with their projects.

    Projects are cached by path, so every content under one project shares
    the same immutable ``Project`` instance.
    """

    def __init__(self, max_workers: int = 4) -> None:
        """Initialize loader.

        Args:
            max_workers: Maximum number of threads used by ``load_contents``.

        Raises:
            ValueError: If ``max_workers`` is not greater than zero.
        """
        if max_workers <= 0:
            raise ValueError("max_workers must be > 0")
        self._max_workers = max_workers
        self._projects: dict[Path, Project] = {}
        self._lock = threading.Lock()

    def load_contents(
        self, content_paths: Iterable[str | Path], options: LoadContentOptions
    ) -> Iterator[LoadOutcome]:
        """Load many content paths independently.

        Outcomes are yielded as loads complete, in no particular order. A
        failure of one path is captured in its outcome and never stops the
        others.

        Args:
            content_paths: Content files to load.
            options: Load options shared by all paths.

        Yields:
            One outcome per content path.
        """
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=self._max_workers
        ) as executor:
            future_to_path = {
                executor.submit(self.load_content, content_path, options): str(
                    content_path
                )
                for content_path in content_paths
            }
            for future in concurrent.futures.as_completed(future_to_path):
                content_path = future_to_path[future]
                try:
                    content = future.result()
                except AuthorlintError as exc:
                    logger.warning(f"Load failed (content_path={content_path} error={exc})")
                    yield LoadOutcome(content_path=content_path, content=None, error=exc)
                    continue
                except Exception as exc:
                    logger.exception(f"Unexpected load failure (content_path={content_path})")
                    yield LoadOutcome(content_path=content_path, content=None, error=exc)
                    continue
                yield LoadOutcome(content_path=content_path, content=content)

    def load_content(
        self, content_path: str | Path, options: LoadContentOptions
    ) -> Content | None:
        """Load one content file, its project and its metadata header.

        Args:
            content_path: Content file to load.
            options: Load options.

        Returns:
            Loaded content, or ``None`` when the content file does not exist.

        Raises:
            ProjectLoadError: If the project file is unreadable or malformed.
            ContentLoadError: If the content file exists but cannot be read.
            MetadataError: If the metadata header cannot be parsed.
        """
        path = Path(content_path)
        project = self.load_project(path, options)

        if not path.is_file():
            logger.info(f"Content file not found; skipping (content_path={content_path})")
            return None

        try:
            with path.open(encoding="utf-8", newline="") as handle:
                data = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentLoadError(f"Cannot read content file {content_path}: {exc}") from exc

        content = Content(path=str(content_path), project=project)
        content.lines = _split_lines(content.path, data)
        extract_metadata(content)
        logger.debug(
            f"Loaded content (content_path={content_path} lines={len(content.lines)} "
            f"metadata={content.metadata is not None})"
        )
        return content

    def load_project(
        self, content_path: Path, options: LoadContentOptions
    ) -> Project | None:
        """Load the project associated with a content path.

        Args:
            content_path: Content file the project is resolved for.
            options: Load options; ``project_path`` overrides the upward search.

        Returns:
            Loaded project, or ``None`` when no project file exists.

        Raises:
            ProjectLoadError: If the project file cannot be read or parsed.
        """
        if options.project_path is not None:
            project_path: Path | None = options.project_path
        else:
            project_path = find_project_path(content_path)

        if project_path is None or not project_path.is_file():
            logger.info(
                f"No project file found (content_path={content_path} project_path={project_path})"
            )
            return None

        key = project_path.resolve()
        with self._lock:
            cached = self._projects.get(key)
        if cached is not None:
            return cached

        project = _read_project(project_path)
        with self._lock:
            return self._projects.setdefault(key, project)


def _read_project(project_path: Path) -> Project:
    """Read and parse one project file.

    Raises:
        ProjectLoadError: If the file cannot be read or is not valid JSON.
    """
    try:
        data = json.loads(project_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Project file is not valid JSON (project_path={project_path} error={exc})")
        raise ProjectLoadError(f"Invalid project file {project_path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ProjectLoadError(f"Cannot read project file {project_path}: {exc}") from exc
    project = Project.from_dict(data, path=project_path)
    logger.debug(
        f"Loaded project (project_path={project_path} analyses={len(project.analysis)})"
    )
    return project


def _split_lines(path: str, data: str) -> list[Line]:
    """Split document text on line feeds into located lines."""
    lines: list[Line] = []
    for row, text in enumerate(data.split("\n")):
        location = Location(
            path=path,
            begin_line=row,
            begin_column=0,
            end_line=row,
            end_column=len(text) + 1,
        )
        lines.append(Line(location=location, text=text))
    return lines
