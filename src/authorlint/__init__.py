# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for the lint core."""

from authorlint.errors import (
    AuthorlintError,
    ContentLoadError,
    MetadataError,
    PluginResolutionError,
    ProjectLoadError,
)
from authorlint.loader import LoadContentOptions, Loader, LoadOutcome, find_project_path
from authorlint.metadata import extract_metadata
from authorlint.model import Analysis, Content, Line, Location, Project
from authorlint.pipeline import AnalysisPipeline, LintRunner, LintSummary
from authorlint.plugin import AnalysisArguments, AnalysisPlugin
from authorlint.registry import PluginRegistry

__all__ = [
    "Analysis",
    "AnalysisArguments",
    "AnalysisPipeline",
    "AnalysisPlugin",
    "AuthorlintError",
    "Content",
    "ContentLoadError",
    "Line",
    "LintRunner",
    "LintSummary",
    "LoadContentOptions",
    "LoadOutcome",
    "Loader",
    "Location",
    "MetadataError",
    "PluginRegistry",
    "PluginResolutionError",
    "Project",
    "ProjectLoadError",
    "extract_metadata",
    "find_project_path",
]
