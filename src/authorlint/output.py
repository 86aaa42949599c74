# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Diagnostic output contract shared by the pipeline and plugins."""

from typing import Protocol

from authorlint.model import Location


class AnalysisOutput(Protocol):
    """Receive the events of one pipeline run."""

    def write_start(self) -> None:
        """Open the diagnostic stream."""

    def write_end(self) -> None:
        """Close the diagnostic stream."""

    def write_info(self, message: str) -> None:
        """Report an informational message."""

    def write_warning(self, message: str, location: Location | None = None) -> None:
        """Report a warning, optionally attributed to a document range."""

    def write_error(self, message: str, location: Location | None = None) -> None:
        """Report an error, optionally attributed to a document range."""
