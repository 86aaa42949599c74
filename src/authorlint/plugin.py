# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analysis plugin contract."""

from dataclasses import dataclass
from typing import Any, Protocol

from authorlint.model import Analysis, Content
from authorlint.output import AnalysisOutput


@dataclass(frozen=True)
class AnalysisArguments:
    """Bundle passed to one plugin invocation.

    Attributes:
        content: Loaded content to analyze.
        analysis: Analysis entry that selected the plugin.
        output: Sink receiving the plugin's diagnostics.
    """

    content: Content
    analysis: Analysis
    output: AnalysisOutput

    @property
    def settings(self) -> Any:
        """Plugin settings from the analysis entry."""
        return self.analysis.settings


class AnalysisPlugin(Protocol):
    """Define the entry point every analysis plugin exposes."""

    def process(self, args: AnalysisArguments) -> None:
        """Analyze content and report through ``args.output``.

        Args:
            args: Content, analysis settings and output sink.

        Raises:
            Exception: Any exception aborts the remaining analyses for the content.
        """
