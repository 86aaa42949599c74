# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analysis pipeline driver."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from authorlint.errors import PluginResolutionError
from authorlint.loader import Loader, LoadContentOptions, LoadOutcome
from authorlint.model import Analysis, Content, Location
from authorlint.output import AnalysisOutput
from authorlint.plugin import AnalysisArguments
from authorlint.registry import PluginRegistry

logger = logging.getLogger(__name__)

PipelineStatus = Literal["skipped", "completed", "aborted"]


class AnalysisPipeline:
    """Run a project's analyses over one content, stopping at the first failure."""

    def __init__(self, registry: PluginRegistry | None = None) -> None:
        """Initialize pipeline.

        Args:
            registry: Plugin registry; a fresh registry is used when omitted.
        """
        self._registry = registry or PluginRegistry()

    def run(self, content: Content | None, output: AnalysisOutput) -> PipelineStatus:
        """Run every analysis of the content's project in order.

        Plugin resolution failures and plugin exceptions are reported as error
        diagnostics at the start of the document and stop the remaining
        analyses. The output stream is always closed once it was opened.

        Args:
            content: Loaded content; ``None`` is skipped silently.
            output: Sink receiving the run's events.

        Returns:
            ``skipped`` without content or project, ``aborted`` when an
            analysis failed, ``completed`` otherwise.
        """
        if content is None or content.project is None:
            return "skipped"

        project = content.project
        status: PipelineStatus = "completed"
        output.write_start()
        for analysis in project.analysis:
            output.write_info(f"Running analysis: {analysis.name}")
            if not self._run_analysis(content, analysis, output, project.base_path):
                status = "aborted"
                break
        output.write_end()
        output.write_info(f"{content.path}: Finished analyzing")
        logger.debug(f"Pipeline finished (path={content.path} status={status})")
        return status

    def _run_analysis(
        self,
        content: Content,
        analysis: Analysis,
        output: AnalysisOutput,
        base_path: Path,
    ) -> bool:
        location = Location.at(content.path)
        try:
            plugin = self._registry.resolve(analysis.plugin, base_path=base_path)
        except PluginResolutionError as exc:
            output.write_error(f"{analysis.name}: {exc}", location)
            return False

        args = AnalysisArguments(content=content, analysis=analysis, output=output)
        try:
            plugin.process(args)
        except Exception as exc:
            logger.exception(
                f"Analysis plugin failed (analysis={analysis.name} plugin={analysis.plugin} "
                f"path={content.path})"
            )
            output.write_error(f"{analysis.name}: {exc}", location)
            return False
        return True


@dataclass
class LintSummary:
    """Represent counters for one batch run."""

    completed: int = 0
    aborted: int = 0
    skipped: int = 0
    load_failures: list[LoadOutcome] = field(default_factory=list)

    @property
    def load_failed(self) -> int:
        """Number of paths whose content or project failed to load."""
        return len(self.load_failures)

    @property
    def ok(self) -> bool:
        """Whether every path loaded and no pipeline aborted."""
        return self.aborted == 0 and not self.load_failures


class LintRunner:
    """Load many content paths and run the pipeline for each one."""

    def __init__(
        self,
        loader: Loader,
        pipeline: AnalysisPipeline,
        output_factory: Callable[[], AnalysisOutput],
        options: LoadContentOptions,
    ) -> None:
        """Initialize runner.

        Args:
            loader: Content loader.
            pipeline: Pipeline driver.
            output_factory: Creates a fresh sink for each analyzed content.
            options: Load options shared by every path.
        """
        self._loader = loader
        self._pipeline = pipeline
        self._output_factory = output_factory
        self._options = options

    def run(self, content_paths: Iterable[str | Path]) -> LintSummary:
        """Analyze content paths in load completion order.

        Loads run concurrently; pipelines run one at a time on the calling
        thread.

        Args:
            content_paths: Content files to analyze.

        Returns:
            Batch summary.
        """
        summary = LintSummary()
        for outcome in self._loader.load_contents(content_paths, self._options):
            if outcome.error is not None:
                summary.load_failures.append(outcome)
                continue
            content = outcome.content
            if content is None or content.project is None:
                logger.info(f"Skipping content without project (path={outcome.content_path})")
                summary.skipped += 1
                continue
            status = self._pipeline.run(content, self._output_factory())
            if status == "aborted":
                summary.aborted += 1
            else:
                summary.completed += 1
        logger.info(
            f"Lint run completed (completed={summary.completed} aborted={summary.aborted} "
            f"skipped={summary.skipped} load_failed={summary.load_failed})"
        )
        return summary
