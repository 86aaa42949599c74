# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Output sink implementations for lint diagnostics."""

from typing import TextIO

from authorlint.output import AnalysisOutput
from authorlint.outputs.gcc_output import GccAnalysisOutput
from authorlint.outputs.json_output import JsonAnalysisOutput

OUTPUT_FORMATS = ("gcc", "json")


def build_output(
    format_name: str, stdout: TextIO | None = None, stderr: TextIO | None = None
) -> AnalysisOutput:
    """Create the output sink for a format name.

    Args:
        format_name: ``json`` for the JSON array; anything else selects GCC style.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        A fresh output sink.
    """
    if format_name == "json":
        return JsonAnalysisOutput(stdout=stdout)
    return GccAnalysisOutput(stdout=stdout, stderr=stderr)


__all__ = [
    "GccAnalysisOutput",
    "JsonAnalysisOutput",
    "OUTPUT_FORMATS",
    "build_output",
]
