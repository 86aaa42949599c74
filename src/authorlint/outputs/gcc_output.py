# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Human-readable diagnostic output in GCC style."""

import sys
from typing import TextIO

from authorlint.model import Location


class GccAnalysisOutput:
    """Write info to stdout and ``path:line:col: LEVEL: message`` to stderr.

    Messages go straight to the streams so tabs and other plugin text reach the
    reader byte for byte.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        """Initialize the sink.

        Args:
            stdout: Stream for informational messages; ``None`` follows ``sys.stdout``.
            stderr: Stream for warnings and errors; ``None`` follows ``sys.stderr``.
        """
        self._stdout = stdout
        self._stderr = stderr

    def write_start(self) -> None:
        return None

    def write_end(self) -> None:
        return None

    def write_info(self, message: str) -> None:
        _write_line(self._stdout or sys.stdout, message)

    def write_warning(self, message: str, location: Location | None = None) -> None:
        _write_line(self._stderr or sys.stderr, _format_message("WARN", message, location))

    def write_error(self, message: str, location: Location | None = None) -> None:
        _write_line(self._stderr or sys.stderr, _format_message("ERROR", message, location))


def _write_line(stream: TextIO, text: str) -> None:
    stream.write(f"{text}\n")


def _format_message(level: str, message: str, location: Location | None) -> str:
    if location is None:
        return f"{level}: {message}"
    # Location renders one-based as path:line:column.
    return f"{location}: {level}: {message}"
