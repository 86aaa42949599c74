# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Machine-readable diagnostic output as a streamed JSON array."""

import json
from typing import Any, TextIO

from authorlint.model import Location
from authorlint.outputs.console import build_console


class JsonAnalysisOutput:
    """Write warnings and errors as elements of one JSON array.

    Each element is printed on its own line; every element after the first is
    prefixed with a comma so the concatenated stream parses as a single array.
    Lines and columns are emitted 0-based, exactly as stored.
    """

    def __init__(self, stdout: TextIO | None = None) -> None:
        """Initialize the sink.

        Args:
            stdout: Stream receiving the array; defaults to ``sys.stdout``.
        """
        self._console = build_console(stdout)
        self._is_first = True

    def write_start(self) -> None:
        self._console.print("[")
        self._is_first = True

    def write_end(self) -> None:
        self._console.print("]")

    def write_info(self, message: str) -> None:
        # Informational messages are not part of the diagnostic array.
        return None

    def write_warning(self, message: str, location: Location | None = None) -> None:
        self._write_message("warning", message, location)

    def write_error(self, message: str, location: Location | None = None) -> None:
        self._write_message("error", message, location)

    def _write_message(
        self, kind: str, message: str, location: Location | None
    ) -> None:
        payload = json.dumps(_build_element(kind, message, location))
        if self._is_first:
            self._is_first = False
        else:
            payload = "," + payload
        self._console.print(payload)


def _build_element(
    kind: str, message: str, location: Location | None
) -> dict[str, Any]:
    """Build one diagnostic element of the JSON array."""
    if location is None:
        return {"type": kind, "text": message, "filePath": None, "range": None}
    return {
        "type": kind,
        "text": message,
        "filePath": location.path,
        "range": [
            [location.begin_line, location.begin_column],
            [location.end_line, location.end_column],
        ],
    }
