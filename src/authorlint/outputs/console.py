# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rich console factory for the JSON output sink."""

from typing import TextIO

from rich.console import Console


def build_console(file: TextIO | None = None) -> Console:
    """Create a console for printing pre-escaped JSON lines.

    Markup, emoji codes and highlighting are disabled so diagnostic text is
    never rewritten, and soft wrapping keeps one message on one line. Rich
    expands tab characters, which ``json.dumps`` never emits unescaped.

    Args:
        file: Target stream; ``None`` follows ``sys.stdout``.

    Returns:
        Configured console.
    """
    return Console(
        file=file,
        force_terminal=False,
        color_system="truecolor",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
