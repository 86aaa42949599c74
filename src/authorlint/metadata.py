# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""YAML metadata header extraction for loaded content."""

import logging
from typing import Any

import yaml

from authorlint.errors import MetadataError
from authorlint.model import Content

logger = logging.getLogger(__name__)

METADATA_MARKER = "---"


def extract_metadata(content: Content) -> None:
    """Parse and remove a leading metadata header from ``content``.

    A header starts on the very first line with ``---`` and ends at the next
    line that is exactly ``---``. Without a closing marker the opening line is
    ordinary content. Retained lines keep their original locations.

    Args:
        content: Freshly split content; mutated in place.

    Raises:
        MetadataError: If the header is not valid YAML or not a mapping.
    """
    if not content.lines or content.lines[0].text != METADATA_MARKER:
        return

    closing_index = content.index_of_text(METADATA_MARKER, 1)
    if closing_index < 0:
        logger.debug(f"Unterminated metadata header ignored (path={content.path})")
        return

    metadata = _parse_header(content.get_text(0, closing_index), path=content.path)
    del content.lines[: closing_index + 1]
    content.metadata = metadata


def _parse_header(text: str, path: str) -> dict[str, Any]:
    """Parse header text as a YAML mapping; an empty header is ``{}``."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        logger.warning(f"Metadata header is not valid YAML (path={path} error={exc})")
        raise MetadataError(f"Invalid metadata header in {path}: {exc}") from exc
    except Exception as exc:
        # Constructors raise plain errors on well-formed scalars, e.g. 2020-02-30.
        logger.warning(f"Metadata header value cannot be built (path={path} error={exc})")
        raise MetadataError(f"Invalid metadata header in {path}: {exc}") from exc
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise MetadataError(
            f"Metadata header in {path} must be a mapping, got {type(parsed).__name__}"
        )
    return parsed
