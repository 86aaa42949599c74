# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Error types raised by the lint core."""


class AuthorlintError(RuntimeError):
    """Base class for fatal lint core failures."""


class ProjectLoadError(AuthorlintError):
    """Represent an unreadable or malformed project file."""


class ContentLoadError(AuthorlintError):
    """Represent a content file that exists but cannot be read."""


class MetadataError(AuthorlintError):
    """Represent a metadata header that could not be parsed."""


class PluginResolutionError(AuthorlintError):
    """Represent a plugin identifier that could not be resolved."""
