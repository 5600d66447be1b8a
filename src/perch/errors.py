"""Perch exception hierarchy.

Shared across config, locator, and client so every module raises and
catches the same types.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when client configuration is invalid or incomplete.

    Malformed shapes are caught in ``ClientConfig.from_mapping()``.
    Missing keys for the active mode (``development``, ``production``,
    ``loader``, ``require``) surface when a tag is first resolved, since
    they indicate a broken deployment rather than a per-page condition.
    """
