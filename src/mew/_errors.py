"""Mew error hierarchy.

All mew-specific errors inherit from MewError for easy catching.
Template resolution itself never raises; these cover the inputs around it.
"""


class MewError(Exception):
    """Base error for all mew operations."""


class ConfigError(MewError):
    """Invalid or missing configuration."""


class ContextError(MewError):
    """Invalid page-context input (unknown key, wrong flag type)."""
