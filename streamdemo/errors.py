"""Domain-specific exceptions raised by streamdemo runtime components."""

from __future__ import annotations


class StreamDemoError(Exception):
    """Base exception for streamdemo-specific runtime failures."""


class ConfigurationError(StreamDemoError):
    """Raised when environment-provided settings cannot be interpreted."""
