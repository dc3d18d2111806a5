"""Exceptions raised before a search begins."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A puzzle definition is malformed and cannot be searched."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
