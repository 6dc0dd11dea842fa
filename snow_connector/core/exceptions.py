"""Connector exceptions."""

from __future__ import annotations


class ConnectorError(Exception):
    """Base exception for connector errors."""


class ConfigurationError(ConnectorError):
    """Startup configuration could not be turned into settings."""


class MissingParameterError(ConfigurationError):
    """One or more mandatory broker parameters were not provided."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            "Missing mandatory parameters: " + ", ".join(missing)
        )
