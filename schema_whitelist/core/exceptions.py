"""Custom exceptions for the whitelist generator."""

from __future__ import annotations


class ConfigurationMismatchError(Exception):
    """Raised when the installation is configured in a way generation cannot support."""

    pass


class ComponentNotFoundError(Exception):
    """Raised when a module is not present in the component registry."""

    pass


class SchemaReadError(Exception):
    """Raised when a declarative schema file cannot be parsed."""

    pass
