"""Custom exception hierarchy for fxcatalog."""

from __future__ import annotations

ABORTED_MESSAGE = "Loading was aborted"


class FxCatalogError(Exception):
    """Base class for all custom errors raised by fxcatalog."""


# --- 3-layer hierarchy ---

class DomainError(FxCatalogError):
    """Base class for domain-level errors."""


class InfrastructureError(FxCatalogError):
    """Base class for infrastructure-level errors."""


class ApplicationError(FxCatalogError):
    """Base class for application-level errors."""


# --- Domain errors ---

class UnknownResourceTypeError(DomainError, ValueError):
    """Raised when a value does not name a known resource type."""

    def __init__(self, value: object):
        super().__init__(f"Unknown resource type: {value}")
        self.value = value


class UnknownSourceError(DomainError, ValueError):
    """Raised when a value does not name a known resource source."""

    def __init__(self, value: object):
        super().__init__(f"Unknown source: {value}")
        self.value = value


class ResourceNotFoundError(DomainError):
    """Raised when a catalog resource cannot be located."""


# --- Infrastructure errors ---

class CatalogValidationError(InfrastructureError):
    """Raised when a catalog payload fails schema validation."""


class CatalogImportError(InfrastructureError):
    """Raised when a catalog module or file cannot be read."""


# --- Application errors ---

class SourceLoadError(ApplicationError):
    """Raised inside loaders for recoverable failures; converted to a LoadResult."""


class LoadAbortedError(ApplicationError):
    """Raised when an abort signal is observed before a load step."""

    def __init__(self, message: str = ABORTED_MESSAGE):
        super().__init__(message)


class ProviderNotAvailableError(ApplicationError):
    """Raised when the catalog context is used outside of its provider."""


# --- DI-specific errors ---

class CircularDependencyError(FxCatalogError):
    """Raised when a circular dependency is detected during resolution."""


class ResolutionError(FxCatalogError):
    """Raised when a dependency cannot be resolved."""


# --- Settings ---

class SettingsError(FxCatalogError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
