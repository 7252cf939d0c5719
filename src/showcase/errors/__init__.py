"""Custom exception hierarchy for Showcase."""

from __future__ import annotations

from typing import Any, Optional


class ShowcaseError(Exception):
    """Base class for all custom errors raised by Showcase."""


# --- 3-layer hierarchy ---

class DomainError(ShowcaseError):
    """Base class for domain-level errors."""


class InfrastructureError(ShowcaseError):
    """Base class for infrastructure-level errors."""


class ApplicationError(ShowcaseError):
    """Base class for application-level errors."""


# --- Domain errors ---

class UnknownCatalogError(DomainError):
    """Raised when a catalog name is not present in the registry."""


# --- Infrastructure errors ---

class ApiError(InfrastructureError):
    """Raised when the remote API rejects a request or cannot be reached."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class MalformedResponseError(InfrastructureError):
    """Raised when a response body does not have the expected shape."""


# --- Application errors ---

class DetailsUnavailableError(ApplicationError):
    """Raised when a catalog offers no single-record lookup."""


# --- Settings errors ---

class SettingsError(ShowcaseError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be read."""


class SettingsValidationError(SettingsError):
    """Raised when the settings payload fails schema validation."""


__all__ = [
    "ApiError",
    "ApplicationError",
    "DetailsUnavailableError",
    "DomainError",
    "InfrastructureError",
    "MalformedResponseError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
    "ShowcaseError",
    "UnknownCatalogError",
]
