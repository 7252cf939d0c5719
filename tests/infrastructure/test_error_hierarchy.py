"""Tests for the error hierarchy."""

import pytest

from showcase.errors import (
    ApiError,
    ApplicationError,
    DetailsUnavailableError,
    DomainError,
    InfrastructureError,
    MalformedResponseError,
    SettingsError,
    SettingsLoadError,
    SettingsValidationError,
    ShowcaseError,
    UnknownCatalogError,
)


@pytest.mark.parametrize("layer", [DomainError, InfrastructureError, ApplicationError, SettingsError])
def test_layers_derive_from_root(layer):
    assert issubclass(layer, ShowcaseError)
    assert isinstance(layer("x"), ShowcaseError)


def test_unknown_catalog_is_domain_error():
    assert issubclass(UnknownCatalogError, DomainError)


def test_api_errors_are_infrastructure_errors():
    assert issubclass(ApiError, InfrastructureError)
    assert issubclass(MalformedResponseError, InfrastructureError)


def test_details_unavailable_is_application_error():
    assert issubclass(DetailsUnavailableError, ApplicationError)


def test_settings_errors():
    assert issubclass(SettingsLoadError, SettingsError)
    assert issubclass(SettingsValidationError, SettingsError)


def test_api_error_carries_status_and_payload():
    error = ApiError("boom", status_code=404, payload={"message": "missing"})
    assert str(error) == "boom"
    assert error.status_code == 404
    assert error.payload == {"message": "missing"}


def test_api_error_defaults():
    error = ApiError("offline")
    assert error.status_code is None
    assert error.payload is None


def test_catch_by_root():
    with pytest.raises(ShowcaseError):
        raise MalformedResponseError("not json")
