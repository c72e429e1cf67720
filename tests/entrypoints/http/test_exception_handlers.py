"""Tests for FastAPI exception handlers."""

import logging

import pytest
from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from vehicle_inventory.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from vehicle_inventory.domain.vehicle_filters import FilterValidationError
from vehicle_inventory.entrypoints.http.exception_handlers import register_exception_handlers

HANDLERS_LOGGER = "vehicle_inventory.entrypoints.http.exception_handlers"


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError(
            errors=[
                {"field": "make", "message": "Make is required", "code": "REQUIRED"},
                {
                    "field": "plate",
                    "message": "Plate must follow the ABC1234 or ABC1D23 format",
                    "code": "INVALID_FORMAT",
                },
            ]
        )

    @test_app.get("/filter-error")
    def raise_filter_error() -> None:
        raise FilterValidationError("price_min must be Decimal or None")

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Vehicle", 12)

    @test_app.get("/conflict-error")
    def raise_conflict_error() -> None:
        raise ConflictError("A vehicle with plate ABC1D23 is already registered", field="plate")

    @test_app.get("/internal-error")
    def raise_internal_error() -> None:
        raise InternalError("Vehicle could not be deleted", vehicle_id=12)

    @test_app.get("/generic-domain-error")
    def raise_generic_domain_error() -> None:
        raise DomainError("Something about the domain")

    @test_app.get("/value-error")
    def raise_value_error() -> None:
        raise ValueError("Invalid decimal format")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> None:
        raise RuntimeError("Something went wrong")

    @test_app.get("/typed-query")
    def typed_query(year_min: int = Query(alias="yearMin")) -> dict:
        return {"yearMin": year_min}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# Domain errors
# ==============================================================================


def test_validation_error_returns_400_with_field_errors(client: TestClient) -> None:
    response = client.get("/validation-error")

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": [
            {"field": "make", "message": "Make is required", "code": "REQUIRED"},
            {
                "field": "plate",
                "message": "Plate must follow the ABC1234 or ABC1D23 format",
                "code": "INVALID_FORMAT",
            },
        ],
    }


def test_filter_validation_error_returns_400_without_field_errors(client: TestClient) -> None:
    response = client.get("/filter-error")

    assert response.status_code == 400
    assert response.json() == {
        "detail": "price_min must be Decimal or None",
        "code": "VALIDATION_ERROR",
    }


def test_not_found_error_returns_404(client: TestClient) -> None:
    response = client.get("/not-found-error")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Vehicle with identifier '12' not found",
        "code": "NOT_FOUND",
    }


def test_conflict_error_returns_400(client: TestClient) -> None:
    response = client.get("/conflict-error")

    assert response.status_code == 400
    assert response.json()["code"] == "CONFLICT"


def test_internal_error_returns_500(client: TestClient) -> None:
    response = client.get("/internal-error")

    assert response.status_code == 500
    assert response.json() == {"detail": "Vehicle could not be deleted", "code": "INTERNAL_ERROR"}


def test_unmapped_domain_error_defaults_to_400(client: TestClient) -> None:
    response = client.get("/generic-domain-error")

    assert response.status_code == 400
    assert response.json()["code"] == "DOMAIN_ERROR"


# ==============================================================================
# Request validation and unexpected errors
# ==============================================================================


def test_request_validation_error_returns_400_with_alias_field(client: TestClient) -> None:
    response = client.get("/typed-query", params={"yearMin": "soon"})

    assert response.status_code == 400
    data = response.json()
    assert data["detail"] == "Invalid request parameters"
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "yearMin"
    assert data["errors"][0]["code"] == "int_parsing"


def test_missing_query_parameter_returns_400(client: TestClient) -> None:
    response = client.get("/typed-query")

    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "missing"


def test_stray_value_error_is_treated_as_unexpected(client: TestClient) -> None:
    response = client.get("/value-error")

    assert response.status_code == 500
    assert response.json() == {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"}


def test_unexpected_error_returns_500_without_leaking_details(client: TestClient) -> None:
    response = client.get("/unexpected-error")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An unexpected error occurred",
        "code": "INTERNAL_ERROR",
    }
    assert "Something went wrong" not in response.text


# ==============================================================================
# Logging
# ==============================================================================


def test_client_errors_are_logged_with_structured_fields(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=HANDLERS_LOGGER)

    response = client.get("/not-found-error")

    assert response.status_code == 404
    record = next(r for r in caplog.records if r.getMessage() == "Client error")
    assert record.error_code == "NOT_FOUND"
    assert record.error_message == "Vehicle with identifier '12' not found"
    assert record.path == "/not-found-error"


def test_internal_error_is_logged_and_returns_json_body(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=HANDLERS_LOGGER)

    response = client.get("/internal-error")

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"
    record = next(r for r in caplog.records if r.getMessage() == "Domain error occurred")
    assert record.levelno == logging.ERROR
    assert record.error_message == "Vehicle could not be deleted"


def test_unexpected_error_is_logged_with_error_type(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=HANDLERS_LOGGER)

    response = client.get("/unexpected-error")

    assert response.json() == {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"}
    record = next(r for r in caplog.records if r.getMessage() == "Unexpected error occurred")
    assert record.error_type == "RuntimeError"
    assert record.error_message == "Something went wrong"
