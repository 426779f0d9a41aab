"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from wheel_fitter.domain.errors import (
    DomainError,
    ImageFetchError,
    InternalError,
    MissingParameterError,
    NoFittingImageError,
    NotFoundError,
    StoreError,
    UnsupportedCombinationError,
    ValidationError,
)
from wheel_fitter.entrypoints.http.exception_handlers import register_exception_handlers


class UnmappedError(DomainError):
    error_code = "SOMETHING_ELSE"


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("diameter must be > 0", field="diameter")

    @test_app.get("/missing-parameter")
    def raise_missing_parameter() -> None:
        raise MissingParameterError(["carId"])

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Car", "123")

    @test_app.get("/no-fitting-image")
    def raise_no_fitting_image() -> None:
        raise NoFittingImageError(car_id="c1", disc_id="d1")

    @test_app.get("/unsupported-combination")
    def raise_unsupported_combination() -> None:
        raise UnsupportedCombinationError(car_id="c1", disc_id="d1")

    @test_app.get("/image-fetch-error")
    def raise_image_fetch_error() -> None:
        raise ImageFetchError("https://cdn.example.com/a.png", "timed out")

    @test_app.get("/store-error")
    def raise_store_error() -> None:
        raise StoreError("Store query failed while listing cars: timeout", operation="listing cars")

    @test_app.get("/internal-error")
    def raise_internal_error() -> None:
        raise InternalError("Unexpected condition")

    @test_app.get("/unmapped-error")
    def raise_unmapped_error() -> None:
        raise UnmappedError("Odd")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> None:
        raise RuntimeError("Something went wrong")

    @test_app.get("/typed-query")
    def typed_query(diameter: int = Query(default=None)) -> dict:
        return {"diameter": diameter}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestClientErrors:
    """Domain errors caused by the request."""

    def test_validation_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {"detail": "diameter must be > 0", "code": "VALIDATION_ERROR"}

    def test_missing_parameter_returns_400_with_fields(self, client: TestClient) -> None:
        response = client.get("/missing-parameter")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "carId is required",
            "code": "MISSING_PARAMETER",
            "errors": [{"field": "carId", "message": "Field is required", "code": "MISSING"}],
        }

    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Car with identifier '123' not found",
            "code": "NOT_FOUND",
        }

    def test_no_fitting_image_returns_404_with_hint(self, client: TestClient) -> None:
        response = client.get("/no-fitting-image")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "No pre-rendered image exists for this car and disc combination",
            "code": "NO_FITTING_IMAGE",
            "hint": "Please choose another combination.",
        }

    def test_unsupported_combination_returns_404_with_hint(self, client: TestClient) -> None:
        response = client.get("/unsupported-combination")

        assert response.status_code == 404
        data = response.json()
        assert data["code"] == "UNSUPPORTED_COMBINATION"
        assert data["hint"] == "Please choose a Toyota Corolla and Vossen discs."

    def test_context_is_not_leaked(self, client: TestClient) -> None:
        data = client.get("/no-fitting-image").json()

        assert "car_id" not in data
        assert "disc_id" not in data

    def test_unmapped_domain_error_defaults_to_400(self, client: TestClient) -> None:
        response = client.get("/unmapped-error")

        assert response.status_code == 400
        assert response.json()["code"] == "SOMETHING_ELSE"


class TestServerErrors:
    """Domain errors caused by the store, remote hosts or bugs."""

    def test_image_fetch_error_returns_502(self, client: TestClient) -> None:
        response = client.get("/image-fetch-error")

        assert response.status_code == 502
        assert response.json() == {
            "detail": "Failed to fetch image from https://cdn.example.com/a.png: timed out",
            "code": "IMAGE_FETCH_FAILED",
        }

    def test_store_error_returns_500_with_driver_message(self, client: TestClient) -> None:
        response = client.get("/store-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Store query failed while listing cars: timeout",
            "code": "STORE_ERROR",
        }

    def test_internal_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/internal-error")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"

    def test_unexpected_error_returns_generic_500(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }


class TestRequestValidationErrors:
    """Tests for Pydantic/FastAPI validation error handling."""

    def test_non_integer_query_returns_422(self, client: TestClient) -> None:
        response = client.get("/typed-query", params={"diameter": "abc"})

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Invalid request parameters"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "diameter"
        assert data["errors"][0]["code"] == "int_parsing"

    def test_missing_body_field_returns_422(self) -> None:
        from pydantic import BaseModel

        app = FastAPI()
        register_exception_handlers(app)

        class RequestBody(BaseModel):
            name: str

        @app.post("/test")
        def test_route(body: RequestBody) -> dict:
            return {"name": body.name}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/test", json={})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "name"


class TestErrorResponseFormat:
    """Tests for error response format consistency."""

    def test_all_errors_have_detail_and_code(self, client: TestClient) -> None:
        endpoints = [
            "/validation-error",
            "/missing-parameter",
            "/not-found-error",
            "/no-fitting-image",
            "/unsupported-combination",
            "/image-fetch-error",
            "/store-error",
            "/unexpected-error",
        ]

        for endpoint in endpoints:
            data = client.get(endpoint).json()

            assert isinstance(data["detail"], str), endpoint
            assert isinstance(data["code"], str), endpoint
