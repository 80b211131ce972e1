"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = client.get("/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    data = client.get("/health").json()

    assert data["status"] == "ok"
    assert data["version"] == "1.0.0-test"
    assert data["environment"] == "test"
    assert data["user_count"] == 2
    assert data["message"] == "API is healthy"


@pytest.mark.unit
def test_health_check_counts_users(client: TestClient) -> None:
    client.post("/data", json={"id": "3", "Firstname": "Maria", "Surname": "Virtanen"})

    assert client.get("/health").json()["user_count"] == 3


@pytest.mark.unit
def test_health_check_response_json() -> None:
    """Test health check response is valid JSON."""
    from user_registry.models.health import HealthCheckResponse

    response = HealthCheckResponse(
        status="ok",
        version="1.0.0",
        environment="test",
    )

    response_dict = response.model_dump()
    assert response_dict["status"] == "ok"
    assert response_dict["user_count"] == 0


@pytest.mark.unit
def test_health_check_schema_example() -> None:
    from user_registry.models.health import HealthCheckResponse

    example = HealthCheckResponse.model_json_schema()["example"]

    assert example["status"] == "ok"
    assert HealthCheckResponse(**example).user_count == 2
