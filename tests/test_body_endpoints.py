"""Tests for weight and body composition endpoints."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from fastapi.testclient import TestClient

from calorie_tracker.api.app import create_app
from calorie_tracker.errors import PersistenceError
from tests.conftest import InMemoryBodyRepository, InMemoryWeightRepository


@dataclass
class FailingWeightRepository(InMemoryWeightRepository):
    """Weight repository whose reads always fail."""

    def list_weight_logs(self, user_id: UUID):
        raise PersistenceError("connection refused")


@dataclass
class FailingMeasurementRepository(InMemoryBodyRepository):
    """Body repository whose measurement reads always fail."""

    def list_measurements(self, user_id: UUID):
        raise PersistenceError("measurements unavailable")


def test_log_weight(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/weight-logs", json={"weight_kg": "72.4", "notes": ""}, headers=auth_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["entry"]["weight_kg"] == 72.4
    assert data["entry"]["notes"] is None
    assert data["notification"] == {
        "title": "Weight logged!",
        "description": "Recorded 72.4 kg",
    }


def test_log_weight_requires_number(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/weight-logs", json={"weight_kg": ""}, headers=auth_headers
    )

    assert response.status_code == 422
    assert container.weight_service.repository.entries == []


def test_weight_progress(container, session, auth_headers) -> None:
    repository = container.weight_service.repository
    repository.add_entry(session.user_id, 70.0, datetime(2024, 10, 18, 23, tzinfo=UTC))
    repository.add_entry(session.user_id, 71.2, datetime(2024, 10, 19, 23, tzinfo=UTC))
    client = TestClient(create_app(container))

    response = client.get(
        "/weight-logs/progress",
        params={"tz": "Asia/Tokyo"},
        headers=auth_headers,
    )

    data = response.json()
    assert [point["date"] for point in data["series"]] == ["Oct 19", "Oct 20"]
    assert data["current_weight"] == 71.2
    assert data["trend"]["direction"] == "up"
    assert round(data["trend"]["magnitude"], 2) == 1.2
    assert data["entry_count"] == 2
    assert data["has_data"] is True


def test_weight_progress_failure(container, auth_headers) -> None:
    container.weight_service.repository = FailingWeightRepository()
    client = TestClient(create_app(container))

    response = client.get("/weight-logs/progress", headers=auth_headers)

    assert response.status_code == 502
    assert response.json()["detail"] == {
        "title": "Error loading weight data",
        "description": "connection refused",
    }


def test_log_composition(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/body/composition",
        json={"body_fat_percentage": "18.5", "muscle_mass_kg": "", "notes": ""},
        headers=auth_headers,
    )
    empty = client.post(
        "/body/composition", json={"notes": "forgot"}, headers=auth_headers
    )

    assert response.status_code == 201
    assert response.json()["entry"]["body_fat_percentage"] == 18.5
    assert container.body_service.repository.payloads == [
        {"body_fat_percentage": 18.5}
    ]
    assert empty.status_code == 422


def test_log_measurement(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/body/measurements",
        json={"measurement_type": "waist", "value_cm": "78"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["notification"] == {
        "title": "Measurement logged!",
        "description": "Waist measurement recorded.",
    }


def test_body_progress(container, session, auth_headers) -> None:
    repository = container.body_service.repository
    repository.add_measurement(
        session.user_id, "waist", 80, datetime(2024, 10, 1, tzinfo=UTC)
    )
    repository.add_measurement(
        session.user_id, "waist", 78, datetime(2024, 10, 8, tzinfo=UTC)
    )
    client = TestClient(create_app(container))

    response = client.get("/body/progress", headers=auth_headers)

    data = response.json()
    assert data["has_data"] is True
    assert data["has_composition"] is False
    assert data["composition"] == {}
    assert data["latest_measurements"] == {"waist": 78}
    assert [point["date"] for point in data["measurements"]["waist"]] == [
        "Oct 1",
        "Oct 8",
    ]


def test_log_composition_with_blank_fields(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/body/composition",
        json={"body_fat_percentage": "15.5", "muscle_mass_kg": ""},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["entry"]["muscle_mass_kg"] is None


def test_body_progress_failure_in_one_fetch(container, auth_headers) -> None:
    container.body_service.repository = FailingMeasurementRepository()
    client = TestClient(create_app(container))

    response = client.get("/body/progress", headers=auth_headers)

    assert response.status_code == 502
    assert response.json()["detail"] == {
        "title": "Error loading body data",
        "description": "measurements unavailable",
    }
