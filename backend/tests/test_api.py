"""
API tests for the profile, metric and advice endpoints.
"""

import logging

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from healthtrack.api.deps import get_health_profile_service, get_health_metric_service
from healthtrack.core import Ok, Forbidden, NotFound, AlreadyExists
from healthtrack.main import app
from healthtrack.models import HealthProfile, HealthMetricType
from healthtrack.services import HealthProfileService, HealthMetricService
from healthtrack.storage import (
    InMemoryProfileStore,
    InMemoryMetricStore,
    StorageError,
    get_profile_store,
    get_metric_store,
)

from conftest import make_token, make_metric


def bearer(username, roles=None):
    return {"Authorization": f"Bearer {make_token(username, roles)}"}


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def stores(client):
    """Back the app with fresh in-memory stores."""
    profiles, metrics = InMemoryProfileStore(), InMemoryMetricStore()
    app.dependency_overrides[get_profile_store] = lambda: profiles
    app.dependency_overrides[get_metric_store] = lambda: metrics
    return profiles, metrics


@pytest.fixture
def profile_service(client):
    service = AsyncMock(spec=HealthProfileService)
    app.dependency_overrides[get_health_profile_service] = lambda: service
    return service


@pytest.fixture
def metric_service(client):
    service = AsyncMock(spec=HealthMetricService)
    app.dependency_overrides[get_health_metric_service] = lambda: service
    return service


class TestProfileEndpoints:
    """Request handling for /profile with a mocked service."""

    def test_add_profile(self, client, profile_service):
        profile_service.add_health_profile.return_value = Ok()

        response = client.post("/profile", json={"username": "aUsername"}, headers=bearer("aUsername"))

        assert response.status_code == 200
        assert response.content == b""
        principal, profile = profile_service.add_health_profile.await_args.args
        assert principal.username == "aUsername"
        assert profile == HealthProfile(username="aUsername")

    def test_add_profile_unauthenticated(self, client, profile_service):
        response = client.post("/profile", json={"username": "aUsername"})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        profile_service.add_health_profile.assert_not_called()

    def test_add_profile_invalid_body(self, client, profile_service):
        response = client.post("/profile", json={"username": "x"}, headers=bearer("x"))

        assert response.status_code == 422
        profile_service.add_health_profile.assert_not_called()

    def test_add_profile_conflict(self, client, profile_service):
        profile_service.add_health_profile.return_value = AlreadyExists("HealthProfile", "testuser")

        response = client.post("/profile", json={"username": "testuser"}, headers=bearer("testuser"))

        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    def test_find_profile(self, client, profile_service):
        profile_service.find_health_profile.return_value = Ok(HealthProfile(username="testuser"))

        response = client.get("/profile/testuser", headers=bearer("testuser"))

        assert response.status_code == 200
        assert response.json()["username"] == "testuser"
        principal, username = profile_service.find_health_profile.await_args.args
        assert username == "testuser"

    def test_find_profile_unauthenticated(self, client, profile_service):
        response = client.get("/profile/testuser")

        assert response.status_code == 401
        profile_service.find_health_profile.assert_not_called()

    def test_find_profile_invalid_token(self, client, profile_service):
        response = client.get("/profile/testuser", headers={"Authorization": "Bearer nonsense"})

        assert response.status_code == 401
        profile_service.find_health_profile.assert_not_called()

    def test_find_profile_not_found(self, client, profile_service):
        profile_service.find_health_profile.return_value = NotFound("HealthProfile", "testuser")

        response = client.get("/profile/testuser", headers=bearer("testuser"))

        assert response.status_code == 404

    def test_delete_profile_as_admin(self, client, profile_service):
        profile_service.delete_health_profile.return_value = Ok()

        response = client.delete("/profile/testuser", headers=bearer("admin", ["ROLE_ADMIN"]))

        assert response.status_code == 200
        principal, username = profile_service.delete_health_profile.await_args.args
        assert "ROLE_ADMIN" in principal.roles
        assert username == "testuser"

    def test_delete_profile_forbidden(self, client, profile_service):
        profile_service.delete_health_profile.return_value = Forbidden("Only administrators can delete profiles")

        response = client.delete("/profile/testuser", headers=bearer("testuser", ["ROLE_USER"]))

        assert response.status_code == 403
        assert response.json()["detail"] == "Only administrators can delete profiles"


class TestMetricEndpoints:
    """Request handling for /metric with a mocked service."""

    def test_add_metric(self, client, metric_service):
        metric_service.add_health_metric.return_value = Ok()

        response = client.post(
            "/metric",
            json={"type": "HEART_RATE", "value": 72, "profile": {"username": "testuser"}},
            headers=bearer("testuser"),
        )

        assert response.status_code == 200
        _, metric = metric_service.add_health_metric.await_args.args
        assert metric.type == HealthMetricType.HEART_RATE
        assert metric.profile.username == "testuser"

    def test_add_metric_unknown_type(self, client, metric_service):
        response = client.post(
            "/metric",
            json={"type": "MOOD", "value": 1, "profile": {"username": "testuser"}},
            headers=bearer("testuser"),
        )

        assert response.status_code == 422
        metric_service.add_health_metric.assert_not_called()

    def test_find_metrics(self, client, metric_service):
        metric_service.find_health_metric_history.return_value = Ok([make_metric("testuser", value=1.0)])

        response = client.get("/metric/testuser", headers=bearer("testuser"))

        assert response.status_code == 200
        body = response.json()
        assert body[0]["value"] == 1.0
        assert body[0]["type"] == "BLOOD_OXYGEN_LEVEL"

    def test_find_metrics_unauthenticated(self, client, metric_service):
        response = client.get("/metric/testuser")

        assert response.status_code == 401
        metric_service.find_health_metric_history.assert_not_called()

    def test_delete_metrics_as_admin(self, client, metric_service):
        metric_service.delete_health_metric_for_user.return_value = Ok()

        response = client.delete("/metric/testuser", headers=bearer("admin", ["ROLE_ADMIN"]))

        assert response.status_code == 200
        _, username = metric_service.delete_health_metric_for_user.await_args.args
        assert username == "testuser"

    def test_delete_metrics_unauthenticated(self, client, metric_service):
        response = client.delete("/metric/testuser")

        assert response.status_code == 401
        metric_service.delete_health_metric_for_user.assert_not_called()


class TestEndToEnd:
    """Full request flow against in-memory stores."""

    def test_register_record_and_read_back(self, client, stores):
        headers = bearer("testuser", ["ROLE_USER"])

        assert client.post("/profile", json={"username": "testuser"}, headers=headers).status_code == 200
        for value in (96.0, 98.0):
            response = client.post(
                "/metric",
                json={"type": "BLOOD_OXYGEN_LEVEL", "value": value, "profile": {"username": "testuser"}},
                headers=headers,
            )
            assert response.status_code == 200

        history = client.get("/metric/testuser", headers=headers).json()
        assert [m["value"] for m in history] == [96.0, 98.0]

    def test_second_registration_conflicts(self, client, stores):
        headers = bearer("testuser")

        client.post("/profile", json={"username": "testuser"}, headers=headers)
        response = client.post("/profile", json={"username": "testuser"}, headers=headers)

        assert response.status_code == 409

    def test_metric_without_profile_is_404(self, client, stores):
        response = client.post(
            "/metric",
            json={"type": "WEIGHT", "value": 70, "profile": {"username": "testuser"}},
            headers=bearer("testuser"),
        )

        assert response.status_code == 404

    def test_other_user_cannot_read(self, client, stores):
        client.post("/profile", json={"username": "testuser"}, headers=bearer("testuser"))

        assert client.get("/profile/testuser", headers=bearer("otheruser")).status_code == 403
        assert client.get("/metric/testuser", headers=bearer("otheruser")).status_code == 403

    def test_admin_reads_and_deletes(self, client, stores):
        profiles, metrics = stores
        user, admin = bearer("testuser"), bearer("admin", ["ROLE_ADMIN"])
        client.post("/profile", json={"username": "testuser"}, headers=user)
        client.post(
            "/metric",
            json={"type": "HEART_RATE", "value": 64, "profile": {"username": "testuser"}},
            headers=user,
        )

        assert client.get("/profile/testuser", headers=admin).status_code == 200
        assert client.delete("/metric/testuser", headers=admin).status_code == 200
        assert client.get("/metric/testuser", headers=admin).json() == []
        assert client.delete("/profile/testuser", headers=admin).status_code == 200
        assert client.get("/profile/testuser", headers=admin).status_code == 404

    def test_owner_cannot_delete_own_data(self, client, stores):
        headers = bearer("testuser", ["ROLE_USER"])
        client.post("/profile", json={"username": "testuser"}, headers=headers)

        assert client.delete("/metric/testuser", headers=headers).status_code == 403
        assert client.delete("/profile/testuser", headers=headers).status_code == 403
        assert client.get("/profile/testuser", headers=headers).status_code == 200

    def test_forbidden_before_not_found(self, client, stores):
        response = client.delete("/profile/nobody", headers=bearer("testuser"))

        assert response.status_code == 403

    def test_storage_failure_is_500(self, client, stores):
        failing = AsyncMock(spec=InMemoryProfileStore)
        failing.find_by_username.side_effect = StorageError("disk unavailable")
        app.dependency_overrides[get_profile_store] = lambda: failing

        response = client.get("/profile/testuser", headers=bearer("testuser"))

        assert response.status_code == 500
        assert response.json()["detail"] == "Storage failure"


class TestAdviceCallback:
    """Tests for the /advice callback."""

    def test_logs_each_advice(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="healthtrack.api.advice"):
            response = client.post(
                "/advice",
                json=[
                    {"username": "testuser", "advice": "Drink more water"},
                    {"username": "otheruser", "advice": "Walk daily"},
                ],
                headers=bearer("advisor"),
            )

        assert response.status_code == 200
        messages = [r.getMessage() for r in caplog.records if r.name == "healthtrack.api.advice"]
        assert "Advice for: testuser Advice text: Drink more water" in messages
        assert "Advice for: otheruser Advice text: Walk daily" in messages

    def test_requires_authentication(self, client):
        response = client.post("/advice", json=[])

        assert response.status_code == 401


class TestAppEndpoints:
    """Tests for basic app endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["app"] == "HealthTrack API"
        assert data["status"] == "running"

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
