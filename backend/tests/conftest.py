"""
Shared test fixtures and configuration.
"""

import pytest
import os

# Set test environment variables before importing app modules
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing")
os.environ.setdefault("STORAGE_TYPE", "memory")
os.environ.setdefault("LOG_FILE_ENABLED", "false")

from jose import jwt

from healthtrack.config import settings
from healthtrack.models import Principal, HealthProfile, HealthMetric, HealthMetricType, ProfileReference
from healthtrack.storage import InMemoryProfileStore, InMemoryMetricStore


def make_token(username, roles=None):
    """Sign a token the way the identity provider would."""
    payload = {"sub": username}
    if roles is not None:
        payload["roles"] = list(roles)
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def make_metric(username, value=1.0, metric_type=HealthMetricType.BLOOD_OXYGEN_LEVEL):
    return HealthMetric(type=metric_type, value=value, profile=ProfileReference(username=username))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def testuser():
    return Principal(username="testuser")


@pytest.fixture
def regular_user():
    return Principal(username="testuser", roles={"ROLE_USER"})


@pytest.fixture
def other_user():
    return Principal(username="otheruser")


@pytest.fixture
def admin():
    return Principal(username="admin", roles={"ROLE_ADMIN"})


@pytest.fixture
def profile_store():
    return InMemoryProfileStore()


@pytest.fixture
def metric_store():
    return InMemoryMetricStore()


@pytest.fixture
def testuser_profile():
    return HealthProfile(username="testuser", full_name="Test User")
