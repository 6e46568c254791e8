"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from warrant.interfaces.api.app import create_app
from warrant.interfaces.api.guard import PolicyGuard
from warrant.interfaces.api.resources.abilities import AbilityResource
from warrant.interfaces.api.resources.access import AccessResource
from warrant.interfaces.api.resources.health import HealthResource


@pytest.fixture
def app(build_ability, verify_access):
    """Falcon ASGI app wired to the in-memory store."""
    guard = PolicyGuard(build_ability)
    return create_app(
        ability_resource=AbilityResource(guard, build_ability),
        access_resource=AccessResource(guard, verify_access),
        health_resource=HealthResource(),
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)


def as_user(user_id: int) -> dict[str, str]:
    return {"X-User-Id": str(user_id)}
