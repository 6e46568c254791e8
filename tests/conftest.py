"""Pytest fixtures for Warrant tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from warrant.application.use_cases.authorization.build_ability import BuildAbilityUseCase
from warrant.application.use_cases.authorization.verify_resource_access import (
    VerifyResourceAccessUseCase,
)
from warrant.domain.ability import AbilityFactory
from warrant.domain.entities import (
    DirectClaim,
    Permission,
    PermissionGraph,
    Role,
    RoleAssignment,
    UserContext,
)
from warrant.domain.value_objects import Action
from warrant.infrastructure.store import InMemoryPermissionStore

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)
PAST = NOW - timedelta(days=30)
FUTURE = NOW + timedelta(days=30)

OWN_POSTS = {"authorId": "{{id}}"}


# --- Domain builders ---


def editor_role() -> Role:
    """EDITOR: read/create any post, update/delete own posts."""
    return Role(
        name="EDITOR",
        permissions=(
            Permission(Action.READ, "Post"),
            Permission(Action.CREATE, "Post"),
            Permission(Action.UPDATE, "Post", OWN_POSTS),
            Permission(Action.DELETE, "Post", OWN_POSTS),
        ),
    )


def admin_role() -> Role:
    return Role(name="ADMIN", permissions=(Permission(Action.MANAGE, "all"),))


def graph_of(
    *roles: Role | RoleAssignment,
    claims: tuple[DirectClaim, ...] = (),
) -> PermissionGraph:
    assignments = tuple(r if isinstance(r, RoleAssignment) else RoleAssignment(role=r) for r in roles)
    return PermissionGraph(role_assignments=assignments, direct_claims=claims)


@pytest.fixture
def factory() -> AbilityFactory:
    return AbilityFactory()


@pytest.fixture
def editor() -> UserContext:
    return UserContext(id=2, email="editor.simple@test.com")


# --- Store document (mirrors the seed data of the permission database) ---


@pytest.fixture
def store_document() -> dict:
    return {
        "permissions": [
            {"id": 1, "action": "manage", "subject": "all", "description": "Super user"},
            {"id": 2, "action": "read", "subject": "Post"},
            {"id": 3, "action": "create", "subject": "Post"},
            {"id": 4, "action": "update", "subject": "Post", "conditions": '{"authorId": "{{id}}"}'},
            {"id": 5, "action": "delete", "subject": "Post", "conditions": {"authorId": "{{id}}"}},
            {"id": 6, "action": "read", "subject": "User"},
        ],
        "roles": [
            {"id": 1, "name": "ADMIN", "permissions": [1]},
            {"id": 2, "name": "EDITOR", "permissions": [2, 3, 4, 5]},
            {"id": 3, "name": "VIEWER", "permissions": [2]},
            {"id": 4, "name": "INACTIVE_ROLE", "is_active": False, "permissions": [1]},
        ],
        "users": [
            {"id": 1, "email": "admin@system.com", "roles": [{"role_id": 1}]},
            {"id": 2, "email": "editor.simple@test.com", "roles": [{"role_id": 2}]},
            {"id": 3, "email": "viewer.simple@test.com", "roles": [{"role_id": 3}]},
            {
                "id": 5,
                "email": "direct.only@test.com",
                "direct_permissions": [
                    {"permission_id": 2, "reason": "Read access without role"},
                    {"permission_id": 3},
                ],
            },
            {"id": 6, "email": "clean@test.com"},
            {"id": 7, "email": "inactive@test.com", "is_active": False, "roles": [{"role_id": 1}]},
            {
                "id": 8,
                "email": "deleted@test.com",
                "deleted_at": "2023-10-01T00:00:00Z",
                "roles": [{"role_id": 1}],
            },
            {
                "id": 9,
                "email": "sanctioned@test.com",
                "roles": [{"role_id": 2}],
                "direct_permissions": [
                    {"permission_id": 5, "inverted": True, "reason": "No deleting for 30 days"},
                ],
            },
            {
                "id": 10,
                "email": "expired.role@test.com",
                "roles": [{"role_id": 1, "expires_at": "2023-01-01T00:00:00Z"}],
            },
            {"id": 11, "email": "inactive.role@test.com", "roles": [{"role_id": 4}]},
        ],
        "resources": [
            {"subject_type": "Post", "id": 1, "attributes": {"authorId": 1, "isPublished": True}},
            {"subject_type": "Post", "id": 2, "attributes": {"authorId": 2, "isPublished": True}},
            {"subject_type": "Post", "id": 3, "attributes": {"authorId": 2, "isPublished": False}},
            {"subject_type": "Post", "id": 4, "attributes": {"authorId": 9, "isPublished": True}},
        ],
    }


@pytest.fixture
def store(store_document) -> InMemoryPermissionStore:
    return InMemoryPermissionStore.from_document(store_document)


@pytest.fixture
def build_ability(store) -> BuildAbilityUseCase:
    return BuildAbilityUseCase(permission_graph_source=store, ability_factory=AbilityFactory())


@pytest.fixture
def verify_access(store, build_ability) -> VerifyResourceAccessUseCase:
    return VerifyResourceAccessUseCase(resource_source=store, build_ability=build_ability)
