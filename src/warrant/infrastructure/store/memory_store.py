"""In-memory permission store backed by a StoreDocument."""

from pathlib import Path
from typing import Any

import pydantic
import structlog

from warrant.domain.entities import (
    DirectClaim,
    Permission,
    PermissionGraph,
    Resource,
    Role,
    RoleAssignment,
    UserContext,
)
from warrant.domain.exceptions import ValidationError
from warrant.infrastructure.store.models import StoreDocument, UserRecord

logger = structlog.get_logger(__name__)


class InMemoryPermissionStore:
    """Serves permission graphs, users and resources from a loaded document.

    Implements both PermissionGraphSource and ResourceSource. Graphs are
    returned whole; expiry and role activity are applied when the ability
    is compiled.
    """

    def __init__(self, document: StoreDocument) -> None:
        self._permissions = {
            p.id: Permission(
                action=p.action,
                subject_type=p.subject,
                condition_template=p.conditions,
                description=p.description,
            )
            for p in document.permissions
        }
        self._roles = {
            r.id: Role(
                name=r.name,
                permissions=tuple(self._permissions[pid] for pid in r.permissions),
                is_active=r.is_active,
                description=r.description,
            )
            for r in document.roles
        }
        self._users: dict[int, UserRecord] = {u.id: u for u in document.users}
        self._resources: dict[tuple[str, int], Resource] = {
            (r.subject_type, r.id): Resource(
                subject_type=r.subject_type,
                attributes={"id": r.id, **r.attributes},
            )
            for r in document.resources
        }

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "InMemoryPermissionStore":
        try:
            document = StoreDocument.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid permission store document: {e}") from e
        return cls(document)

    @classmethod
    def from_file(cls, path: Path | str) -> "InMemoryPermissionStore":
        path = Path(path)
        try:
            document = StoreDocument.model_validate_json(path.read_text(encoding="utf-8"))
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid permission store file {path}: {e}") from e
        store = cls(document)
        logger.info(
            "permission_store_loaded",
            path=str(path),
            users=len(store._users),
            roles=len(store._roles),
            permissions=len(store._permissions),
            resources=len(store._resources),
        )
        return store

    async def get_user(self, user_id: int) -> UserContext | None:
        record = self._active_user(user_id)
        if record is None:
            return None
        return UserContext(id=record.id, email=record.email)

    async def get_graph(self, user_id: int) -> PermissionGraph | None:
        record = self._active_user(user_id)
        if record is None:
            return None
        return PermissionGraph(
            role_assignments=tuple(
                RoleAssignment(
                    role=self._roles[a.role_id],
                    expires_at=a.expires_at,
                    assigned_by=a.assigned_by,
                    assigned_at=a.assigned_at,
                )
                for a in record.roles
            ),
            direct_claims=tuple(
                DirectClaim(
                    permission=self._permissions[c.permission_id],
                    inverted=c.inverted,
                    reason=c.reason,
                    expires_at=c.expires_at,
                )
                for c in record.direct_permissions
            ),
        )

    async def get(self, subject_type: str, resource_id: int) -> Resource | None:
        return self._resources.get((subject_type, resource_id))

    def _active_user(self, user_id: int) -> UserRecord | None:
        record = self._users.get(user_id)
        if record is None or not record.is_active or record.deleted_at is not None:
            return None
        return record
