"""Store document schema - permissions, roles, users and resources as JSON."""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from warrant.domain.value_objects import Action


class PermissionRecord(BaseModel):
    """Atomic permission row. ``conditions`` may be a JSON object or JSON text."""

    id: int
    action: Action
    subject: str
    conditions: dict[str, Any] | None = None
    description: str | None = None

    @field_validator("conditions", mode="before")
    @classmethod
    def _parse_conditions(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not value.strip():
                return None
            try:
                return json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(f"conditions is not valid JSON: {e.msg}") from e
        return value


class RoleRecord(BaseModel):
    id: int
    name: str
    description: str | None = None
    is_active: bool = True
    permissions: list[int] = Field(default_factory=list)


class RoleAssignmentRecord(BaseModel):
    role_id: int
    expires_at: datetime | None = None
    assigned_by: int | None = None
    assigned_at: datetime | None = None


class DirectPermissionRecord(BaseModel):
    permission_id: int
    inverted: bool = False
    reason: str | None = None
    expires_at: datetime | None = None


class UserRecord(BaseModel):
    id: int
    email: str | None = None
    name: str | None = None
    is_active: bool = True
    deleted_at: datetime | None = None
    roles: list[RoleAssignmentRecord] = Field(default_factory=list)
    direct_permissions: list[DirectPermissionRecord] = Field(default_factory=list)


class ResourceRecord(BaseModel):
    subject_type: str
    id: int
    attributes: dict[str, Any] = Field(default_factory=dict)


class StoreDocument(BaseModel):
    """Whole store; references between records are checked on load."""

    permissions: list[PermissionRecord] = Field(default_factory=list)
    roles: list[RoleRecord] = Field(default_factory=list)
    users: list[UserRecord] = Field(default_factory=list)
    resources: list[ResourceRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_references(self) -> "StoreDocument":
        permission_ids = {p.id for p in self.permissions}
        role_ids = {r.id for r in self.roles}
        for role in self.roles:
            missing = set(role.permissions) - permission_ids
            if missing:
                raise ValueError(f"Role {role.name} references unknown permissions {sorted(missing)}")
        for user in self.users:
            for assignment in user.roles:
                if assignment.role_id not in role_ids:
                    raise ValueError(f"User {user.id} references unknown role {assignment.role_id}")
            for claim in user.direct_permissions:
                if claim.permission_id not in permission_ids:
                    raise ValueError(
                        f"User {user.id} references unknown permission {claim.permission_id}"
                    )
        return self
