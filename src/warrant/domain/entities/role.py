"""Role entity for RBAC."""

from dataclasses import dataclass, field
from datetime import datetime

from warrant.domain.entities.permission import Permission


@dataclass(frozen=True)
class Role:
    """Role - named bundle of permissions, e.g. ADMIN, EDITOR, VIEWER."""

    name: str
    permissions: tuple[Permission, ...] = ()
    is_active: bool = True
    description: str | None = None


@dataclass(frozen=True)
class RoleAssignment:
    """Role granted to a user, optionally until ``expires_at``."""

    role: Role
    expires_at: datetime | None = None
    assigned_by: int | None = None
    assigned_at: datetime | None = field(default=None, compare=False)
