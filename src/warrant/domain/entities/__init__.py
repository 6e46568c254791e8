"""Domain entities."""

from warrant.domain.entities.claim import DirectClaim
from warrant.domain.entities.graph import PermissionGraph
from warrant.domain.entities.permission import Permission
from warrant.domain.entities.resource import Resource
from warrant.domain.entities.role import Role, RoleAssignment
from warrant.domain.entities.user import UserContext

__all__ = [
    "DirectClaim",
    "Permission",
    "PermissionGraph",
    "Resource",
    "Role",
    "RoleAssignment",
    "UserContext",
]
