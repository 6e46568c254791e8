"""Permission graph - per-user snapshot supplied by the permission store."""

from dataclasses import dataclass

from warrant.domain.entities.claim import DirectClaim
from warrant.domain.entities.role import RoleAssignment


@dataclass(frozen=True)
class PermissionGraph:
    """Roles and direct claims of one user, read-only for one ability build."""

    role_assignments: tuple[RoleAssignment, ...] = ()
    direct_claims: tuple[DirectClaim, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.role_assignments and not self.direct_claims
