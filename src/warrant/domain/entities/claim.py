"""Direct claim entity - permission bound straight to a user."""

from dataclasses import dataclass
from datetime import datetime

from warrant.domain.entities.permission import Permission


@dataclass(frozen=True)
class DirectClaim:
    """Grant (inverted=False) or revoke (inverted=True) of a single permission."""

    permission: Permission
    inverted: bool = False
    reason: str | None = None
    expires_at: datetime | None = None
