"""Acting user context used to resolve condition templates."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class UserContext:
    """Attributes of the acting user. ``id`` is always present."""

    id: int
    email: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def as_context(self) -> dict[str, Any]:
        """Flat attribute map for template rendering."""
        context = dict(self.extra)
        context["id"] = self.id
        context["email"] = self.email
        return context
