"""Rule effect."""

from enum import StrEnum


class Effect(StrEnum):
    """Outcome a matching rule contributes to the decision."""

    ALLOW = "allow"
    DENY = "deny"
