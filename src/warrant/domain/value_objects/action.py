"""Actions a rule can grant or revoke."""

from enum import StrEnum


class Action(StrEnum):
    """Closed set of actions. MANAGE matches every action."""

    MANAGE = "manage"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
