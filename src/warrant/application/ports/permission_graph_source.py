"""Permission graph source port - loads users and their role/claim graph."""

from typing import Protocol

from warrant.domain.entities import PermissionGraph, UserContext


class PermissionGraphSource(Protocol):
    """Port for loading a user's permission snapshot.

    Both methods return None for unknown, inactive or deleted users.
    """

    async def get_user(self, user_id: int) -> UserContext | None: ...

    async def get_graph(self, user_id: int) -> PermissionGraph | None: ...
