"""Build ability use case."""

from warrant.application.ports import PermissionGraphSource
from warrant.domain.ability import Ability, AbilityFactory
from warrant.domain.exceptions import NotFound


class BuildAbilityUseCase:
    """Load a user's permission graph and compile it into an Ability."""

    def __init__(
        self,
        permission_graph_source: PermissionGraphSource,
        ability_factory: AbilityFactory,
    ) -> None:
        self._graphs = permission_graph_source
        self._factory = ability_factory

    async def execute(self, user_id: int) -> Ability:
        """Fresh ability for ``user_id``. Raises NotFound for unknown or inactive users."""
        user = await self._graphs.get_user(user_id)
        graph = await self._graphs.get_graph(user_id) if user else None
        if user is None or graph is None:
            raise NotFound(f"User {user_id} not found")
        return self._factory.create_ability(graph, user)
