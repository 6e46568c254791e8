"""Policy guard - authorizes a request against an explicit list of policies."""

from collections.abc import Iterable

import falcon
import falcon.asgi

from warrant.application.policies import PolicyHandler, enforce_policies
from warrant.application.use_cases.authorization.build_ability import BuildAbilityUseCase
from warrant.domain.ability import Ability


class PolicyGuard:
    """Builds the caller's ability and enforces the policies a responder passes in."""

    def __init__(self, build_ability: BuildAbilityUseCase) -> None:
        self._build_ability = build_ability

    async def authorize(
        self,
        req: falcon.asgi.Request,
        policies: Iterable[PolicyHandler] = (),
    ) -> Ability:
        """Return the caller's ability, stored on ``req.context.ability``.

        Raises HTTPUnauthorized without an authenticated user and
        PermissionDenied when a policy fails.
        """
        user = getattr(req.context, "user", None)
        if not user:
            raise falcon.HTTPUnauthorized(title="Unauthorized")
        ability = await self._build_ability.execute(user.user_id)
        req.context.ability = ability
        enforce_policies(ability, policies)
        return ability
