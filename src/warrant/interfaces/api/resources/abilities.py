"""Abilities API resource - inspect compiled rules."""

import falcon.asgi

from warrant.application.policies import can_policy
from warrant.application.use_cases.authorization.build_ability import BuildAbilityUseCase
from warrant.domain.ability import Rule
from warrant.domain.ability.conditions import thaw_condition
from warrant.domain.value_objects import Action
from warrant.interfaces.api.guard import PolicyGuard

READ_USERS = (can_policy(Action.READ, "User"),)


def _rule_to_dict(rule: Rule) -> dict:
    return {
        "action": rule.action.value,
        "subject": rule.subject_type,
        "effect": rule.effect.value,
        "conditions": thaw_condition(rule.condition),
        "reason": rule.reason,
    }


class AbilityResource:
    """GET /v1/abilities/{user_id} - compiled rules of a user, in evaluation order."""

    def __init__(self, guard: PolicyGuard, build_ability: BuildAbilityUseCase) -> None:
        self._guard = guard
        self._build_ability = build_ability

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: int,
    ) -> None:
        user = getattr(req.context, "user", None)
        is_self = user is not None and user.user_id == user_id
        ability = await self._guard.authorize(req, () if is_self else READ_USERS)
        if not is_self:
            ability = await self._build_ability.execute(user_id)

        resp.media = {
            "user_id": user_id,
            "rules": [_rule_to_dict(rule) for rule in ability.rules],
        }
        resp.status = falcon.HTTP_200
