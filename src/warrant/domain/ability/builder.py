"""Ability builder - compiles a permission graph into ordered rules."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

import structlog

from warrant.domain.ability.ability import Ability
from warrant.domain.ability.rule import Rule
from warrant.domain.ability.template import DEFAULT_TEMPLATE_FIELDS, render
from warrant.domain.entities import Permission, PermissionGraph, UserContext
from warrant.domain.value_objects import Action, Effect

logger = structlog.get_logger(__name__)


class RuleRef:
    """Handle on a rule just added to a builder, for attaching a reason."""

    def __init__(self, builder: "AbilityBuilder", index: int) -> None:
        self._builder = builder
        self._index = index

    def because(self, reason: str | None) -> "RuleRef":
        rules = self._builder._rules
        rules[self._index] = replace(rules[self._index], reason=reason)
        return self


class AbilityBuilder:
    """Imperative rule accumulator::

        builder = AbilityBuilder()
        builder.can("read", "Post")
        builder.cannot("delete", "Post").because("sanctioned")
        ability = builder.build()
    """

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def can(
        self,
        action: Action | str,
        subject_type: str,
        condition: dict[str, Any] | None = None,
    ) -> RuleRef:
        return self._add(action, subject_type, condition, Effect.ALLOW)

    def cannot(
        self,
        action: Action | str,
        subject_type: str,
        condition: dict[str, Any] | None = None,
    ) -> RuleRef:
        return self._add(action, subject_type, condition, Effect.DENY)

    def build(self) -> Ability:
        return Ability(self._rules)

    def _add(
        self,
        action: Action | str,
        subject_type: str,
        condition: dict[str, Any] | None,
        effect: Effect,
    ) -> RuleRef:
        self._rules.append(
            Rule(action=action, subject_type=subject_type, condition=condition, effect=effect)
        )
        return RuleRef(self, len(self._rules) - 1)


class AbilityFactory:
    """Builds an Ability from a user's permission graph.

    Rule order: role permissions (graph order), then direct grants, then
    direct revokes. Expired role assignments, inactive roles and expired
    claims contribute nothing.
    """

    def __init__(self, template_fields: Iterable[str] = DEFAULT_TEMPLATE_FIELDS) -> None:
        self._template_fields = frozenset(template_fields)

    def create_ability(
        self,
        graph: PermissionGraph,
        user: UserContext,
        now: datetime | None = None,
    ) -> Ability:
        now = now or datetime.now(UTC)
        context = user.as_context()
        builder = AbilityBuilder()

        role_rules = 0
        for assignment in graph.role_assignments:
            if not assignment.role.is_active or not _is_current(assignment.expires_at, now):
                continue
            for permission in assignment.role.permissions:
                builder.can(*self._resolve(permission, context))
                role_rules += 1

        current_claims = [c for c in graph.direct_claims if _is_current(c.expires_at, now)]
        grants = [c for c in current_claims if not c.inverted]
        revokes = [c for c in current_claims if c.inverted]
        for claim in grants:
            builder.can(*self._resolve(claim.permission, context))
        for claim in revokes:
            builder.cannot(*self._resolve(claim.permission, context)).because(claim.reason)

        logger.debug(
            "ability_compiled",
            user_id=user.id,
            role_rules=role_rules,
            grants=len(grants),
            revokes=len(revokes),
        )
        return builder.build()

    def _resolve(
        self, permission: Permission, context: dict[str, Any]
    ) -> tuple[Action, str, dict[str, Any] | None]:
        condition = render(permission.condition_template, context, self._template_fields)
        return permission.action, permission.subject_type, condition


def compile_ability(
    graph: PermissionGraph,
    user: UserContext,
    now: datetime | None = None,
) -> Ability:
    """Compile with the default template field allow-list."""
    return AbilityFactory().create_ability(graph, user, now)


def _is_current(expires_at: datetime | None, now: datetime) -> bool:
    if expires_at is None:
        return True
    return _as_utc(expires_at) > _as_utc(now)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
