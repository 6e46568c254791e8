"""Ability - ordered rule list answering can/cannot queries.

Rules are scanned front to back and every matching rule overwrites the
previous outcome, so the last matching rule decides. Builders place revokes
after all grants, which makes a matching revoke always win. With no
matching rule the answer is deny.
"""

from collections.abc import Iterable

import structlog

from warrant.domain.ability.rule import Rule, parse_action
from warrant.domain.ability.subject import Subject, resolve_subject_type
from warrant.domain.exceptions import PermissionDenied
from warrant.domain.value_objects import Action, Effect

logger = structlog.get_logger(__name__)


class Ability:
    """Compiled, immutable authorization rules for one acting user."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def rules_for(self, action: Action | str, subject_type: str) -> tuple[Rule, ...]:
        """Rules whose action and subject type apply, in stored order."""
        action = parse_action(action)
        return tuple(rule for rule in self._rules if rule.applies_to(action, subject_type))

    def relevant_rule_for(self, action: Action | str, subject: Subject) -> Rule | None:
        """Last rule matching the query, or None when nothing matches."""
        action = parse_action(action)
        subject_type = resolve_subject_type(subject)
        decided: Rule | None = None
        for rule in self._rules:
            if rule.applies_to(action, subject_type) and rule.matches_subject(subject):
                decided = rule
        return decided

    def can(self, action: Action | str, subject: Subject) -> bool:
        rule = self.relevant_rule_for(action, subject)
        return rule is not None and rule.effect is Effect.ALLOW

    def cannot(self, action: Action | str, subject: Subject) -> bool:
        return not self.can(action, subject)

    def reason_for(self, action: Action | str, subject: Subject) -> str | None:
        """Reason of the last matching revoke, whatever the final decision."""
        action = parse_action(action)
        subject_type = resolve_subject_type(subject)
        reason: str | None = None
        for rule in self._rules:
            if (
                rule.effect is Effect.DENY
                and rule.applies_to(action, subject_type)
                and rule.matches_subject(subject)
            ):
                reason = rule.reason
        return reason

    def ensure(self, action: Action | str, subject: Subject) -> None:
        """Raise PermissionDenied unless ``action`` on ``subject`` is allowed."""
        rule = self.relevant_rule_for(action, subject)
        if rule is not None and rule.effect is Effect.ALLOW:
            return
        subject_type = resolve_subject_type(subject)
        reason = rule.reason if rule is not None else None
        logger.info(
            "access_denied",
            action=str(action),
            subject_type=subject_type,
            reason=reason,
        )
        raise PermissionDenied(
            f"Cannot {action} {subject_type}",
            action=str(action),
            subject_type=subject_type,
            reason=reason,
        )

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ability):
            return NotImplemented
        return self._rules == other._rules

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ability(rules={len(self._rules)})"
