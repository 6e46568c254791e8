"""Compiled evaluation rule."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from warrant.domain.ability.conditions import (
    condition_key,
    freeze_condition,
    matches_condition,
    validate_condition,
)
from warrant.domain.ability.subject import Subject, subject_type_matches
from warrant.domain.entities import Resource
from warrant.domain.exceptions import ValidationError
from warrant.domain.value_objects import Action, Effect


def parse_action(action: Action | str) -> Action:
    """Coerce a string to Action, rejecting values outside the closed set."""
    try:
        return Action(action)
    except ValueError as e:
        raise ValidationError(f"Unknown action: {action!r}") from e


@dataclass(frozen=True)
class Rule:
    """Single allow or deny rule with an already-resolved condition.

    The condition is stored as a read-only copy, so later changes to the
    mapping passed in cannot alter decisions.
    """

    action: Action
    subject_type: str
    effect: Effect = Effect.ALLOW
    condition: Mapping[str, Any] | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "action", parse_action(self.action))
        object.__setattr__(self, "effect", Effect(self.effect))
        if self.condition is not None and not isinstance(self.condition, Mapping):
            raise ValidationError(
                f"Condition must be a mapping of fields, got {type(self.condition).__name__}"
            )
        if not self.condition:
            object.__setattr__(self, "condition", None)
        else:
            validate_condition(self.condition)
            object.__setattr__(self, "condition", freeze_condition(self.condition))

    def __hash__(self) -> int:
        return hash(
            (
                self.action,
                self.subject_type,
                self.effect,
                condition_key(self.condition),
                self.reason,
            )
        )

    @property
    def inverted(self) -> bool:
        return self.effect is Effect.DENY

    @property
    def is_conditional(self) -> bool:
        return self.condition is not None

    def applies_to(self, action: Action, subject_type: str) -> bool:
        """Action and subject type match, ignoring the condition."""
        return (
            self.action == action or self.action is Action.MANAGE
        ) and subject_type_matches(self.subject_type, subject_type)

    def matches_subject(self, subject: Subject) -> bool:
        """Condition holds for ``subject``.

        A conditional rule never matches a bare subject type: there is no
        instance to test the condition against.
        """
        if self.condition is None:
            return True
        if not isinstance(subject, Resource):
            return False
        return matches_condition(self.condition, subject)
