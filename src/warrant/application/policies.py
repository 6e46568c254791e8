"""Policy handlers - explicit checks attached to protected operations."""

from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

from warrant.domain.ability import Ability, Subject
from warrant.domain.exceptions import PermissionDenied
from warrant.domain.value_objects import Action


@runtime_checkable
class PolicyHandlerObject(Protocol):
    """Policy expressed as an object with ``handle``."""

    def handle(self, ability: Ability) -> bool: ...


PolicyHandlerCallback = Callable[[Ability], bool]
PolicyHandler = PolicyHandlerObject | PolicyHandlerCallback


class CanPolicy:
    """Declarative policy: ``ability.can(action, subject)``."""

    def __init__(self, action: Action | str, subject: Subject) -> None:
        self.action = Action(action)
        self.subject = subject

    def handle(self, ability: Ability) -> bool:
        return ability.can(self.action, self.subject)

    def __repr__(self) -> str:
        return f"CanPolicy({self.action.value!r}, {self.subject!r})"


def can_policy(action: Action | str, subject: Subject) -> CanPolicy:
    return CanPolicy(action, subject)


def run_policy(handler: PolicyHandler, ability: Ability) -> bool:
    if isinstance(handler, PolicyHandlerObject):
        return handler.handle(ability)
    return handler(ability)


def enforce_policies(ability: Ability, handlers: Iterable[PolicyHandler]) -> None:
    """Raise PermissionDenied unless every handler passes."""
    for handler in handlers:
        if not run_policy(handler, ability):
            raise PermissionDenied("You do not have permission to perform this action")
