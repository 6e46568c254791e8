"""Verify resource access use case."""

import structlog

from warrant.application.dto.access_dto import AccessVerification
from warrant.application.ports import ResourceSource
from warrant.application.use_cases.authorization.build_ability import BuildAbilityUseCase
from warrant.domain.ability.rule import parse_action
from warrant.domain.exceptions import NotFound, PermissionDenied
from warrant.domain.value_objects import Action

logger = structlog.get_logger(__name__)


class VerifyResourceAccessUseCase:
    """Check a user's action against one concrete resource instance."""

    def __init__(
        self,
        resource_source: ResourceSource,
        build_ability: BuildAbilityUseCase,
        owner_field: str = "authorId",
    ) -> None:
        self._resources = resource_source
        self._build_ability = build_ability
        self._owner_field = owner_field

    async def execute(
        self,
        user_id: int,
        subject_type: str,
        resource_id: int,
        action: Action | str,
    ) -> AccessVerification:
        """Raise NotFound for a missing resource, PermissionDenied when not allowed."""
        action = parse_action(action)
        resource = await self._resources.get(subject_type, resource_id)
        if resource is None:
            raise NotFound(f"{subject_type} with id {resource_id} not found")

        ability = await self._build_ability.execute(user_id)
        is_owner = resource.get(self._owner_field) == user_id

        if ability.cannot(action, resource):
            reason = ability.reason_for(action, resource)
            if reason is None:
                reason = (
                    f"Not the owner of this {subject_type}"
                    if not is_owner
                    else "Denied by security policy"
                )
            logger.info(
                "resource_access_denied",
                user_id=user_id,
                action=action.value,
                subject_type=subject_type,
                resource_id=resource_id,
                reason=reason,
            )
            raise PermissionDenied(
                f"You do not have permission to {action.value} this {subject_type}",
                action=action.value,
                subject_type=subject_type,
                reason=reason,
            )

        return AccessVerification(
            action=action,
            subject_type=subject_type,
            resource_id=resource_id,
            user_id=user_id,
            allowed=True,
            is_owner=is_owner,
        )
