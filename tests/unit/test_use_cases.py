"""Unit tests for use cases."""

import pytest

from warrant.domain.exceptions import NotFound, PermissionDenied
from warrant.domain.value_objects import Action


# --- BuildAbilityUseCase ---


@pytest.mark.asyncio
async def test_build_ability_admin(build_ability) -> None:
    ability = await build_ability.execute(1)
    assert ability.can(Action.MANAGE, "all")
    assert ability.can(Action.DELETE, "Post")


@pytest.mark.asyncio
async def test_build_ability_unknown_user(build_ability) -> None:
    with pytest.raises(NotFound):
        await build_ability.execute(404)


@pytest.mark.asyncio
async def test_build_ability_inactive_user(build_ability) -> None:
    with pytest.raises(NotFound):
        await build_ability.execute(7)


@pytest.mark.asyncio
async def test_build_ability_clean_user_denied(build_ability) -> None:
    ability = await build_ability.execute(6)
    assert ability.rules == ()
    assert ability.cannot(Action.READ, "Post")


@pytest.mark.asyncio
async def test_build_ability_expired_and_inactive_roles(build_ability) -> None:
    assert (await build_ability.execute(10)).cannot(Action.MANAGE, "all")
    assert (await build_ability.execute(11)).cannot(Action.MANAGE, "all")


@pytest.mark.asyncio
async def test_build_ability_direct_only(build_ability) -> None:
    ability = await build_ability.execute(5)
    assert ability.can(Action.READ, "Post")
    assert ability.can(Action.CREATE, "Post")
    assert ability.cannot(Action.UPDATE, "Post")


# --- VerifyResourceAccessUseCase ---


@pytest.mark.asyncio
async def test_verify_owner_can_update(verify_access) -> None:
    verification = await verify_access.execute(2, "Post", 3, "update")
    assert verification.allowed
    assert verification.is_owner
    assert verification.action is Action.UPDATE


@pytest.mark.asyncio
async def test_verify_non_owner_denied(verify_access) -> None:
    with pytest.raises(PermissionDenied) as exc_info:
        await verify_access.execute(2, "Post", 1, Action.UPDATE)
    assert exc_info.value.reason == "Not the owner of this Post"


@pytest.mark.asyncio
async def test_verify_admin_not_owner(verify_access) -> None:
    verification = await verify_access.execute(1, "Post", 2, Action.DELETE)
    assert verification.allowed
    assert not verification.is_owner


@pytest.mark.asyncio
async def test_verify_sanctioned_reason(verify_access) -> None:
    with pytest.raises(PermissionDenied) as exc_info:
        await verify_access.execute(9, "Post", 4, Action.DELETE)
    assert exc_info.value.reason == "No deleting for 30 days"


@pytest.mark.asyncio
async def test_verify_sanctioned_can_still_update_own(verify_access) -> None:
    verification = await verify_access.execute(9, "Post", 4, Action.UPDATE)
    assert verification.allowed


@pytest.mark.asyncio
async def test_verify_missing_resource(verify_access) -> None:
    with pytest.raises(NotFound):
        await verify_access.execute(1, "Post", 99, Action.READ)


@pytest.mark.asyncio
async def test_verify_user_without_rules_denied(verify_access) -> None:
    """User 6 has no rules and does not own the post."""
    with pytest.raises(PermissionDenied) as exc_info:
        await verify_access.execute(6, "Post", 1, Action.READ)
    assert exc_info.value.reason == "Not the owner of this Post"
