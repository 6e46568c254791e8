"""Application entry point and composition root."""

from warrant import __version__
from warrant.application.use_cases.authorization.build_ability import BuildAbilityUseCase
from warrant.application.use_cases.authorization.verify_resource_access import (
    VerifyResourceAccessUseCase,
)
from warrant.config import Settings, get_settings
from warrant.domain.ability import AbilityFactory
from warrant.infrastructure.store import InMemoryPermissionStore, StoreDocument
from warrant.interfaces.api.app import create_app
from warrant.interfaces.api.guard import PolicyGuard
from warrant.interfaces.api.resources.abilities import AbilityResource
from warrant.interfaces.api.resources.access import AccessResource
from warrant.interfaces.api.resources.health import HealthResource
from warrant.logging import configure_logging


def main() -> None:
    """CLI entry point."""
    print(f"Warrant v{__version__}")


def create_warrant_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings)

    store = (
        InMemoryPermissionStore.from_file(settings.permissions_file)
        if settings.permissions_file
        else InMemoryPermissionStore(StoreDocument())
    )
    ability_factory = AbilityFactory(template_fields=settings.template_fields)

    build_ability = BuildAbilityUseCase(
        permission_graph_source=store,
        ability_factory=ability_factory,
    )
    verify_access = VerifyResourceAccessUseCase(
        resource_source=store,
        build_ability=build_ability,
        owner_field=settings.owner_field,
    )
    guard = PolicyGuard(build_ability)

    return create_app(
        ability_resource=AbilityResource(guard, build_ability),
        access_resource=AccessResource(guard, verify_access),
        health_resource=HealthResource(),
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_warrant_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
