"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from warrant.interfaces.api.errors import register_error_handlers
from warrant.interfaces.api.middleware.auth import AuthMiddleware
from warrant.interfaces.api.resources.abilities import AbilityResource
from warrant.interfaces.api.resources.access import AccessResource
from warrant.interfaces.api.resources.health import HealthResource


def create_app(
    ability_resource: AbilityResource,
    access_resource: AccessResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware if middleware is not None else [AuthMiddleware()])
    register_error_handlers(app)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/abilities/{user_id:int}", ability_resource)
    app.add_route(
        "/v1/resources/{subject_type}/{resource_id:int}/access/{action}",
        access_resource,
    )
    return app
