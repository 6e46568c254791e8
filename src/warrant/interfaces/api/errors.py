"""Error handlers - map domain exceptions to HTTP responses."""

import falcon
import falcon.asgi
import structlog

from warrant.domain.exceptions import NotFound, PermissionDenied, ValidationError

logger = structlog.get_logger(__name__)


async def handle_permission_denied(req, resp, ex: PermissionDenied, params) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": str(ex), "reason": ex.reason}


async def handle_not_found(req, resp, ex: NotFound, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": str(ex)}


async def handle_validation_error(req, resp, ex: ValidationError, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex)}


async def log_exception(req, resp, ex, params) -> None:
    logger.error("unhandled_error", path=req.path, method=req.method, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    app.add_error_handler(Exception, log_exception)
    app.add_error_handler(PermissionDenied, handle_permission_denied)
    app.add_error_handler(NotFound, handle_not_found)
    app.add_error_handler(ValidationError, handle_validation_error)
