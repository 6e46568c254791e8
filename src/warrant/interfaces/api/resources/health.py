"""Health check endpoints."""

import falcon.asgi


class HealthResource:
    """Liveness endpoint."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200
