"""Auth middleware - reads the authenticated user id forwarded by the gateway."""

from dataclasses import dataclass

import falcon.asgi

USER_ID_HEADER = "X-User-Id"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: int


class AuthMiddleware:
    """Middleware that sets req.context.user from a trusted upstream header.

    Token verification happens before requests reach this service; a missing
    or malformed header leaves the request anonymous (``user`` is None).
    """

    def __init__(self, header: str = USER_ID_HEADER) -> None:
        self._header = header

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        raw = req.get_header(self._header)
        if raw and raw.strip().isdigit():
            req.context.user = RequestUser(user_id=int(raw))
        else:
            req.context.user = None
