"""Resource access API resource."""

import falcon.asgi

from warrant.application.use_cases.authorization.verify_resource_access import (
    VerifyResourceAccessUseCase,
)
from warrant.interfaces.api.guard import PolicyGuard


class AccessResource:
    """GET /v1/resources/{subject_type}/{resource_id}/access/{action} - verify caller access."""

    def __init__(self, guard: PolicyGuard, verify_access: VerifyResourceAccessUseCase) -> None:
        self._guard = guard
        self._verify = verify_access

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        subject_type: str,
        resource_id: int,
        action: str,
    ) -> None:
        await self._guard.authorize(req)
        verification = await self._verify.execute(
            req.context.user.user_id, subject_type, resource_id, action
        )
        resp.media = {"success": True, "verification": verification.to_dict()}
        resp.status = falcon.HTTP_200
