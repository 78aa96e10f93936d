"""FastAPI dependency: require_admin.

Usage in any privileged router:
    from src.sp_gateway.auth.dependencies import require_admin

    @router.post("/privileged", dependencies=[Depends(require_admin)])
    async def privileged():
        ...
"""

import secrets

from fastapi import Header

from config.settings import settings
from src.sp_common.errors import AdminRequiredError


async def require_admin(
    x_admin_key: str | None = Header(None, alias="X-Admin-Key"),
) -> None:
    """Verify the caller presented the configured admin key.

    Raises HTTP 403 (AdminRequiredError, code 9003) when the header is
    missing or does not match settings.ADMIN_API_KEY.
    """
    if x_admin_key is None or not secrets.compare_digest(
        x_admin_key.encode(), settings.ADMIN_API_KEY.encode()
    ):
        raise AdminRequiredError()
