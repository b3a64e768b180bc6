from typing import Annotated, cast
from uuid import UUID

import structlog
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from postkeeper.app import App

# Raw header: the session guard tells a missing header (401) from a bad token (403)
# scheme_name matches the BearerAuth scheme published by set_custom_openapi
authorization_header = APIKeyHeader(name="Authorization", auto_error=False, scheme_name="BearerAuth")


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_current_user_id(
    app: Annotated[App, Depends(get_app)],
    authorization: Annotated[str | None, Depends(authorization_header)] = None,
) -> UUID:
    """Resolve the authenticated user id from the Authorization Bearer header."""
    user_id = await app.authenticate(authorization)
    structlog.contextvars.bind_contextvars(user_id=str(user_id))
    return user_id


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
UserIdDep = Annotated[UUID, Depends(get_current_user_id)]
