from uuid import UUID

import structlog

from postkeeper.core.core import Service
from postkeeper.core.modules.token.models import InvalidTokenError
from postkeeper.errors import AccessDeniedError, AuthenticationError

logger = structlog.get_logger(__name__)


def parse_bearer_token(authorization: str) -> str | None:
    """Extract the token from a `Bearer <token>` header value.

    Returns None when there is no second space-delimited segment or the
    scheme is not Bearer.
    """
    parts = authorization.split(" ")
    if len(parts) < 2 or parts[0].lower() != "bearer" or not parts[1]:
        return None
    return parts[1]


class SessionService(Service):
    """Request gate in front of every protected operation."""

    async def authenticate(self, authorization: str | None) -> UUID:
        """Resolve the user id bound to the Authorization header.

        A missing header is an AuthenticationError (401). A header whose
        token is absent, forged or expired is an AccessDeniedError (403).
        A bare `Bearer` with no token counts as an absent token, so it gets
        403 rather than 401.
        """
        if not authorization:
            raise AuthenticationError("Unauthorized")

        token = parse_bearer_token(authorization)
        if token is None:
            logger.debug("token_rejected", reason="malformed header")
            raise AccessDeniedError("Invalid token")

        try:
            return self.core.token_service.verify(token)
        except InvalidTokenError as e:
            logger.debug("token_rejected", reason=str(e))
            raise AccessDeniedError("Invalid token") from e
