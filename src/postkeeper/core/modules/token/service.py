from datetime import timedelta
from uuid import UUID

from itsdangerous import BadSignature, URLSafeTimedSerializer

from postkeeper.core.modules.token.models import AuthToken, InvalidTokenError, TokenClaims
from postkeeper.utils import now

TOKEN_SALT = "postkeeper.auth-token"


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens.

    Validity depends only on the signature and the expiry horizon; there is
    no server-side lookup and no revocation.
    """

    def __init__(self, secret_key: str, ttl_seconds: int = 3600) -> None:
        if not secret_key:
            raise ValueError("Token secret key must not be empty")
        self._serializer = URLSafeTimedSerializer(secret_key=secret_key, salt=TOKEN_SALT)
        self._ttl = timedelta(seconds=ttl_seconds)

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: UUID) -> AuthToken:
        """Sign a token for `user_id`; the issue time is embedded by the signer."""
        return AuthToken(self._serializer.dumps({"sub": str(user_id)}))

    def decode(self, token: str) -> TokenClaims:
        """Check signature and expiry, then return the token's claims."""
        if not token:
            raise InvalidTokenError("Empty token")

        try:
            payload, issued_at = self._serializer.loads(token, return_timestamp=True)
        except BadSignature as e:
            raise InvalidTokenError("Bad signature") from e

        try:
            user_id = UUID(payload["sub"])
        except (TypeError, KeyError, ValueError) as e:
            raise InvalidTokenError("Malformed payload") from e

        expires_at = issued_at + self._ttl
        if now() >= expires_at:
            raise InvalidTokenError("Token expired")

        return TokenClaims(user_id=user_id, issued_at=issued_at, expires_at=expires_at)

    def verify(self, token: str) -> UUID:
        """Return the user id bound to `token`, raising InvalidTokenError otherwise."""
        return self.decode(token).user_id
