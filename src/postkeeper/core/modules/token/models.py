"""Bearer token models."""

from datetime import datetime
from typing import NewType
from uuid import UUID

from pydantic import BaseModel

AuthToken = NewType("AuthToken", str)


class TokenClaims(BaseModel):
    """Claims carried by a verified token. Nothing is persisted server-side."""

    user_id: UUID
    issued_at: datetime
    expires_at: datetime


class InvalidTokenError(Exception):
    """Raised when a token is malformed, carries a bad signature, or has expired."""
