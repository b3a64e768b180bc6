from uuid import UUID

import structlog

from postkeeper.core.core import Service
from postkeeper.core.modules.user.models import User
from postkeeper.core.modules.user.validators import validate_registration
from postkeeper.errors import ConflictError, NotFoundError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Credential store: user identity plus password hash, read straight from the store."""

    async def register(self, name: str, email: str, password_hash: str) -> UUID:
        """Create a user with an already hashed password."""
        validate_registration(name, email, password_hash)
        if await self.store.find_by_email(email) is not None:
            raise ConflictError(f"Email '{email}' is already registered")

        user = User(name=name, email=email, password_hash=password_hash)
        await self.store.insert(user)
        logger.info("user_registered", user_id=str(user.id))
        return user.id

    async def find_by_email(self, email: str) -> User:
        user = await self.store.find_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def get_user(self, user_id: UUID) -> User:
        """Get user by ID."""
        user = await self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def save(self, user: User) -> None:
        """Persist all mutations of a user, including its posts."""
        await self.store.replace(user)
