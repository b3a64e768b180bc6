import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from uuid import UUID

import structlog

from postkeeper.config import Config
from postkeeper.core.core import Core
from postkeeper.core.modules.post.models import Post
from postkeeper.core.modules.token.models import AuthToken
from postkeeper.core.modules.user.models import UserView
from postkeeper.core.modules.user.store import UserStore
from postkeeper.core.modules.user.validators import validate_password
from postkeeper.errors import AuthenticationError

logger = structlog.get_logger(__name__)


class App:
    """Facade for all application operations.

    Protected operations take the user id resolved by `authenticate`, so a
    caller can only ever act on its own account.
    """

    def __init__(self, config: Config, store: UserStore | None = None) -> None:
        self._core = Core(config, store)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def register(self, name: str, email: str, password: str, confirm_password: str) -> UUID:
        """Register a new user."""
        validate_password(password, confirm_password)
        # bcrypt is CPU-bound, keep it off the event loop
        password_hash = await asyncio.to_thread(self._core.password_hasher.hash, password)
        return await self._core.services.user.register(name, email, password_hash)

    async def login(self, email: str, password: str) -> AuthToken:
        """Check credentials and issue a bearer token."""
        user = await self._core.services.user.find_by_email(email)
        is_valid = await asyncio.to_thread(self._core.password_hasher.verify, password, user.password_hash)
        if not is_valid:
            logger.info("login_failed", user_id=str(user.id))
            raise AuthenticationError("Invalid credentials")
        return self._core.token_service.issue(user.id)

    async def authenticate(self, authorization: str | None) -> UUID:
        """Resolve the user id from a raw Authorization header."""
        return await self._core.services.session.authenticate(authorization)

    async def get_current_user(self, user_id: UUID) -> UserView:
        """Get the profile of the authenticated user."""
        user = await self._core.services.user.get_user(user_id)
        return UserView.from_domain(user)

    async def create_post(self, user_id: UUID, title: str, description: str) -> list[Post]:
        return await self._core.services.post.create_post(user_id, title, description)

    async def list_posts(self, user_id: UUID) -> list[Post]:
        return await self._core.services.post.list_posts(user_id)

    async def update_post(self, user_id: UUID, post_id: str, title: str, description: str) -> list[Post]:
        return await self._core.services.post.update_post(user_id, post_id, title, description)

    async def delete_post(self, user_id: UUID, post_id: str) -> list[Post]:
        return await self._core.services.post.delete_post(user_id, post_id)
