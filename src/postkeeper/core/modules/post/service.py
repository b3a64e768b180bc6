from uuid import UUID

import structlog

from postkeeper.core.core import Service
from postkeeper.core.modules.post.models import Post
from postkeeper.core.modules.post.validators import validate_post_content
from postkeeper.core.modules.user.models import User
from postkeeper.errors import NotFoundError

logger = structlog.get_logger(__name__)


class PostService(Service):
    """Manages posts embedded in their owner's user record.

    Every operation resolves the owner first and works only inside that
    user's posts, so one user can never reach another user's post.

    Mutations are read-modify-write on the whole user document without
    locking: concurrent writes for the same user are last-write-wins.
    """

    async def create_post(self, user_id: UUID, title: str, description: str) -> list[Post]:
        """Append a new post and return the owner's posts."""
        user = await self._resolve_owner(user_id)
        validate_post_content(title, description)

        post = Post(title=title, description=description)
        user.posts.append(post)
        await self.core.services.user.save(user)
        logger.info("post_created", user_id=str(user_id), post_id=str(post.id))
        return user.posts

    async def list_posts(self, user_id: UUID) -> list[Post]:
        """Get the owner's posts in insertion order."""
        user = await self._resolve_owner(user_id)
        return user.posts

    async def update_post(self, user_id: UUID, post_id: str, title: str, description: str) -> list[Post]:
        """Replace title and description of a post."""
        user = await self._resolve_owner(user_id)
        post = next((p for p in user.posts if str(p.id) == post_id), None)
        if post is None:
            raise NotFoundError("Post not found")
        validate_post_content(title, description)

        post.title = title
        post.description = description
        await self.core.services.user.save(user)
        logger.info("post_updated", user_id=str(user_id), post_id=post_id)
        return user.posts

    async def delete_post(self, user_id: UUID, post_id: str) -> list[Post]:
        """Remove a post by id. An unknown id leaves the posts unchanged."""
        user = await self._resolve_owner(user_id)
        remaining = [p for p in user.posts if str(p.id) != post_id]
        if len(remaining) == len(user.posts):
            logger.debug("post_delete_miss", user_id=str(user_id), post_id=post_id)

        user.posts = remaining
        await self.core.services.user.save(user)
        return user.posts

    async def _resolve_owner(self, user_id: UUID) -> User:
        """Raises NotFoundError if the user no longer exists."""
        return await self.core.services.user.get_user(user_id)
