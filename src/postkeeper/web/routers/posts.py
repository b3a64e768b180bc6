"""Post endpoints. Every route acts on the authenticated user's own posts."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from postkeeper.core.modules.post.models import Post
from postkeeper.web.deps import AppDep, UserIdDep
from postkeeper.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["posts"])

AUTH_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    403: {"model": ErrorResponse, "description": "Invalid or expired token"},
}


class PostContentRequest(BaseModel):
    """Title and description of a post. Both are required, also on update."""

    title: str = Field(..., min_length=1, description="Post title")
    description: str = Field(..., min_length=1, description="Post body")

    model_config = {
        "json_schema_extra": {
            "examples": [{"title": "Groceries", "description": "Milk, eggs, bread"}],
        }
    }


class PostsResponse(BaseModel):
    """Result of a post mutation: the owner's full, updated posts."""

    message: str = Field(..., description="Human-readable result")
    posts: list[Post] = Field(..., description="All posts of the user, in creation order")


@router.post(
    "/posts",
    summary="Create post",
    description="Append a post to the current user's posts.",
    operation_id="createPost",
    responses={
        200: {"description": "Post created"},
        400: {"model": ErrorResponse, "description": "Missing title or description"},
        **AUTH_RESPONSES,
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def create_post(request: PostContentRequest, app: AppDep, user_id: UserIdDep) -> PostsResponse:
    posts = await app.create_post(user_id, request.title, request.description)
    return PostsResponse(message="Post created successfully", posts=posts)


@router.get(
    "/posts",
    summary="List posts",
    description="Get all posts of the current user in creation order.",
    operation_id="listPosts",
    responses={
        200: {"description": "Posts of the current user"},
        **AUTH_RESPONSES,
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def list_posts(app: AppDep, user_id: UserIdDep) -> list[Post]:
    return await app.list_posts(user_id)


@router.put(
    "/posts/{post_id}",
    summary="Update post",
    description="Replace the title and description of one of the current user's posts.",
    operation_id="updatePost",
    responses={
        200: {"description": "Post updated"},
        400: {"model": ErrorResponse, "description": "Missing title or description"},
        **AUTH_RESPONSES,
        404: {"model": ErrorResponse, "description": "User or post not found"},
    },
)
async def update_post(post_id: str, request: PostContentRequest, app: AppDep, user_id: UserIdDep) -> PostsResponse:
    posts = await app.update_post(user_id, post_id, request.title, request.description)
    return PostsResponse(message="Post updated successfully", posts=posts)


@router.delete(
    "/posts/{post_id}",
    summary="Delete post",
    description="Remove one of the current user's posts. Deleting an unknown id changes nothing.",
    operation_id="deletePost",
    responses={
        200: {"description": "Post deleted (or was already absent)"},
        **AUTH_RESPONSES,
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def delete_post(post_id: str, app: AppDep, user_id: UserIdDep) -> PostsResponse:
    posts = await app.delete_post(user_id, post_id)
    return PostsResponse(message="Post deleted successfully", posts=posts)
