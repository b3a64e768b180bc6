from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Post(BaseModel):
    """Post embedded in its owner's user document; it has no address of its own."""

    id: UUID = Field(default_factory=uuid4, description="Post ID, unique within the owner's posts")
    title: str = Field(..., description="Post title")
    description: str = Field(..., description="Post body")
