from pydantic import BaseModel, Field

from postkeeper.core.db import MongoModel
from postkeeper.core.modules.post.models import Post


class User(MongoModel):
    """User domain model with credentials and owned posts."""

    name: str
    email: str  # unique, case-sensitive as stored
    password_hash: str  # bcrypt hash
    posts: list[Post] = Field(default_factory=list)  # insertion order


class UserView(BaseModel):
    """User profile information (API representation)."""

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(name=user.name, email=user.email)
