"""
Social feed data models: posts, comments and replies.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field, StrictInt

from shared.models import CamelModel
from modules.users.models import UserSummary


class Reply(CamelModel):
    """A reply to a comment."""

    id: int
    user_id: int
    comment_id: int
    content: str
    created_at: Optional[datetime] = None
    user: Optional[UserSummary] = None


class Comment(CamelModel):
    """A comment on a post, with its replies oldest first."""

    id: int
    user_id: int
    post_id: int
    content: str
    created_at: Optional[datetime] = None
    user: Optional[UserSummary] = None
    replies: list[Reply] = Field(default_factory=list)


class Post(CamelModel):
    """
    A feed post.

    `content` holds the image URL when the post has one, otherwise the
    caption (or an empty string).
    """

    id: int
    user_id: int
    content: str = ""
    caption: Optional[str] = None
    likes: int = 0
    created_at: Optional[datetime] = None
    user: Optional[UserSummary] = None
    comments: list[Comment] = Field(default_factory=list)


class CreatePostRequest(CamelModel):
    """Body for creating a post. Both fields are optional."""

    caption: Optional[str] = None
    image_base64: Optional[str] = Field(None, description="Base64 image or data URL")


class UpdateLikesRequest(CamelModel):
    """Like counter adjustment; negative values unlike."""

    likes: Optional[StrictInt] = None


class CreateCommentRequest(CamelModel):
    """Body for commenting on a post."""

    post_id: Optional[int] = None
    content: Optional[str] = None


class CreateReplyRequest(CamelModel):
    """Body for replying to a comment."""

    comment_id: Optional[int] = None
    content: Optional[str] = None
