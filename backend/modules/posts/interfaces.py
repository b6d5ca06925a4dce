"""
Posts module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser, DataResponse, Envelope

from .models import (
    Comment,
    CreateCommentRequest,
    CreatePostRequest,
    CreateReplyRequest,
    Post,
    Reply,
    UpdateLikesRequest,
)


@runtime_checkable
class IPostService(Protocol):
    """Interface for the social feed: posts, likes, comments and replies."""

    async def create_post(
        self, user: AuthenticatedUser, request: CreatePostRequest
    ) -> DataResponse[Post]:
        """Create a post; the image, if any, is attached best-effort."""
        ...

    async def list_posts(self) -> DataResponse[list[Post]]:
        """The feed, newest first, with authors and comment threads."""
        ...

    async def update_likes(self, post_id: int, request: UpdateLikesRequest) -> DataResponse[Post]:
        """Adjust a post's like counter by the given amount."""
        ...

    async def delete_post(self, user: AuthenticatedUser, post_id: int) -> Envelope:
        """Delete one of the caller's posts with its comments and replies."""
        ...

    async def create_comment(
        self, user: AuthenticatedUser, request: CreateCommentRequest
    ) -> DataResponse[Comment]:
        ...

    async def list_comments(self, post_id: int) -> DataResponse[list[Comment]]:
        ...

    async def create_reply(
        self, user: AuthenticatedUser, request: CreateReplyRequest
    ) -> DataResponse[Reply]:
        ...

    async def list_replies(self, comment_id: int) -> DataResponse[list[Reply]]:
        ...
