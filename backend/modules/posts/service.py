"""
Social feed service.
"""

import logging
import time

from shared.models import AuthenticatedUser, DataResponse, Envelope
from shared.validators import REQUIRED_FIELDS, require_fields, validate_text
from modules.storage.interfaces import IImageStorage
from modules.storage.models import StorageBucket

from .exceptions import CommentNotFoundError, PostNotFoundError, PostOwnershipError
from .interfaces import IPostService
from .models import (
    Comment,
    CreateCommentRequest,
    CreatePostRequest,
    CreateReplyRequest,
    Post,
    Reply,
    UpdateLikesRequest,
)
from .repository import PostRepository

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """Implementation of feed operations."""

    def __init__(self, posts: PostRepository, images: IImageStorage):
        self._posts = posts
        self._images = images

    async def create_post(
        self, user: AuthenticatedUser, request: CreatePostRequest
    ) -> DataResponse[Post]:
        """
        Create a post.

        The row is written first with the caption as its content; a
        successfully uploaded image then replaces the content with its URL.
        """
        caption = (request.caption or "").strip() or None
        post = self._posts.create_post(user.id, caption or "", caption)
        logger.info("User %s created post %s", user.id, post.id)

        attachment = await self._images.attach(
            request.image_base64,
            StorageBucket.POST_IMAGES,
            f"post_{user.id}_{int(time.time() * 1000)}",
            lambda url: self._posts.set_content(post.id, url),
        )
        post = self._posts.get_post(post.id) or attachment.record or post
        return DataResponse[Post](
            message="Post created successfully",
            data=post,
            warning=attachment.warning,
        )

    async def list_posts(self) -> DataResponse[list[Post]]:
        return DataResponse[list[Post]](data=self._posts.list_posts())

    async def update_likes(self, post_id: int, request: UpdateLikesRequest) -> DataResponse[Post]:
        require_fields(request.model_dump(by_alias=True), ("likes",))
        if self._posts.get_post(post_id) is None:
            raise PostNotFoundError(post_id)

        post = self._posts.increment_likes(post_id, request.likes)
        if post is None:
            raise PostNotFoundError(post_id)
        return DataResponse[Post](
            message="Post likes updated successfully",
            data=self._posts.get_post(post_id) or post,
        )

    async def delete_post(self, user: AuthenticatedUser, post_id: int) -> Envelope:
        post = self._posts.get_post(post_id)
        if post is None or post.user_id != user.id:
            raise PostOwnershipError(post_id, user.id)
        self._posts.delete_post(post_id)
        logger.info("User %s deleted post %s", user.id, post_id)
        return Envelope(message="Post deleted successfully")

    async def create_comment(
        self, user: AuthenticatedUser, request: CreateCommentRequest
    ) -> DataResponse[Comment]:
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["comment"])
        content = validate_text(request.content, "content")
        if self._posts.get_post(request.post_id) is None:
            raise PostNotFoundError(request.post_id)

        comment = self._posts.create_comment(user.id, request.post_id, content)
        return DataResponse[Comment](message="Comment added successfully", data=comment)

    async def list_comments(self, post_id: int) -> DataResponse[list[Comment]]:
        return DataResponse[list[Comment]](data=self._posts.list_comments(post_id))

    async def create_reply(
        self, user: AuthenticatedUser, request: CreateReplyRequest
    ) -> DataResponse[Reply]:
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["reply"])
        content = validate_text(request.content, "content")
        if self._posts.get_comment(request.comment_id) is None:
            raise CommentNotFoundError(request.comment_id)

        reply = self._posts.create_reply(user.id, request.comment_id, content)
        return DataResponse[Reply](message="Reply added successfully", data=reply)

    async def list_replies(self, comment_id: int) -> DataResponse[list[Reply]]:
        return DataResponse[list[Reply]](data=self._posts.list_replies(comment_id))
