"""
Posts module.

The social feed: posts with likes, comments and replies.

Public API:
- IPostService: Interface for feed operations
- PostRepository: Data access for posts, comments and replies
- Post, Comment, Reply: Models
- Post exceptions
"""

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
from .exceptions import CommentNotFoundError, PostNotFoundError, PostOwnershipError

__all__ = [
    "IPostService",
    "PostRepository",
    "Comment",
    "CreateCommentRequest",
    "CreatePostRequest",
    "CreateReplyRequest",
    "Post",
    "Reply",
    "UpdateLikesRequest",
    "CommentNotFoundError",
    "PostNotFoundError",
    "PostOwnershipError",
]
