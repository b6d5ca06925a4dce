"""
Posts module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError, OwnershipError


class PostNotFoundError(NotFoundError):
    """Raised when a post does not exist."""

    def __init__(self, post_id: Any):
        super().__init__("Post not found", code="POST_NOT_FOUND", details={"post_id": post_id})


class PostOwnershipError(OwnershipError):
    """Raised when someone other than the author tries to delete a post."""

    def __init__(self, post_id: Any, user_id: Any = None):
        super().__init__("Post", post_id, user_id)


class CommentNotFoundError(NotFoundError):
    """Raised when a comment does not exist."""

    def __init__(self, comment_id: Any):
        super().__init__(
            "Comment not found",
            code="COMMENT_NOT_FOUND",
            details={"comment_id": comment_id},
        )
