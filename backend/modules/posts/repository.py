"""
Post repository for database access.

Covers the `posts`, `comments` and `replies` tables. Feed queries embed
authors and threads through PostgREST resource embedding; ordering of
embedded threads is applied after the fetch.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from modules.users.models import UserSummary

from .models import Comment, Post, Reply

AUTHOR = "users(id, full_name, profile_picture)"
REPLY_SELECT = f"*, {AUTHOR}"
COMMENT_SELECT = f"*, {AUTHOR}, replies({REPLY_SELECT})"
POST_SELECT = f"*, {AUTHOR}, comments({COMMENT_SELECT})"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class PostRepository(BaseRepository[Post]):
    """Repository for posts and their comment threads."""

    # -------------------------------------------------------------------------
    # Posts
    # -------------------------------------------------------------------------

    def create_post(self, user_id: int, content: str, caption: Optional[str]) -> Post:
        rows = self._execute(
            self._db.table("posts").insert({
                "user_id": user_id,
                "content": content,
                "caption": caption,
                "likes": 0,
            }),
            "create post",
        )
        return self._map_to_post(rows[0])

    def get_post(self, post_id: int) -> Optional[Post]:
        """Get a post with its author, comments and replies."""
        row = self._first(
            self._db.table("posts").select(POST_SELECT).eq("id", post_id),
            "get post",
        )
        return self._map_to_post(row) if row else None

    def list_posts(self) -> list[Post]:
        rows = self._execute(
            self._db.table("posts").select(POST_SELECT).order("created_at", desc=True),
            "list posts",
        )
        return [self._map_to_post(r) for r in rows]

    def set_content(self, post_id: int, content: str) -> Optional[Post]:
        row = self._first(
            self._db.table("posts").update({"content": content}).eq("id", post_id),
            "update post content",
        )
        return self._map_to_post(row) if row else None

    def increment_likes(self, post_id: int, delta: int) -> Optional[Post]:
        """
        Add `delta` to a post's like counter in a single statement.

        Returns None if the post does not exist.
        """
        row = self._first(
            self._db.rpc("increment_post_likes", {"p_post_id": post_id, "p_delta": delta}),
            "update post likes",
        )
        return self._map_to_post(row) if row else None

    def delete_post(self, post_id: int) -> None:
        """Delete a post after its replies and comments."""
        comments = self._execute(
            self._db.table("comments").select("id").eq("post_id", post_id),
            "list post comments",
        )
        comment_ids = [c["id"] for c in comments]
        if comment_ids:
            self._execute(
                self._db.table("replies").delete().in_("comment_id", comment_ids),
                "delete post replies",
            )
            self._execute(
                self._db.table("comments").delete().eq("post_id", post_id),
                "delete post comments",
            )
        self._execute(self._db.table("posts").delete().eq("id", post_id), "delete post")

    # -------------------------------------------------------------------------
    # Comments and replies
    # -------------------------------------------------------------------------

    def create_comment(self, user_id: int, post_id: int, content: str) -> Comment:
        rows = self._execute(
            self._db.table("comments")
            .insert({"user_id": user_id, "post_id": post_id, "content": content}),
            "create comment",
        )
        return self.get_comment(rows[0]["id"]) or self._map_to_comment(rows[0])

    def get_comment(self, comment_id: int) -> Optional[Comment]:
        row = self._first(
            self._db.table("comments").select(COMMENT_SELECT).eq("id", comment_id),
            "get comment",
        )
        return self._map_to_comment(row) if row else None

    def list_comments(self, post_id: int) -> list[Comment]:
        rows = self._execute(
            self._db.table("comments")
            .select(COMMENT_SELECT)
            .eq("post_id", post_id)
            .order("created_at", desc=True),
            "list comments",
        )
        return [self._map_to_comment(r) for r in rows]

    def create_reply(self, user_id: int, comment_id: int, content: str) -> Reply:
        rows = self._execute(
            self._db.table("replies")
            .insert({"user_id": user_id, "comment_id": comment_id, "content": content}),
            "create reply",
        )
        row = self._first(
            self._db.table("replies").select(REPLY_SELECT).eq("id", rows[0]["id"]),
            "get reply",
        )
        return self._map_to_reply(row or rows[0])

    def list_replies(self, comment_id: int) -> list[Reply]:
        rows = self._execute(
            self._db.table("replies")
            .select(REPLY_SELECT)
            .eq("comment_id", comment_id)
            .order("created_at"),
            "list replies",
        )
        return [self._map_to_reply(r) for r in rows]

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _map_author(data: dict[str, Any]) -> Optional[UserSummary]:
        author = data.get("users")
        return UserSummary(**author) if author else None

    @classmethod
    def _map_to_reply(cls, data: dict[str, Any]) -> Reply:
        return Reply(
            id=data["id"],
            user_id=data["user_id"],
            comment_id=data["comment_id"],
            content=data["content"],
            created_at=data.get("created_at"),
            user=cls._map_author(data),
        )

    @classmethod
    def _map_to_comment(cls, data: dict[str, Any]) -> Comment:
        replies = [cls._map_to_reply(r) for r in data.get("replies") or []]
        replies.sort(key=lambda r: r.created_at or _EPOCH)
        return Comment(
            id=data["id"],
            user_id=data["user_id"],
            post_id=data["post_id"],
            content=data["content"],
            created_at=data.get("created_at"),
            user=cls._map_author(data),
            replies=replies,
        )

    @classmethod
    def _map_to_post(cls, data: dict[str, Any]) -> Post:
        """Map a post row; comments newest first, replies oldest first."""
        comments = [cls._map_to_comment(c) for c in data.get("comments") or []]
        comments.sort(key=lambda c: c.created_at or _EPOCH, reverse=True)
        return Post(
            id=data["id"],
            user_id=data["user_id"],
            content=data.get("content") or "",
            caption=data.get("caption"),
            likes=data.get("likes") or 0,
            created_at=data.get("created_at"),
            user=cls._map_author(data),
            comments=comments,
        )
