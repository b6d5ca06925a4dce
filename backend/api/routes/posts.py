"""
Social feed API endpoints: posts, comments and replies.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from modules.posts.interfaces import IPostService
from modules.posts.models import (
    Comment,
    CreateCommentRequest,
    CreatePostRequest,
    CreateReplyRequest,
    Post,
    Reply,
    UpdateLikesRequest,
)
from shared.exceptions import MissingFieldError
from shared.models import AuthenticatedUser, DataResponse, Envelope

from ..dependencies import get_post_service
from ..middleware.auth import get_current_user

router = APIRouter()
comments_router = APIRouter()
replies_router = APIRouter()


@router.post("", response_model=DataResponse[Post], status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> DataResponse[Post]:
    """
    Publish a post with an optional caption and image.

    An image that cannot be stored is dropped and reported as a `warning`.
    """
    return await service.create_post(user, request)


@router.get("", response_model=DataResponse[list[Post]])
async def list_posts(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> DataResponse[list[Post]]:
    """The feed, newest first, with comment threads."""
    return await service.list_posts()


@router.put("/{post_id}/likes", response_model=DataResponse[Post])
async def update_likes(
    post_id: int,
    request: UpdateLikesRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> DataResponse[Post]:
    return await service.update_likes(post_id, request)


@router.delete("/{post_id}", response_model=Envelope)
async def delete_post(
    post_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Envelope:
    """Delete one of the caller's own posts."""
    return await service.delete_post(user, post_id)


@comments_router.post("", response_model=DataResponse[Comment], status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> DataResponse[Comment]:
    return await service.create_comment(user, request)


@comments_router.get("", response_model=DataResponse[list[Comment]])
async def list_comments(
    post_id: Optional[int] = Query(default=None, alias="postId"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> DataResponse[list[Comment]]:
    if post_id is None:
        raise MissingFieldError("postId")
    return await service.list_comments(post_id)


@replies_router.post("", response_model=DataResponse[Reply], status_code=status.HTTP_201_CREATED)
async def create_reply(
    request: CreateReplyRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> DataResponse[Reply]:
    return await service.create_reply(user, request)


@replies_router.get("", response_model=DataResponse[list[Reply]])
async def list_replies(
    comment_id: Optional[int] = Query(default=None, alias="commentId"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> DataResponse[list[Reply]]:
    if comment_id is None:
        raise MissingFieldError("commentId")
    return await service.list_replies(comment_id)
