"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from discuss.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    GetThreadsRequest,
    GetThreadsResponse,
    GetThreadsUseCase,
    RestoreCommentRequest,
    RestoreCommentUseCase,
)
from discuss.config import CommentSettings
from discuss.domain.error import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from discuss.domain.service import JWTService
from discuss.domain.value import UserId

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


def _require_user(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> UserId:
    """Resolve the acting identity or answer 401."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def _forbidden(error: ForbiddenError) -> HTTPException:
    """Map a rejected mutation to 403 with its stable reason code."""
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail={"reason": error.reason.value, "message": error.message},
    )


@router.get("", response_model=GetThreadsResponse)
async def get_threads(
    get_threads_use_case: FromDishka[GetThreadsUseCase],
    comment_settings: FromDishka[CommentSettings],
    limit: int | None = Query(default=None),
    offset_id: str | None = Query(default=None),
) -> GetThreadsResponse:
    """Get the next page of top-level threads with their replies.

    A page holds whole threads only. Threads are added oldest first until
    the comment budget is reached; the first thread is always returned
    even when it alone exceeds the budget.

    Args:
        get_threads_use_case: Get threads use case from DI
        comment_settings: Comment policy settings (default page budget)
        limit: Comment budget for the page
        offset_id: next_cursor from the previous page

    Returns:
        Threads, total and remaining comment counts, and next cursor

    Raises:
        HTTPException: If limit or cursor is malformed
    """
    if limit is None:
        limit = comment_settings.default_thread_limit

    try:
        request = GetThreadsRequest(limit=limit, offset_id=offset_id)
        return await get_threads_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ValueError as e:
        logfire.warn("Malformed thread cursor", offset_id=offset_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="offset_id must be a comment ID",
        )


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Create a top-level comment or reply to another comment.

    Requires authentication. Replying to someone else's comment notifies
    its author.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        HTTPException: If not authenticated, parent missing, or input invalid
    """
    user_id = _require_user(jwt_service, auth_token, "create comments")

    try:
        use_case_request = CreateCommentRequest(
            content=request.content,
            author_id=str(user_id),
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.patch("/{comment_id}", response_model=CommentItem)
async def edit_comment(
    comment_id: str,
    request: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit a comment's content.

    Only the author can edit, and only within the edit window.

    Args:
        comment_id: Comment UUID
        request: New content
        edit_comment_use_case: Edit comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated comment

    Raises:
        HTTPException: 401, 403 with a reason code, 404, or 400
    """
    user_id = _require_user(jwt_service, auth_token, "edit comments")

    try:
        use_case_request = EditCommentRequest(
            comment_id=comment_id,
            user_id=str(user_id),
            content=request.content,
        )
        return await edit_comment_use_case.execute(use_case_request)
    except ForbiddenError as e:
        raise _forbidden(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        logfire.warn("Comment edit validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{comment_id}", response_model=CommentItem)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Soft-delete a comment.

    The comment disappears from threads immediately; its author may
    restore it during the grace period.
    """
    user_id = _require_user(jwt_service, auth_token, "delete comments")

    try:
        use_case_request = DeleteCommentRequest(
            comment_id=comment_id, user_id=str(user_id)
        )
        return await delete_comment_use_case.execute(use_case_request)
    except ForbiddenError as e:
        raise _forbidden(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/{comment_id}/restore", response_model=CommentItem)
async def restore_comment(
    comment_id: str,
    restore_comment_use_case: FromDishka[RestoreCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Restore a soft-deleted comment within the grace period."""
    user_id = _require_user(jwt_service, auth_token, "restore comments")

    try:
        use_case_request = RestoreCommentRequest(
            comment_id=comment_id, user_id=str(user_id)
        )
        return await restore_comment_use_case.execute(use_case_request)
    except ForbiddenError as e:
        raise _forbidden(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    offset: int = Query(default=0),
    limit: int = Query(default=10),
) -> GetRepliesResponse:
    """Get one page of a comment's direct replies, oldest first.

    Args:
        comment_id: Parent comment UUID
        get_replies_use_case: Get replies use case from DI
        offset: Number of replies to skip
        limit: Page size

    Returns:
        Direct non-deleted replies
    """
    try:
        request = GetRepliesRequest(parent_id=comment_id, offset=offset, limit=limit)
        return await get_replies_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
