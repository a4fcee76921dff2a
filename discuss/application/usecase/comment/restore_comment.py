"""Restore comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId

from .items import CommentItem


class RestoreCommentRequest(BaseModel):
    """Restore comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class RestoreCommentUseCase(BaseUseCase[RestoreCommentRequest, CommentItem]):
    """Use case for restoring a soft-deleted comment within its grace period."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize restore comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: RestoreCommentRequest) -> CommentItem:
        """Execute restore flow.

        Returns:
            The restored comment

        Raises:
            NotFoundError: If comment not found
            ForbiddenError: If not the author, not deleted, or window elapsed
        """
        comment = await self.comment_service.restore_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            actor_id=UserId(UUID(request.user_id)),
        )
        return CommentItem.from_domain(comment)
