"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId

from .items import CommentItem


class DeleteCommentRequest(BaseModel):
    """Soft delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, CommentItem]):
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> CommentItem:
        """Execute soft delete flow.

        Returns:
            The tombstoned comment

        Raises:
            NotFoundError: If comment not found
            ForbiddenError: If not the author
        """
        comment = await self.comment_service.soft_delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            actor_id=UserId(UUID(request.user_id)),
        )
        return CommentItem.from_domain(comment)
