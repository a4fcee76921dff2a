"""Edit comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId

from .items import CommentItem


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str  # New content


class EditCommentUseCase(BaseUseCase[EditCommentRequest, CommentItem]):
    """Use case for editing a comment within its edit window."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> CommentItem:
        """Execute edit comment flow.

        Args:
            request: Edit comment request

        Returns:
            Updated comment

        Raises:
            NotFoundError: If comment not found
            ForbiddenError: If not the author, deleted, or edit window elapsed
        """
        comment = await self.comment_service.edit_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            content=request.content,
            actor_id=UserId(UUID(request.user_id)),
        )
        return CommentItem.from_domain(comment)
