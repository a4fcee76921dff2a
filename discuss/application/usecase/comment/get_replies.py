"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId

from .items import CommentItem


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    parent_id: str  # UUID string
    offset: int = 0
    limit: int = 10


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    parent_id: str
    replies: list[CommentItem]


class GetRepliesUseCase(BaseUseCase[GetRepliesRequest, GetRepliesResponse]):
    """Use case for paging through a comment's direct replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get replies use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow."""
        replies = await self.comment_service.get_replies(
            parent_id=CommentId(UUID(request.parent_id)),
            offset=request.offset,
            limit=request.limit,
        )
        return GetRepliesResponse(
            parent_id=request.parent_id,
            replies=[CommentItem.from_domain(reply) for reply in replies],
        )
