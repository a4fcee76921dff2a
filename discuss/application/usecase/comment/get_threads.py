"""Get threads use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import ThreadService
from discuss.domain.value import CommentId

from .items import ThreadItem


class GetThreadsRequest(BaseModel):
    """Get threads request."""

    limit: int  # Comment budget for the page
    offset_id: str | None = None  # Root ID of the previous page's last thread


class GetThreadsResponse(BaseModel):
    """Get threads response.

    remaining_count is relative to this page only; clients scrolling
    through several pages track their own running total.
    """

    threads: list[ThreadItem]
    total_comment_count: int
    remaining_count: int
    next_cursor: str | None


class GetThreadsUseCase(BaseUseCase[GetThreadsRequest, GetThreadsResponse]):
    """Use case for paging through top-level threads under a size budget."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get threads use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadsRequest) -> GetThreadsResponse:
        """Execute get threads flow.

        Args:
            request: Page budget and optional cursor

        Returns:
            Threads with nested replies, counts and next cursor

        Raises:
            ValidationError: If limit is below 1
            ValueError: If offset_id is not a UUID
        """
        cursor = CommentId(UUID(request.offset_id)) if request.offset_id else None

        page = await self.thread_service.paginate_threads(
            limit=request.limit, cursor=cursor
        )

        return GetThreadsResponse(
            threads=[ThreadItem.from_node(thread) for thread in page.threads],
            total_comment_count=page.total_comment_count,
            remaining_count=page.remaining_count,
            next_cursor=str(page.next_cursor) if page.next_cursor else None,
        )
