"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer and must support
    point lookups, recursive descendant queries and atomic single-row
    updates.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, tombstoned or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_descendants(self, root_id: CommentId) -> List[Comment]:
        """Find a comment and every non-deleted reply beneath it.

        The closure only descends through non-deleted comments, so a
        tombstone hides its own subtree from the result.

        Args:
            root_id: ID of the comment at the top of the subtree

        Returns:
            The root and its descendants ordered by created_at ascending,
            or an empty list if the root is deleted or absent
        """
        pass

    @abstractmethod
    async def find_top_level_after(
        self, after: Optional[datetime] = None
    ) -> List[CommentId]:
        """Find IDs of non-deleted top-level comments in creation order.

        Args:
            after: Exclusive lower bound on created_at (None for no bound)

        Returns:
            Comment IDs ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_id: CommentId,
        offset: int = 0,
        limit: int = 10,
    ) -> List[Comment]:
        """Find direct non-deleted replies of a comment.

        Args:
            parent_id: The parent comment ID
            offset: Number of replies to skip
            limit: Maximum number of replies to return

        Returns:
            Replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_non_deleted(self) -> int:
        """Count every non-deleted comment.

        Returns:
            Number of comments without a deletion timestamp
        """
        pass

    @abstractmethod
    async def create(
        self,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment with a new ID and creation timestamp.

        Args:
            content: Comment text
            author_id: Author user ID
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            The created comment with author display fields populated
        """
        pass

    @abstractmethod
    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace a comment's content and stamp updated_at.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment
        """
        pass

    @abstractmethod
    async def set_deleted_at(
        self, comment_id: CommentId, deleted_at: Optional[datetime]
    ) -> Comment:
        """Set or clear a comment's deletion timestamp.

        Args:
            comment_id: The comment ID
            deleted_at: Tombstone instant, or None to restore

        Returns:
            The updated comment
        """
        pass
