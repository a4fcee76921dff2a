"""Comment entity.

Comments form a reply hierarchy through parent_id with unlimited depth.
Deletion is soft: a tombstoned comment keeps its row and its place in
the hierarchy.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import CommentAuthor, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment (parent_id is None) or a reply to
    another comment.

    Timestamps:
    - created_at: immutable creation instant, orders siblings and threads
    - updated_at: set when the content is edited
    - deleted_at: soft tombstone, cleared again on restore
    """

    id: CommentId
    content: str = Field(min_length=1, max_length=10000)
    author: CommentAuthor
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def author_id(self) -> UserId:
        """ID of the comment's author."""
        return self.author.id

    @property
    def is_deleted(self) -> bool:
        """Whether the comment is a tombstone."""
        return self.deleted_at is not None

    @property
    def is_top_level(self) -> bool:
        """Whether the comment starts a thread."""
        return self.parent_id is None
