"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.error import NotFoundError
from discuss.domain.model import Comment
from discuss.domain.model.common import utcnow
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, UserId
from discuss.persistence.mappers import row_to_comment
from discuss.persistence.tables import comments_table, users_table


def _select_comments():
    """Select comment columns joined with the author's display fields."""
    return select(
        comments_table,
        users_table.c.email.label("author_email"),
        users_table.c.pfp_url.label("author_pfp_url"),
    ).select_from(
        comments_table.join(users_table, users_table.c.id == comments_table.c.author_id)
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = _select_comments().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_descendants(self, root_id: CommentId) -> List[Comment]:
        """Find a comment and its non-deleted replies with a recursive CTE.

        The recursion only follows non-deleted comments, so the result is
        always a single connected tree rooted at root_id.
        """
        thread = (
            select(comments_table.c.id)
            .where(comments_table.c.id == root_id)
            .where(comments_table.c.deleted_at.is_(None))
            .cte("thread", recursive=True)
        )
        thread_alias = thread.alias()
        replies = comments_table.alias()
        thread = thread.union(
            select(replies.c.id)
            .where(replies.c.parent_id == thread_alias.c.id)
            .where(replies.c.deleted_at.is_(None))
        )

        stmt = (
            _select_comments()
            .join(thread, thread.c.id == comments_table.c.id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_top_level_after(
        self, after: Optional[datetime] = None
    ) -> List[CommentId]:
        """Find IDs of non-deleted top-level comments in creation order."""
        stmt = (
            select(comments_table.c.id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.deleted_at.is_(None))
        )

        if after is not None:
            stmt = stmt.where(comments_table.c.created_at > after)

        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        result = await self.session.execute(stmt)
        return [CommentId(row.id) for row in result.fetchall()]

    async def find_replies(
        self,
        parent_id: CommentId,
        offset: int = 0,
        limit: int = 10,
    ) -> List[Comment]:
        """Find direct non-deleted replies of a comment."""
        stmt = (
            _select_comments()
            .where(comments_table.c.parent_id == parent_id)
            .where(comments_table.c.deleted_at.is_(None))
            .order_by(comments_table.c.created_at, comments_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_non_deleted(self) -> int:
        """Count every non-deleted comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def create(
        self,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a comment and read it back with its author."""
        comment_id = CommentId(uuid4())
        stmt = comments_table.insert().values(
            id=comment_id,
            content=content,
            author_id=author_id,
            parent_id=parent_id,
            created_at=utcnow(),
        )
        await self.session.execute(stmt)
        await self.session.flush()

        return await self._get(comment_id)

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace content and stamp updated_at."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=utcnow())
        )
        await self.session.execute(stmt)
        await self.session.flush()

        return await self._get(comment_id)

    async def set_deleted_at(
        self, comment_id: CommentId, deleted_at: Optional[datetime]
    ) -> Comment:
        """Set or clear the deletion timestamp."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(deleted_at=deleted_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

        return await self._get(comment_id)

    async def _get(self, comment_id: CommentId) -> Comment:
        """Read back a comment that must exist."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment
