"""In-memory comment repository for testing."""

from collections import defaultdict
from datetime import datetime
from typing import Optional
from uuid import uuid4

from discuss.domain.error import NotFoundError
from discuss.domain.model.comment import Comment
from discuss.domain.model.common import utcnow
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.user import UserRepository
from discuss.domain.value import CommentAuthor, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Orders by (created_at, id) like the Postgres repository, so both
    stores break timestamp ties the same way.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._user_repository = user_repository

    def _chronological(self, comments: list[Comment]) -> list[Comment]:
        return sorted(comments, key=lambda c: (c.created_at, c.id))

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_descendants(self, root_id: CommentId) -> list[Comment]:
        """Walk the parent index breadth-first through non-deleted comments."""
        root = self._comments.get(root_id)
        if root is None or root.deleted_at is not None:
            return []

        children: dict[CommentId, list[Comment]] = defaultdict(list)
        for comment in self._comments.values():
            if comment.parent_id is not None and comment.deleted_at is None:
                children[comment.parent_id].append(comment)

        found = [root]
        seen = {root.id}
        frontier = [root.id]
        while frontier:
            next_frontier = []
            for parent_id in frontier:
                for child in children.get(parent_id, []):
                    if child.id in seen:
                        continue
                    seen.add(child.id)
                    found.append(child)
                    next_frontier.append(child.id)
            frontier = next_frontier

        return self._chronological(found)

    async def find_top_level_after(
        self, after: Optional[datetime] = None
    ) -> list[CommentId]:
        """Find IDs of non-deleted top-level comments in creation order."""
        comments = [
            c
            for c in self._comments.values()
            if c.is_top_level and not c.is_deleted
        ]

        if after is not None:
            comments = [c for c in comments if c.created_at > after]

        return [c.id for c in self._chronological(comments)]

    async def find_replies(
        self,
        parent_id: CommentId,
        offset: int = 0,
        limit: int = 10,
    ) -> list[Comment]:
        """Find direct non-deleted replies of a comment."""
        replies = [
            c
            for c in self._comments.values()
            if c.parent_id == parent_id and c.deleted_at is None
        ]
        return self._chronological(replies)[offset : offset + limit]

    async def count_non_deleted(self) -> int:
        """Count every non-deleted comment."""
        return sum(1 for c in self._comments.values() if c.deleted_at is None)

    async def create(
        self,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment, copying the author's display fields."""
        author = await self._user_repository.find_by_id(author_id)
        if author is None:
            raise NotFoundError("User", str(author_id))

        comment = Comment(
            id=CommentId(uuid4()),
            content=content,
            author=CommentAuthor(id=author.id, email=author.email, pfp_url=author.pfp_url),
            parent_id=parent_id,
            created_at=utcnow(),
        )
        return await self.save(comment)

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace content and stamp updated_at."""
        comment = self._get(comment_id)
        updated = comment.model_copy(update={"content": content, "updated_at": utcnow()})
        return await self.save(updated)

    async def set_deleted_at(
        self, comment_id: CommentId, deleted_at: Optional[datetime]
    ) -> Comment:
        """Set or clear the deletion timestamp."""
        comment = self._get(comment_id)
        updated = comment.model_copy(update={"deleted_at": deleted_at})
        return await self.save(updated)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment as given, timestamps included."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Remove a comment outright, as a concurrent writer might."""
        self._comments.pop(comment_id, None)

    def _get(self, comment_id: CommentId) -> Comment:
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment
