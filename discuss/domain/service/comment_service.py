"""Comment domain service."""

import logfire

from discuss.domain.error import ForbiddenError, NotFoundError, ValidationError
from discuss.domain.model.comment import Comment
from discuss.domain.model.common import utcnow
from discuss.domain.model.user import User
from discuss.domain.repository import CommentRepository, UserRepository
from discuss.domain.value import CommentId, UserId

from .base import Service
from .mutation_guard import MutationGuard
from .notification_service import NotificationService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
        mutation_guard: MutationGuard,
        max_replies_limit: int = 50,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            user_repository: User repository
            notification_service: Notification service for reply notifications
            mutation_guard: Edit/delete/restore policy
            max_replies_limit: Largest page accepted by get_replies
        """
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.notification_service = notification_service
        self.mutation_guard = mutation_guard
        self.max_replies_limit = max_replies_limit

    async def create_comment(
        self,
        content: str,
        author_id: UserId,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Replying to someone else's comment notifies its author. The
        notification is best effort: a failure there is logged and does
        not fail the create.

        Args:
            content: Comment text
            author_id: Acting user, recorded as author
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the author or the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            author = await self.user_repository.find_by_id(author_id)
            if not author:
                logfire.warn("Comment author not found", author_id=str(author_id))
                raise NotFoundError("User", str(author_id))

            parent = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Comment", str(parent_id))

            comment = await self.comment_repository.create(
                content=content,
                author_id=author_id,
                parent_id=parent_id,
            )
            logfire.info(
                "Comment created",
                comment_id=str(comment.id),
                author_id=str(author_id),
                is_reply=parent is not None,
            )

            if parent and parent.author_id != author_id:
                await self._notify_reply(parent, comment, author)

            return comment

    async def _notify_reply(self, parent: Comment, reply: Comment, sender: User) -> None:
        """Emit a reply notification without letting it fail the reply."""
        try:
            await self.notification_service.create_reply_notification(
                recipient_id=parent.author_id,
                sender_id=sender.id,
                comment_id=reply.id,
                sender_email=sender.email,
            )
        except Exception as e:
            logfire.error(
                "Reply notification failed",
                comment_id=str(reply.id),
                recipient_id=str(parent.author_id),
                error=str(e),
                _exc_info=True,
            )

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID, tombstoned or not.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If no comment has this ID
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def edit_comment(
        self, comment_id: CommentId, content: str, actor_id: UserId
    ) -> Comment:
        """Replace a comment's content within the edit window.

        Args:
            comment_id: Comment ID
            content: New content
            actor_id: Acting user, who must be the author

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If not the author, deleted, or the window elapsed
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
            content_length=len(content),
        ):
            comment = await self.get_comment_by_id(comment_id)
            try:
                self.mutation_guard.check_edit(comment, actor_id)
            except ForbiddenError as e:
                logfire.warn(
                    "Comment edit rejected",
                    comment_id=str(comment_id),
                    reason=e.reason.value,
                )
                raise

            updated = await self.comment_repository.update_content(comment_id, content)
            logfire.info("Comment edited", comment_id=str(comment_id))
            return updated

    async def soft_delete_comment(
        self, comment_id: CommentId, actor_id: UserId
    ) -> Comment:
        """Tombstone a comment.

        Deleting an already deleted comment succeeds without writing, so
        the original deletion instant (and restore window) is kept.

        Args:
            comment_id: Comment ID
            actor_id: Acting user, who must be the author

        Returns:
            The tombstoned comment

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If not the author
        """
        with logfire.span(
            "comment_service.soft_delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self.get_comment_by_id(comment_id)
            try:
                self.mutation_guard.check_delete(comment, actor_id)
            except ForbiddenError as e:
                logfire.warn(
                    "Comment delete rejected",
                    comment_id=str(comment_id),
                    reason=e.reason.value,
                )
                raise

            if comment.is_deleted:
                logfire.info("Comment already deleted", comment_id=str(comment_id))
                return comment

            deleted = await self.comment_repository.set_deleted_at(comment_id, utcnow())
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return deleted

    async def restore_comment(
        self, comment_id: CommentId, actor_id: UserId
    ) -> Comment:
        """Clear a comment's tombstone within the restore window.

        Args:
            comment_id: Comment ID
            actor_id: Acting user, who must be the author

        Returns:
            The restored comment

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If not the author, not deleted, or the window elapsed
        """
        with logfire.span(
            "comment_service.restore_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self.get_comment_by_id(comment_id)
            try:
                self.mutation_guard.check_restore(comment, actor_id)
            except ForbiddenError as e:
                logfire.warn(
                    "Comment restore rejected",
                    comment_id=str(comment_id),
                    reason=e.reason.value,
                )
                raise

            restored = await self.comment_repository.set_deleted_at(comment_id, None)
            logfire.info("Comment restored", comment_id=str(comment_id))
            return restored

    async def get_replies(
        self, parent_id: CommentId, offset: int = 0, limit: int = 10
    ) -> list[Comment]:
        """Get one page of a comment's direct replies, oldest first.

        Args:
            parent_id: Parent comment ID
            offset: Number of replies to skip (>= 0)
            limit: Page size (1..max_replies_limit)

        Returns:
            List of non-deleted replies

        Raises:
            ValidationError: If offset or limit is out of range
        """
        if offset < 0:
            raise ValidationError(f"offset must not be negative, got {offset}")
        if limit < 1 or limit > self.max_replies_limit:
            raise ValidationError(
                f"limit must be between 1 and {self.max_replies_limit}, got {limit}"
            )

        with logfire.span(
            "comment_service.get_replies",
            parent_id=str(parent_id),
            offset=offset,
            limit=limit,
        ):
            replies = await self.comment_repository.find_replies(
                parent_id=parent_id, offset=offset, limit=limit
            )
            logfire.info(
                "Replies retrieved", parent_id=str(parent_id), count=len(replies)
            )
            return replies
