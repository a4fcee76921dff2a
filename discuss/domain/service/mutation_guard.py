"""Time-window policy for comment mutations.

Pure policy: every check works on an already fetched comment and the
acting identity, and either returns or raises ForbiddenError. Looking up
the comment (and raising NotFoundError) is the caller's job.
"""

from datetime import datetime, timedelta

from discuss.domain.error import ForbiddenError, ForbiddenReason
from discuss.domain.model.comment import Comment
from discuss.domain.model.common import utcnow
from discuss.domain.value import UserId

DEFAULT_GRACE_PERIOD = timedelta(minutes=15)


class MutationGuard:
    """Decides whether an edit, delete or restore is allowed right now.

    Each window is measured from the instant the comment entered its
    current state: created_at for edits, deleted_at for restores. Both
    bounds are inclusive.
    """

    def __init__(
        self,
        edit_window: timedelta = DEFAULT_GRACE_PERIOD,
        restore_window: timedelta = DEFAULT_GRACE_PERIOD,
    ) -> None:
        """Initialize mutation guard.

        Args:
            edit_window: How long after creation the author may edit
            restore_window: How long after deletion the author may restore
        """
        self.edit_window = edit_window
        self.restore_window = restore_window

    def check_ownership(self, comment: Comment, actor_id: UserId) -> None:
        """Require the acting identity to be the comment's author.

        Raises:
            ForbiddenError: NOT_AUTHOR
        """
        if comment.author_id != actor_id:
            raise ForbiddenError(ForbiddenReason.NOT_AUTHOR, str(comment.id))

    def check_edit(
        self, comment: Comment, actor_id: UserId, now: datetime | None = None
    ) -> None:
        """Authorize a content edit.

        Raises:
            ForbiddenError: NOT_AUTHOR, COMMENT_DELETED or EDIT_WINDOW_ELAPSED
        """
        self.check_ownership(comment, actor_id)

        if comment.is_deleted:
            raise ForbiddenError(ForbiddenReason.COMMENT_DELETED, str(comment.id))

        now = now or utcnow()
        if now - comment.created_at > self.edit_window:
            raise ForbiddenError(ForbiddenReason.EDIT_WINDOW_ELAPSED, str(comment.id))

    def check_delete(self, comment: Comment, actor_id: UserId) -> None:
        """Authorize a soft delete.

        Any state is accepted once ownership holds; deleting a tombstone
        again is a no-op for the caller to short-circuit.

        Raises:
            ForbiddenError: NOT_AUTHOR
        """
        self.check_ownership(comment, actor_id)

    def check_restore(
        self, comment: Comment, actor_id: UserId, now: datetime | None = None
    ) -> None:
        """Authorize a restore of a soft-deleted comment.

        Raises:
            ForbiddenError: NOT_AUTHOR, NOT_DELETED or RESTORE_WINDOW_ELAPSED
        """
        self.check_ownership(comment, actor_id)

        if comment.deleted_at is None:
            raise ForbiddenError(ForbiddenReason.NOT_DELETED, str(comment.id))

        now = now or utcnow()
        if now - comment.deleted_at > self.restore_window:
            raise ForbiddenError(
                ForbiddenReason.RESTORE_WINDOW_ELAPSED, str(comment.id)
            )
