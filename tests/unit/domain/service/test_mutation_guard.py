"""Unit tests for MutationGuard."""

from datetime import timedelta

import pytest

from discuss.domain.error import ForbiddenError, ForbiddenReason
from discuss.domain.service import MutationGuard
from tests.conftest import BASE_TIME, make_comment, make_user


@pytest.fixture
def guard() -> MutationGuard:
    return MutationGuard()


class TestCheckEdit:
    """Tests for edit authorization."""

    def test_author_within_window(self, guard):
        """Edit at 14:59 after creation should be allowed."""
        alice = make_user()
        comment = make_comment(alice)

        guard.check_edit(
            comment, alice.id, now=BASE_TIME + timedelta(minutes=14, seconds=59)
        )

    def test_window_boundary_is_inclusive(self, guard):
        """Edit at exactly 15:00 should still be allowed."""
        alice = make_user()
        comment = make_comment(alice)

        guard.check_edit(comment, alice.id, now=BASE_TIME + timedelta(minutes=15))

    def test_author_after_window(self, guard):
        """Edit 16 minutes after creation should be rejected."""
        alice = make_user()
        comment = make_comment(alice)

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_edit(comment, alice.id, now=BASE_TIME + timedelta(minutes=16))

        assert exc_info.value.reason == ForbiddenReason.EDIT_WINDOW_ELAPSED

    def test_non_author(self, guard):
        """Another user should be rejected even within the window."""
        alice = make_user()
        bob = make_user("bob@example.com")
        comment = make_comment(alice)

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_edit(comment, bob.id, now=BASE_TIME)

        assert exc_info.value.reason == ForbiddenReason.NOT_AUTHOR

    def test_ownership_checked_before_window(self, guard):
        """A late edit by a non-author should report NOT_AUTHOR."""
        alice = make_user()
        bob = make_user("bob@example.com")
        comment = make_comment(alice)

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_edit(comment, bob.id, now=BASE_TIME + timedelta(hours=1))

        assert exc_info.value.reason == ForbiddenReason.NOT_AUTHOR

    def test_deleted_comment(self, guard):
        """Editing a tombstone should be rejected."""
        alice = make_user()
        comment = make_comment(alice, deleted_at=BASE_TIME + timedelta(minutes=1))

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_edit(comment, alice.id, now=BASE_TIME + timedelta(minutes=2))

        assert exc_info.value.reason == ForbiddenReason.COMMENT_DELETED

    def test_custom_window(self):
        """A configured window should replace the default."""
        guard = MutationGuard(edit_window=timedelta(minutes=5))
        alice = make_user()
        comment = make_comment(alice)

        with pytest.raises(ForbiddenError):
            guard.check_edit(comment, alice.id, now=BASE_TIME + timedelta(minutes=6))


class TestCheckDelete:
    """Tests for delete authorization."""

    def test_author_any_age(self, guard):
        """Delete has no time window."""
        alice = make_user()
        comment = make_comment(alice)

        guard.check_delete(comment, alice.id)

    def test_author_already_deleted(self, guard):
        """Deleting a tombstone again should pass the guard."""
        alice = make_user()
        comment = make_comment(alice, deleted_at=BASE_TIME)

        guard.check_delete(comment, alice.id)

    def test_non_author(self, guard):
        alice = make_user()
        bob = make_user("bob@example.com")
        comment = make_comment(alice)

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_delete(comment, bob.id)

        assert exc_info.value.reason == ForbiddenReason.NOT_AUTHOR


class TestCheckRestore:
    """Tests for restore authorization."""

    def test_within_window(self, guard):
        """Restore 10 minutes after deletion should be allowed."""
        alice = make_user()
        deleted_at = BASE_TIME + timedelta(hours=2)
        comment = make_comment(alice, deleted_at=deleted_at)

        guard.check_restore(
            comment, alice.id, now=deleted_at + timedelta(minutes=10)
        )

    def test_window_measured_from_deletion(self, guard):
        """An old comment deleted just now should still be restorable."""
        alice = make_user()
        deleted_at = BASE_TIME + timedelta(days=3)
        comment = make_comment(alice, deleted_at=deleted_at)

        guard.check_restore(comment, alice.id, now=deleted_at + timedelta(minutes=1))

    def test_after_window(self, guard):
        alice = make_user()
        comment = make_comment(alice, deleted_at=BASE_TIME)

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_restore(
                comment, alice.id, now=BASE_TIME + timedelta(minutes=15, seconds=1)
            )

        assert exc_info.value.reason == ForbiddenReason.RESTORE_WINDOW_ELAPSED

    def test_not_deleted(self, guard):
        """Restoring a live comment should be rejected."""
        alice = make_user()
        comment = make_comment(alice)

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_restore(comment, alice.id, now=BASE_TIME)

        assert exc_info.value.reason == ForbiddenReason.NOT_DELETED

    def test_non_author(self, guard):
        alice = make_user()
        bob = make_user("bob@example.com")
        comment = make_comment(alice, deleted_at=BASE_TIME)

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_restore(comment, bob.id, now=BASE_TIME)

        assert exc_info.value.reason == ForbiddenReason.NOT_AUTHOR


class TestForbiddenError:
    """Forbidden errors carry a stable code and a message."""

    def test_reason_message_and_resource(self, guard):
        alice = make_user()
        bob = make_user("bob@example.com")
        comment = make_comment(alice)

        with pytest.raises(ForbiddenError) as exc_info:
            guard.check_ownership(comment, bob.id)

        error = exc_info.value
        assert error.reason.value == "not_author"
        assert error.message == "You are not the author of this comment."
        assert error.resource_id == str(comment.id)
