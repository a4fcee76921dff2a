"""Unit tests for notification use cases."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.application.usecase.notification import (
    GetNotificationsRequest,
    GetNotificationsUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def reply_to_alice(unit_env):
    """Have bob reply to alice's comment; return both users."""
    create = await unit_env.get(CreateCommentUseCase)
    user_repo = await unit_env.get(UserRepository)
    alice = await user_repo.save(make_user())
    bob = await user_repo.save(make_user("bob@example.com"))

    parent = await create.execute(
        CreateCommentRequest(content="Question?", author_id=str(alice.id))
    )
    await create.execute(
        CreateCommentRequest(
            content="Answer.", author_id=str(bob.id), parent_id=parent.comment_id
        )
    )
    return alice, bob


class TestGetNotifications:
    """Tests for GetNotificationsUseCase and GetUnreadCountUseCase."""

    @pytest.mark.asyncio
    async def test_lists_reply_notification(self, unit_env):
        # Arrange
        alice, bob = await reply_to_alice(unit_env)
        use_case = await unit_env.get(GetNotificationsUseCase)

        # Act
        response = await use_case.execute(GetNotificationsRequest(user_id=str(alice.id)))

        # Assert
        assert response.unread_count == 1
        item = response.notifications[0]
        assert item.type == "reply"
        assert item.sender_id == str(bob.id)
        assert item.sender_email == "bob@example.com"
        assert item.comment_content == "Answer."
        assert item.is_read is False

    @pytest.mark.asyncio
    async def test_unread_count(self, unit_env):
        # Arrange
        alice, bob = await reply_to_alice(unit_env)
        use_case = await unit_env.get(GetUnreadCountUseCase)

        # Act
        alice_count = await use_case.execute(GetUnreadCountRequest(user_id=str(alice.id)))
        bob_count = await use_case.execute(GetUnreadCountRequest(user_id=str(bob.id)))

        # Assert
        assert alice_count.unread_count == 1
        assert bob_count.unread_count == 0


class TestMarkNotificationsRead:
    """Tests for the mark-read use cases."""

    @pytest.mark.asyncio
    async def test_mark_one_read(self, unit_env):
        # Arrange
        alice, _ = await reply_to_alice(unit_env)
        get_notifications = await unit_env.get(GetNotificationsUseCase)
        mark_read = await unit_env.get(MarkNotificationReadUseCase)
        listing = await get_notifications.execute(
            GetNotificationsRequest(user_id=str(alice.id))
        )

        # Act
        response = await mark_read.execute(
            MarkNotificationReadRequest(
                notification_id=listing.notifications[0].notification_id,
                user_id=str(alice.id),
            )
        )

        # Assert
        assert response.success is True
        after = await get_notifications.execute(
            GetNotificationsRequest(user_id=str(alice.id))
        )
        assert after.unread_count == 0
        assert after.notifications[0].is_read is True

    @pytest.mark.asyncio
    async def test_mark_someone_elses_notification(self, unit_env):
        # Arrange
        alice, bob = await reply_to_alice(unit_env)
        get_notifications = await unit_env.get(GetNotificationsUseCase)
        mark_read = await unit_env.get(MarkNotificationReadUseCase)
        listing = await get_notifications.execute(
            GetNotificationsRequest(user_id=str(alice.id))
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await mark_read.execute(
                MarkNotificationReadRequest(
                    notification_id=listing.notifications[0].notification_id,
                    user_id=str(bob.id),
                )
            )

    @pytest.mark.asyncio
    async def test_mark_unknown_notification(self, unit_env):
        # Arrange
        alice, _ = await reply_to_alice(unit_env)
        mark_read = await unit_env.get(MarkNotificationReadUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await mark_read.execute(
                MarkNotificationReadRequest(
                    notification_id=str(uuid4()), user_id=str(alice.id)
                )
            )

    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env):
        # Arrange
        alice, _ = await reply_to_alice(unit_env)
        mark_all = await unit_env.get(MarkAllNotificationsReadUseCase)

        # Act
        response = await mark_all.execute(
            MarkAllNotificationsReadRequest(user_id=str(alice.id))
        )

        # Assert
        assert response.updated_count == 1
