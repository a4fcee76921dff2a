"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.domain.repository import NotificationRepository, UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_top_level(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(content="Hello", author_id=str(alice.id))
        )

        # Assert
        assert response.content == "Hello"
        assert response.parent_id is None
        assert response.author.user_id == str(alice.id)
        assert response.updated_at is None
        assert response.deleted_at is None

    @pytest.mark.asyncio
    async def test_reply_creates_notification(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = await user_repo.save(make_user())
        bob = await user_repo.save(make_user("bob@example.com"))
        parent = await use_case.execute(
            CreateCommentRequest(content="Question?", author_id=str(alice.id))
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                content="Answer.",
                author_id=str(bob.id),
                parent_id=parent.comment_id,
            )
        )

        # Assert
        assert reply.parent_id == parent.comment_id
        assert await notification_repo.count_unread(alice.id) == 1

    @pytest.mark.asyncio
    async def test_unknown_parent(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user())

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    content="Reply",
                    author_id=str(alice.id),
                    parent_id=str(uuid4()),
                )
            )
