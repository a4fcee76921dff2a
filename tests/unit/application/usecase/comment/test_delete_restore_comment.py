"""Unit tests for DeleteCommentUseCase and RestoreCommentUseCase."""

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetThreadsRequest,
    GetThreadsUseCase,
    RestoreCommentRequest,
    RestoreCommentUseCase,
)
from discuss.domain.error import ForbiddenError
from discuss.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestDeleteAndRestore:
    """Delete then restore through the use cases."""

    @pytest.mark.asyncio
    async def test_delete_hides_content_and_thread(self, unit_env):
        """A tombstone response carries no content and leaves the listing."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        get_threads = await unit_env.get(GetThreadsUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user())
        created = await create.execute(
            CreateCommentRequest(content="Regret", author_id=str(alice.id))
        )

        # Act
        deleted = await delete.execute(
            DeleteCommentRequest(comment_id=created.comment_id, user_id=str(alice.id))
        )
        listing = await get_threads.execute(GetThreadsRequest(limit=10))

        # Assert
        assert deleted.content is None
        assert deleted.deleted_at is not None
        assert listing.threads == []
        assert listing.total_comment_count == 0

    @pytest.mark.asyncio
    async def test_restore_brings_thread_back(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        restore = await unit_env.get(RestoreCommentUseCase)
        get_threads = await unit_env.get(GetThreadsUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user())
        created = await create.execute(
            CreateCommentRequest(content="Second thoughts", author_id=str(alice.id))
        )
        await delete.execute(
            DeleteCommentRequest(comment_id=created.comment_id, user_id=str(alice.id))
        )

        # Act
        restored = await restore.execute(
            RestoreCommentRequest(comment_id=created.comment_id, user_id=str(alice.id))
        )
        listing = await get_threads.execute(GetThreadsRequest(limit=10))

        # Assert
        assert restored.content == "Second thoughts"
        assert restored.deleted_at is None
        assert [t.comment_id for t in listing.threads] == [created.comment_id]

    @pytest.mark.asyncio
    async def test_restore_by_other_user(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        restore = await unit_env.get(RestoreCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user())
        bob = await user_repo.save(make_user("bob@example.com"))
        created = await create.execute(
            CreateCommentRequest(content="Mine", author_id=str(alice.id))
        )
        await delete.execute(
            DeleteCommentRequest(comment_id=created.comment_id, user_id=str(alice.id))
        )

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await restore.execute(
                RestoreCommentRequest(
                    comment_id=created.comment_id, user_id=str(bob.id)
                )
            )
