"""End-to-end tests for the comment and notification endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from discuss.config import Settings
from discuss.domain.repository import UserRepository
from discuss.interface.api.app import create_app
from discuss.util.jwt import create_token
from tests.conftest import make_user
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container with in-memory persistence."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    return TestClient(create_app(container))


@pytest.fixture
def users(container):
    """Store alice and bob; return each with an auth token."""
    alice = make_user("alice@example.com")
    bob = make_user("bob@example.com")

    async def seed():
        user_repo = await container.get(UserRepository)
        await user_repo.save(alice)
        await user_repo.save(bob)

    asyncio.run(seed())

    auth = Settings().auth
    return {
        "alice": create_token(alice.id, alice.email.root, auth),
        "bob": create_token(bob.id, bob.email.root, auth),
    }


def as_user(token: str) -> dict[str, str]:
    return {"Cookie": f"auth_token={token}"}


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestThreadsEndpoint:
    """GET /comments."""

    def test_empty_discussion(self, client):
        # Act
        response = client.get("/comments")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["threads"] == []
        assert data["total_comment_count"] == 0
        assert data["remaining_count"] == 0
        assert data["next_cursor"] is None

    def test_budget_pages_whole_threads(self, client, users):
        # Arrange - threads of sizes 1, 3, 1
        alice = as_user(users["alice"])
        first = client.post("/comments", json={"content": "one"}, headers=alice).json()
        second = client.post("/comments", json={"content": "two"}, headers=alice).json()
        reply = client.post(
            "/comments",
            json={"content": "two.a", "parent_id": second["comment_id"]},
            headers=alice,
        ).json()
        client.post(
            "/comments",
            json={"content": "two.a.i", "parent_id": reply["comment_id"]},
            headers=alice,
        )
        third = client.post("/comments", json={"content": "three"}, headers=alice).json()

        # Act
        page_one = client.get("/comments", params={"limit": 2}).json()
        page_two = client.get(
            "/comments", params={"limit": 2, "offset_id": page_one["next_cursor"]}
        ).json()
        page_three = client.get(
            "/comments", params={"limit": 2, "offset_id": page_two["next_cursor"]}
        ).json()

        # Assert
        assert [t["comment_id"] for t in page_one["threads"]] == [first["comment_id"]]
        assert page_one["total_comment_count"] == 5
        assert page_one["remaining_count"] == 4

        assert [t["comment_id"] for t in page_two["threads"]] == [second["comment_id"]]
        nested = page_two["threads"][0]["replies"][0]
        assert nested["comment_id"] == reply["comment_id"]
        assert nested["replies"][0]["content"] == "two.a.i"

        assert [t["comment_id"] for t in page_three["threads"]] == [third["comment_id"]]

    def test_invalid_limit(self, client):
        response = client.get("/comments", params={"limit": 0})

        assert response.status_code == 400

    def test_malformed_cursor(self, client):
        response = client.get("/comments", params={"offset_id": "nope"})

        assert response.status_code == 400


class TestCommentMutations:
    """POST/PATCH/DELETE /comments and restore."""

    def test_create_requires_auth(self, client):
        response = client.post("/comments", json={"content": "anonymous"})

        assert response.status_code == 401

    def test_create_rejects_empty_content(self, client, users):
        response = client.post(
            "/comments", json={"content": ""}, headers=as_user(users["alice"])
        )

        assert response.status_code == 422

    def test_reply_to_missing_parent(self, client, users):
        response = client.post(
            "/comments",
            json={
                "content": "reply",
                "parent_id": "00000000-0000-0000-0000-000000000000",
            },
            headers=as_user(users["alice"]),
        )

        assert response.status_code == 404

    def test_edit_own_comment(self, client, users):
        # Arrange
        alice = as_user(users["alice"])
        created = client.post("/comments", json={"content": "tpyo"}, headers=alice)

        # Act
        response = client.patch(
            f"/comments/{created.json()['comment_id']}",
            json={"content": "typo"},
            headers=alice,
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["content"] == "typo"
        assert response.json()["updated_at"] is not None

    def test_edit_someone_elses_comment(self, client, users):
        # Arrange
        created = client.post(
            "/comments", json={"content": "alice's"}, headers=as_user(users["alice"])
        )

        # Act
        response = client.patch(
            f"/comments/{created.json()['comment_id']}",
            json={"content": "bob's now"},
            headers=as_user(users["bob"]),
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["detail"]["reason"] == "not_author"
        assert response.json()["detail"]["message"]

    def test_delete_and_restore(self, client, users):
        # Arrange
        alice = as_user(users["alice"])
        created = client.post("/comments", json={"content": "hmm"}, headers=alice)
        comment_id = created.json()["comment_id"]

        # Act
        deleted = client.delete(f"/comments/{comment_id}", headers=alice)
        listing = client.get("/comments").json()
        restored = client.post(f"/comments/{comment_id}/restore", headers=alice)

        # Assert
        assert deleted.status_code == 200
        assert deleted.json()["content"] is None
        assert listing["threads"] == []
        assert restored.status_code == 200
        assert restored.json()["content"] == "hmm"
        assert client.get("/comments").json()["total_comment_count"] == 1

    def test_restore_live_comment(self, client, users):
        # Arrange
        alice = as_user(users["alice"])
        created = client.post("/comments", json={"content": "alive"}, headers=alice)

        # Act
        response = client.post(
            f"/comments/{created.json()['comment_id']}/restore", headers=alice
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["detail"]["reason"] == "not_deleted"

    def test_delete_missing_comment(self, client, users):
        response = client.delete(
            "/comments/00000000-0000-0000-0000-000000000000",
            headers=as_user(users["alice"]),
        )

        assert response.status_code == 404

    def test_replies_endpoint(self, client, users):
        # Arrange
        alice = as_user(users["alice"])
        root = client.post("/comments", json={"content": "root"}, headers=alice).json()
        for i in range(3):
            client.post(
                "/comments",
                json={"content": f"reply {i}", "parent_id": root["comment_id"]},
                headers=alice,
            )

        # Act
        response = client.get(
            f"/comments/{root['comment_id']}/replies",
            params={"offset": 1, "limit": 2},
        )

        # Assert
        assert response.status_code == 200
        assert [r["content"] for r in response.json()["replies"]] == [
            "reply 1",
            "reply 2",
        ]

    def test_replies_limit_too_large(self, client, users):
        root = client.post(
            "/comments", json={"content": "root"}, headers=as_user(users["alice"])
        ).json()

        response = client.get(
            f"/comments/{root['comment_id']}/replies", params={"limit": 500}
        )

        assert response.status_code == 400


class TestNotificationsEndpoint:
    """Reply notifications through the API."""

    def test_reply_notification_flow(self, client, users):
        # Arrange
        alice = as_user(users["alice"])
        bob = as_user(users["bob"])
        question = client.post(
            "/comments", json={"content": "question"}, headers=alice
        ).json()
        client.post(
            "/comments",
            json={"content": "answer", "parent_id": question["comment_id"]},
            headers=bob,
        )

        # Act
        count = client.get("/notifications/unread-count", headers=alice).json()
        listing = client.get("/notifications", headers=alice).json()
        notification_id = listing["notifications"][0]["notification_id"]
        marked = client.patch(f"/notifications/{notification_id}/read", headers=alice)
        after = client.get("/notifications/unread-count", headers=alice).json()

        # Assert
        assert count["unread_count"] == 1
        assert listing["notifications"][0]["sender_email"] == "bob@example.com"
        assert listing["notifications"][0]["comment_content"] == "answer"
        assert marked.status_code == 200
        assert after["unread_count"] == 0
        assert client.get("/notifications", headers=bob).json()["notifications"] == []

    def test_mark_all_read(self, client, users):
        # Arrange
        alice = as_user(users["alice"])
        bob = as_user(users["bob"])
        question = client.post(
            "/comments", json={"content": "question"}, headers=alice
        ).json()
        for text in ("first", "second"):
            client.post(
                "/comments",
                json={"content": text, "parent_id": question["comment_id"]},
                headers=bob,
            )

        # Act
        response = client.post("/notifications/mark-all-read", headers=alice)

        # Assert
        assert response.status_code == 200
        assert response.json()["updated_count"] == 2

    def test_notifications_require_auth(self, client):
        response = client.get("/notifications")

        assert response.status_code == 401
