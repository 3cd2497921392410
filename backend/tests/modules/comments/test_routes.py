"""Tests for the comment endpoints."""

import pytest


@pytest.fixture
def alice(make_user):
    return make_user("alice@example.com")


@pytest.fixture
def bob(make_user):
    return make_user("bob@example.com")


@pytest.fixture
def tweet_id(client, alice, auth_headers):
    response = client.post("/api/tweets", json={"text": "a tweet"}, headers=auth_headers(alice))
    return response.json()["id"]


def seed_comments(client, headers, tweet_id, count):
    for i in range(count):
        response = client.post(
            f"/api/tweets/{tweet_id}/comments",
            json={"text": f"comment {i + 1}"},
            headers=headers,
        )
        assert response.status_code == 201


class TestCommentRoutes:
    def test_create(self, client, bob, auth_headers, tweet_id):
        response = client.post(
            f"/api/tweets/{tweet_id}/comments",
            json={"text": "nice", "user_id": 999, "tweet_id": 999},
            headers=auth_headers(bob),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == bob.id
        assert data["tweet_id"] == tweet_id

    def test_create_requires_auth(self, client, tweet_id):
        response = client.post(f"/api/tweets/{tweet_id}/comments", json={"text": "anon"})
        assert response.status_code == 401

    def test_create_on_missing_tweet(self, client, bob, auth_headers):
        response = client.post("/api/tweets/99/comments", json={"text": "x"}, headers=auth_headers(bob))

        assert response.status_code == 404
        assert response.json()["code"] == "TWEET_NOT_FOUND"

    def test_reads_are_public(self, client, bob, auth_headers, tweet_id):
        seed_comments(client, auth_headers(bob), tweet_id, 2)

        assert len(client.get("/api/comments").json()) == 2
        assert client.get("/api/comments/2").json()["text"] == "comment 2"
        assert len(client.get(f"/api/tweets/{tweet_id}/comments").json()) == 2
        assert len(client.get(f"/api/users/{bob.id}/comments").json()) == 2

    def test_cross_user_delete_is_not_found(self, client, alice, bob, auth_headers, tweet_id):
        """User A deleting B's comment 5 gets 404 and the comment survives."""
        seed_comments(client, auth_headers(bob), tweet_id, 5)

        response = client.delete("/api/comments/5", headers=auth_headers(alice))

        assert response.status_code == 404
        assert response.json()["code"] == "COMMENT_NOT_FOUND"
        comment = client.get("/api/comments/5")
        assert comment.status_code == 200
        assert comment.json()["deleted_at"] is None

    def test_cross_user_update_is_not_found(self, client, alice, bob, auth_headers, tweet_id, fake_db):
        seed_comments(client, auth_headers(bob), tweet_id, 1)

        response = client.put("/api/comments/1", json={"text": "pwned"}, headers=auth_headers(alice))

        assert response.status_code == 404
        assert fake_db.get("comments", 1)["text"] == "comment 1"

    def test_owner_can_edit_and_delete(self, client, bob, auth_headers, tweet_id):
        seed_comments(client, auth_headers(bob), tweet_id, 1)

        edited = client.put("/api/comments/1", json={"text": "edited"}, headers=auth_headers(bob))
        assert edited.json()["text"] == "edited"

        deleted = client.delete("/api/comments/1", headers=auth_headers(bob))
        assert deleted.status_code == 200
        assert client.get("/api/comments/1").status_code == 404

    def test_text_length(self, client, bob, auth_headers, tweet_id):
        response = client.post(
            f"/api/tweets/{tweet_id}/comments",
            json={"text": "x" * 501},
            headers=auth_headers(bob),
        )
        assert response.status_code == 400
