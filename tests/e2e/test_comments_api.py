"""End-to-end tests for comment endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from learnhub.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client over an in-memory test container."""
    return TestClient(create_app(build_test_container()))


def _user() -> dict[str, str]:
    return {"X-User-Id": str(uuid4())}


@pytest.fixture
def post_id(client):
    response = client.post("/posts", json={"title": "Discussion"}, headers=_user())
    return response.json()["post_id"]


def _comment(client, post_id, headers, content="text", parent_id=None):
    response = client.post(
        f"/posts/{post_id}/comments",
        json={"content": content, "parent_id": parent_id},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateComment:
    """Tests for POST /posts/{post_id}/comments."""

    def test_reply_to_reply_is_flattened(self, client, post_id):
        u2 = _user()
        c1 = _comment(client, post_id, _user(), "C1")
        c2 = _comment(client, post_id, u2, "C2", parent_id=c1["comment_id"])

        c3 = _comment(client, post_id, _user(), "C3", parent_id=c2["comment_id"])

        assert c3["parent_id"] == c1["comment_id"]
        assert c3["mentioned_user_id"] == u2["X-User-Id"]

    def test_parent_on_another_post(self, client, post_id):
        other = client.post("/posts", json={"title": "Other"}, headers=_user()).json()
        parent = _comment(client, other["post_id"], _user())

        response = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "x", "parent_id": parent["comment_id"]},
            headers=_user(),
        )

        assert response.status_code == 400

    def test_missing_parent(self, client, post_id):
        response = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "x", "parent_id": 999},
            headers=_user(),
        )

        assert response.status_code == 404

    def test_missing_post(self, client):
        response = client.post(
            f"/posts/{uuid4()}/comments", json={"content": "x"}, headers=_user()
        )

        assert response.status_code == 404

    def test_requires_identity(self, client, post_id):
        response = client.post(f"/posts/{post_id}/comments", json={"content": "x"})

        assert response.status_code == 401


class TestListComments:
    """Tests for GET /posts/{post_id}/comments and GET /comments/{id}/replies."""

    def test_top_level_pages(self, client, post_id):
        ids = [_comment(client, post_id, _user(), f"c{i}")["comment_id"] for i in range(3)]
        _comment(client, post_id, _user(), "reply", parent_id=ids[0])

        first = client.get(f"/posts/{post_id}/comments", params={"limit": 2}).json()
        second = client.get(
            f"/posts/{post_id}/comments",
            params={"limit": 2, "cursor": first["pagination"]["next_cursor"]},
        ).json()

        assert [c["comment_id"] for c in first["data"]] == [ids[2], ids[1]]
        assert first["pagination"]["next_cursor"] == ids[1]
        assert first["pagination"]["total"] == 4
        assert [c["comment_id"] for c in second["data"]] == [ids[0]]
        assert second["data"][0]["reply_count"] == 1
        assert second["pagination"]["has_more"] is False

    def test_unknown_post(self, client):
        assert client.get(f"/posts/{uuid4()}/comments").status_code == 404

    def test_non_numeric_cursor(self, client, post_id):
        response = client.get(f"/posts/{post_id}/comments", params={"cursor": "abc"})

        assert response.status_code == 400

    def test_replies_oldest_first(self, client, post_id):
        top = _comment(client, post_id, _user(), "top")
        replies = [
            _comment(client, post_id, _user(), f"r{i}", parent_id=top["comment_id"])
            for i in range(3)
        ]

        body = client.get(
            f"/comments/{top['comment_id']}/replies", params={"limit": 2}
        ).json()

        assert [c["comment_id"] for c in body["data"]] == [
            replies[0]["comment_id"],
            replies[1]["comment_id"],
        ]
        assert body["pagination"]["total"] == 3
        assert body["pagination"]["has_more"] is True

    def test_user_comments(self, client, post_id):
        author = _user()
        _comment(client, post_id, author, "first")
        _comment(client, post_id, author, "second")

        body = client.get(f"/users/{author['X-User-Id']}/comments").json()

        assert [c["content"] for c in body["data"]] == ["second", "first"]


class TestDeleteComment:
    """Tests for DELETE /comments/{comment_id}."""

    def test_author_deletes_thread(self, client, post_id):
        author = _user()
        top = _comment(client, post_id, author, "top")
        _comment(client, post_id, _user(), "reply", parent_id=top["comment_id"])

        response = client.delete(f"/comments/{top['comment_id']}", headers=author)

        assert response.status_code == 200
        assert response.json()["deleted"] is True
        body = client.get(f"/posts/{post_id}/comments").json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 0

    def test_other_student_forbidden(self, client, post_id):
        comment = _comment(client, post_id, _user())

        response = client.delete(f"/comments/{comment['comment_id']}", headers=_user())

        assert response.status_code == 403

    def test_moderator_allowed(self, client, post_id):
        comment = _comment(client, post_id, _user())

        response = client.delete(
            f"/comments/{comment['comment_id']}",
            headers={**_user(), "X-User-Role": "moderator"},
        )

        assert response.status_code == 200

    def test_unknown_comment(self, client):
        assert client.delete("/comments/12345", headers=_user()).status_code == 404
