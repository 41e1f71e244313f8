"""End-to-end tests for the comment API."""

import pytest
from fastapi.testclient import TestClient

from remark.interface.api.app import create_app
from remark.util.di.container import setup_di
from tests.di import build_test_container

USER = {"Authorization": "Bearer u1", "X-Tenant-ID": "shop"}
OTHER_USER = {"Authorization": "Bearer u2", "X-Tenant-ID": "shop"}
ADMIN = {"Authorization": "Bearer admin:m1", "X-Tenant-ID": "shop"}


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    with TestClient(app_instance) as test_client:
        yield test_client


def create_comment(client, headers=USER, **overrides) -> dict:
    body = {
        "resource_type": "product",
        "resource_id": "p1",
        "content": "Great product!",
    }
    body.update(overrides)
    response = client.post("/api/v1/comments", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def approve(client, comment_id: str) -> dict:
    response = client.post(
        f"/api/v1/admin/comments/{comment_id}/moderate",
        json={"status": "approved"},
        headers=ADMIN,
    )
    assert response.status_code == 200, response.text
    return response.json()


class TestCommentLifecycle:
    """Create, moderate, read, edit and delete through the API."""

    def test_create_moderate_and_list(self, client):
        """A new comment is hidden until a moderator approves it."""
        # Arrange
        created = create_comment(client)
        assert created["status"] == "pending"
        assert "ip_address" not in created

        listing = client.get(
            "/api/v1/comments",
            params={"resource_type": "product", "resource_id": "p1"},
            headers=OTHER_USER,
        )
        assert listing.json()["total"] == 0

        # Act
        moderated = approve(client, created["comment_id"])

        # Assert
        assert moderated["status"] == "approved"
        listing = client.get(
            "/api/v1/comments",
            params={"resource_type": "product", "resource_id": "p1"},
            headers=OTHER_USER,
        )
        body = listing.json()
        assert body["total"] == 1
        assert body["comments"][0]["comment_id"] == created["comment_id"]

    def test_tenant_isolation(self, client):
        created = create_comment(client)
        approve(client, created["comment_id"])

        listing = client.get(
            "/api/v1/comments",
            params={"resource_type": "product", "resource_id": "p1"},
            headers={"Authorization": "Bearer u1", "X-Tenant-ID": "other"},
        )

        assert listing.json()["total"] == 0

    def test_tenant_from_query_parameter(self, client):
        response = client.post(
            "/api/v1/comments",
            params={"tenant_id": "blog"},
            json={"resource_type": "post", "resource_id": "x", "content": "Hi"},
            headers={"Authorization": "Bearer u1"},
        )

        assert response.status_code == 201
        assert response.json()["tenant_id"] == "blog"

    def test_pending_comment_visible_only_to_author(self, client):
        created = create_comment(client)
        url = f"/api/v1/comments/{created['comment_id']}"

        assert client.get(url, headers=USER).status_code == 200
        assert client.get(url, headers=OTHER_USER).status_code == 404
        assert client.get(url, headers=ADMIN).status_code == 200

    def test_edit_and_delete(self, client):
        created = create_comment(client)
        url = f"/api/v1/comments/{created['comment_id']}"

        forbidden = client.put(url, json={"content": "hijack"}, headers=OTHER_USER)
        edited = client.put(url, json={"content": "Edited"}, headers=USER)
        deleted = client.delete(url, headers=USER)
        edit_after_delete = client.put(url, json={"content": "again"}, headers=USER)

        assert forbidden.status_code == 403
        assert edited.status_code == 200
        assert edited.json()["is_edited"] is True
        assert edited.json()["edit_history"][0]["content"] == "Great product!"
        assert deleted.json() == {"comment_id": created["comment_id"], "deleted": True}
        assert edit_after_delete.status_code == 404

    def test_replies_and_stats(self, client):
        root = create_comment(client)
        approve(client, root["comment_id"])
        reply = create_comment(client, headers=OTHER_USER, parent_id=root["comment_id"])
        approve(client, reply["comment_id"])

        replies = client.get(
            f"/api/v1/comments/{root['comment_id']}/replies", headers=USER
        )
        stats = client.get(
            "/api/v1/comments/stats",
            params={"resource_type": "product", "resource_id": "p1"},
            headers=USER,
        )

        assert [c["comment_id"] for c in replies.json()["comments"]] == [
            reply["comment_id"]
        ]
        assert reply["depth"] == 1
        assert stats.json()["total_comments"] == 2
        assert stats.json()["approved_count"] == 2

    def test_search(self, client):
        created = create_comment(client, content="Battery lasts forever")
        approve(client, created["comment_id"])

        found = client.get(
            "/api/v1/comments/search", params={"q": "battery"}, headers=USER
        )
        blank = client.get("/api/v1/comments/search", params={"q": " "}, headers=USER)

        assert found.json()["total"] == 1
        assert blank.status_code == 400


class TestErrors:
    """HTTP status codes for rejected requests."""

    def test_missing_token(self, client):
        response = client.get("/api/v1/comments", headers={"X-Tenant-ID": "shop"})

        assert response.status_code == 401

    def test_rejected_token(self, client):
        response = client.get(
            "/api/v1/comments", headers={"Authorization": "Bearer invalid"}
        )

        assert response.status_code == 401

    def test_admin_route_requires_admin(self, client):
        response = client.get("/api/v1/admin/comments/pending", headers=USER)

        assert response.status_code == 403
        assert response.json()["detail"] == "Admin access required"

    def test_malformed_comment_id(self, client):
        response = client.get("/api/v1/comments/not-a-uuid", headers=USER)

        assert response.status_code == 400

    def test_unknown_comment(self, client):
        response = client.get(
            "/api/v1/comments/00000000-0000-0000-0000-000000000000", headers=USER
        )

        assert response.status_code == 404

    def test_policy_violation(self, client):
        response = client.post(
            "/api/v1/comments",
            json={
                "resource_type": "product",
                "resource_id": "p1",
                "content": "Secret",
                "is_anonymous": True,
            },
            headers=USER,
        )

        assert response.status_code == 422

    def test_duplicate_report(self, client):
        created = create_comment(client)
        url = f"/api/v1/comments/{created['comment_id']}/reports"

        first = client.post(url, json={"reason": "spam"}, headers=OTHER_USER)
        second = client.post(url, json={"reason": "spam"}, headers=OTHER_USER)

        assert first.status_code == 201
        assert first.json()["status"] == "pending"
        assert second.status_code == 409

    def test_rate_limit(self, client):
        statuses = [
            client.post(
                "/api/v1/comments",
                json={"resource_type": "product", "resource_id": "p1", "content": "hi"},
                headers=USER,
            ).status_code
            for _ in range(11)
        ]

        assert statuses[:10] == [201] * 10
        assert statuses[10] == 429

    def test_invalid_moderation_status(self, client):
        created = create_comment(client)

        response = client.post(
            f"/api/v1/admin/comments/{created['comment_id']}/moderate",
            json={"status": "pending"},
            headers=ADMIN,
        )

        assert response.status_code == 400


class TestReactionsAndModeration:
    """Reactions, reports and the admin surface."""

    def test_reaction_round_trip(self, client):
        created = create_comment(client)
        approve(client, created["comment_id"])
        url = f"/api/v1/comments/{created['comment_id']}/reactions"

        added = client.post(url, json={"type": "like"}, headers=OTHER_USER)
        mine = client.get(f"{url}/me", headers=OTHER_USER)
        comment = client.get(
            f"/api/v1/comments/{created['comment_id']}", headers=OTHER_USER
        )
        removed = client.delete(url, headers=OTHER_USER)

        assert added.status_code == 200
        assert mine.json()["reaction_type"] == "like"
        assert comment.json()["like_count"] == 1
        assert comment.json()["user_reaction"] == "like"
        assert removed.json()["removed"] is True

    def test_bulk_moderate_pin_and_hard_delete(self, client):
        a = create_comment(client, content="a")
        b = create_comment(client, content="b")

        bulk = client.post(
            "/api/v1/admin/comments/bulk-moderate",
            json={"comment_ids": [a["comment_id"], b["comment_id"]], "status": "approved"},
            headers=ADMIN,
        )
        pinned = client.post(
            f"/api/v1/admin/comments/{b['comment_id']}/pin",
            json={"is_pinned": True},
            headers=ADMIN,
        )
        listing = client.get("/api/v1/comments", headers=USER)
        deleted = client.delete(
            f"/api/v1/admin/comments/{a['comment_id']}", headers=ADMIN
        )
        gone = client.get(f"/api/v1/comments/{a['comment_id']}", headers=ADMIN)

        assert bulk.json() == {"success_count": 2, "failed_count": 0, "failed_ids": []}
        assert pinned.json()["is_pinned"] is True
        assert listing.json()["comments"][0]["comment_id"] == b["comment_id"]
        assert deleted.status_code == 204
        assert gone.status_code == 404

    def test_report_review_queue(self, client):
        created = create_comment(client)
        client.post(
            f"/api/v1/comments/{created['comment_id']}/reports",
            json={"reason": "harassment", "description": "rude"},
            headers=OTHER_USER,
        )

        pending = client.get("/api/v1/admin/reports/pending", headers=ADMIN).json()
        report_id = pending["reports"][0]["report_id"]
        reviewed = client.post(
            f"/api/v1/admin/reports/{report_id}/review",
            json={"status": "reviewed"},
            headers=ADMIN,
        )
        after = client.get("/api/v1/admin/reports/pending", headers=ADMIN).json()

        assert pending["total"] == 1
        assert reviewed.json()["status"] == "reviewed"
        assert after["total"] == 0

    def test_settings_endpoints(self, client):
        updated = client.put(
            "/api/v1/admin/settings/product",
            json={"require_approval": False},
            headers=ADMIN,
        )
        created = create_comment(client)
        fetched = client.get("/api/v1/admin/settings/article", headers=ADMIN)
        listed = client.get("/api/v1/admin/settings", headers=ADMIN)

        assert updated.json()["require_approval"] is False
        assert created["status"] == "approved"
        assert fetched.json()["require_approval"] is True
        assert {s["resource_type"] for s in listed.json()["settings"]} == {
            "product",
            "article",
        }


class TestHealth:
    """Probes."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, client):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_live(self, client):
        assert client.get("/live").json() == {"alive": True}
