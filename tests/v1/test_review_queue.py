# tests/v1/test_review_queue.py
"""Tests for moderation queue endpoints."""

from fastapi import status

from wheel_spinner.models import Admin, SharedWheel


def test_next_on_empty_queue(client) -> None:
    response = client.get("/api/v1/review-queue/next")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() is None


def test_next_returns_most_read(client, make_wheel) -> None:
    make_wheel(path="aaa-aaa", read_count=5)
    make_wheel(path="bbb-bbb", read_count=20)
    make_wheel(path="ccc-ccc", read_count=3)

    body = client.get("/api/v1/review-queue/next").json()

    assert body["path"] == "bbb-bbb"
    assert body["readCount"] == 20
    assert body["reviewStatus"] == "Pending"


def test_approve_twice_credits_reviewer_once(client, make_wheel, reviewer, db_session) -> None:
    make_wheel(path="abc-def")

    first = client.post("/api/v1/review-queue/abc-def/approve")
    second = client.post("/api/v1/review-queue/abc-def/approve")

    assert first.json() == {"status": "ok"}
    assert second.status_code == status.HTTP_200_OK
    assert second.json() == {"status": "unchanged"}
    wheel = db_session.get(SharedWheel, "abc-def", populate_existing=True)
    assert wheel.review_status == "Approved"
    admin = db_session.get(Admin, "default", populate_existing=True)
    assert admin.total_reviews == 1
    assert client.get("/api/v1/review-queue/count").json() == {"wheelsInReviewQueue": 0}


def test_delete_removes_wheel(client, make_wheel, reviewer, db_session) -> None:
    make_wheel(path="abc-def")

    response = client.post("/api/v1/review-queue/abc-def/delete")

    assert response.json() == {"status": "ok"}
    assert client.get("/api/v1/shared-wheels/abc-def").status_code == status.HTTP_404_NOT_FOUND
    assert db_session.get(Admin, "default", populate_existing=True).session_reviews == 1


def test_decision_on_unknown_path_is_harmless(client, reviewer) -> None:
    response = client.post("/api/v1/review-queue/zzz-zzz/delete")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "unchanged"}
