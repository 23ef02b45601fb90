import pytest

from bdseeker.core.errors import ConflictError, ForbiddenError, ValidationError
from bdseeker.core.permissions import Identity
from bdseeker.models.company import CompanyReview
from bdseeker.models.user import Role
from bdseeker.services.moderation import ContentState, ModerationService, content_state, transition_content


def pending_review() -> CompanyReview:
    return CompanyReview(company_id=1, user_id=1, content="ok", is_approved=False, deleted_at=None)


def test_pending_to_approved():
    review = transition_content(pending_review(), ContentState.APPROVED)
    assert content_state(review) == ContentState.APPROVED


def test_pending_to_removed():
    review = transition_content(pending_review(), ContentState.REMOVED)
    assert content_state(review) == ContentState.REMOVED
    assert review.deleted_at is not None


@pytest.mark.parametrize("first", [ContentState.APPROVED, ContentState.REMOVED])
@pytest.mark.parametrize("second", [ContentState.APPROVED, ContentState.REMOVED])
def test_terminal_states_do_not_move(first, second):
    review = transition_content(pending_review(), first)
    with pytest.raises(ConflictError):
        transition_content(review, second)


def test_back_to_pending_is_invalid():
    review = transition_content(pending_review(), ContentState.APPROVED)
    with pytest.raises(ValidationError):
        transition_content(review, ContentState.PENDING)


def test_service_requires_admin(ctx):
    db = ctx.session_factory()
    try:
        dev = Identity(user_id=1, email="d@bdseeker.io", role=Role.DEVELOPER)
        with pytest.raises(ForbiddenError):
            ModerationService(db).approve_review(dev, 1)
    finally:
        db.close()


@pytest.fixture()
def company(client, register, auth):
    token, user = register("co@bdseeker.io", role="company")
    r = client.post("/api/v1/companies", json={"company_name": "Acme", "location": "Dhaka"}, headers=auth(token))
    assert r.status_code == 201, r.text
    return token, r.json()["data"]


def test_review_hidden_until_approved(client, register, admin_token, auth, company):
    _co_token, co = company
    dev_token, _ = register("dev@bdseeker.io")

    r = client.post(f"/api/v1/companies/{co['id']}/reviews", json={"content": "Great place"}, headers=auth(dev_token))
    assert r.status_code == 201
    review = r.json()["data"]
    assert review["is_approved"] is False

    public = client.get(f"/api/v1/companies/{co['id']}/reviews").json()["data"]
    assert public["total_count"] == 0
    assert client.get(f"/api/v1/companies/{co['id']}").json()["data"]["reviews"] == []

    pending = client.get("/api/v1/admin/reviews/pending", headers=auth(admin_token)).json()["data"]
    assert [p["id"] for p in pending["data"]] == [review["id"]]

    r = client.put(f"/api/v1/admin/reviews/{review['id']}/approve", headers=auth(admin_token))
    assert r.status_code == 200
    assert r.json()["data"]["is_approved"] is True

    public = client.get(f"/api/v1/companies/{co['id']}/reviews").json()["data"]
    assert [p["id"] for p in public["data"]] == [review["id"]]
    pending = client.get("/api/v1/admin/reviews/pending", headers=auth(admin_token)).json()["data"]
    assert pending["total_count"] == 0

    r = client.put(f"/api/v1/admin/reviews/{review['id']}/approve", headers=auth(admin_token))
    assert r.status_code == 400
    assert r.json()["error"] == "content is already approved"


def test_rejected_review_disappears(client, register, admin_token, auth, company):
    _co_token, co = company
    dev_token, _ = register("dev@bdseeker.io")
    review = client.post(
        f"/api/v1/companies/{co['id']}/reviews", json={"content": "spam"}, headers=auth(dev_token)
    ).json()["data"]

    r = client.delete(f"/api/v1/admin/reviews/{review['id']}", headers=auth(admin_token))
    assert r.status_code == 200
    assert client.get("/api/v1/admin/reviews/pending", headers=auth(admin_token)).json()["data"]["total_count"] == 0
    r = client.put(f"/api/v1/admin/reviews/{review['id']}/approve", headers=auth(admin_token))
    assert r.status_code == 404


def test_review_comment_flow(client, register, admin_token, auth, company):
    _co_token, co = company
    dev_token, _ = register("dev@bdseeker.io")
    review = client.post(
        f"/api/v1/companies/{co['id']}/reviews", json={"content": "Nice"}, headers=auth(dev_token)
    ).json()["data"]

    # Pending reviews cannot be commented on.
    r = client.post(f"/api/v1/companies/reviews/{review['id']}/comments", json={"content": "+1"}, headers=auth(dev_token))
    assert r.status_code == 404

    client.put(f"/api/v1/admin/reviews/{review['id']}/approve", headers=auth(admin_token))
    r = client.post(f"/api/v1/companies/reviews/{review['id']}/comments", json={"content": "+1"}, headers=auth(dev_token))
    assert r.status_code == 201
    comment = r.json()["data"]
    assert comment["is_approved"] is False
    assert client.get(f"/api/v1/companies/reviews/{review['id']}/comments").json()["data"]["total_count"] == 0

    pending = client.get("/api/v1/admin/comments/pending?kind=review", headers=auth(admin_token)).json()["data"]
    assert [c["id"] for c in pending["data"]] == [comment["id"]]

    r = client.put(f"/api/v1/admin/comments/review/{comment['id']}/approve", headers=auth(admin_token))
    assert r.status_code == 200
    listed = client.get(f"/api/v1/companies/reviews/{review['id']}/comments").json()["data"]
    assert [c["id"] for c in listed["data"]] == [comment["id"]]


def test_job_comment_flow(client, register, admin_token, auth, company):
    co_token, _co = company
    dev_token, _ = register("dev@bdseeker.io")
    job = client.post(
        "/api/v1/jobs",
        json={"title": "Backend Engineer", "description": "Python", "work_mode": "remote"},
        headers=auth(co_token),
    ).json()["data"]

    r = client.post(f"/api/v1/jobs/{job['id']}/comments", json={"content": "Salary?"}, headers=auth(dev_token))
    assert r.status_code == 201
    comment = r.json()["data"]
    assert client.get(f"/api/v1/jobs/{job['id']}").json()["data"]["comments"] == []

    # Review comments and job comments are separate queues.
    assert client.get("/api/v1/admin/comments/pending", headers=auth(admin_token)).json()["data"]["total_count"] == 0
    pending = client.get("/api/v1/admin/comments/pending?kind=job", headers=auth(admin_token)).json()["data"]
    assert [c["id"] for c in pending["data"]] == [comment["id"]]

    stats = client.get("/api/v1/admin/stats", headers=auth(admin_token)).json()["data"]
    assert stats["pending_comments"] == 1

    r = client.delete(f"/api/v1/admin/comments/job/{comment['id']}", headers=auth(admin_token))
    assert r.status_code == 200
    assert client.get(f"/api/v1/jobs/{job['id']}/comments").json()["data"]["total_count"] == 0
    r = client.put(f"/api/v1/admin/comments/job/{comment['id']}/approve", headers=auth(admin_token))
    assert r.status_code == 404


def test_unknown_comment_kind_is_rejected(client, admin_token, auth):
    r = client.put("/api/v1/admin/comments/post/1/approve", headers=auth(admin_token))
    assert r.status_code == 400
