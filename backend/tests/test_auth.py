from bdseeker.models.user import User


def test_register_then_login_claims_match(client, ctx, register):
    token, user = register("dev@bdseeker.io", role="developer", full_name="Dev One")
    assert user["email"] == "dev@bdseeker.io"
    assert user["role"] == "developer"
    assert "password_hash" not in user

    r = client.post("/api/v1/auth/login", json={"email": "dev@bdseeker.io", "password": "testpass"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["success"] is True
    claims = ctx.tokens.validate(body["data"]["token"])
    assert claims.user_id == user["id"]
    assert claims.role.value == "developer"
    assert ctx.tokens.validate(token).user_id == user["id"]


def test_register_sets_http_only_cookie(client):
    r = client.post(
        "/api/v1/auth/register",
        json={"email": "c@bdseeker.io", "password": "testpass", "full_name": "Co", "role": "company"},
    )
    assert r.status_code == 201
    cookie = r.headers["set-cookie"]
    assert "auth_token=" in cookie
    assert "HttpOnly" in cookie
    assert "Path=/" in cookie
    assert "Max-Age=86400" in cookie
    assert "samesite=lax" in cookie.lower()


def test_duplicate_email_is_rejected_and_single_row_kept(client, ctx, register):
    register("dup@bdseeker.io")
    r = client.post(
        "/api/v1/auth/register",
        json={"email": "dup@bdseeker.io", "password": "testpass", "full_name": "Again", "role": "company"},
    )
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "user with this email already exists"}
    db = ctx.session_factory()
    try:
        assert db.query(User).filter(User.email == "dup@bdseeker.io").count() == 1
    finally:
        db.close()


def test_email_is_case_sensitive(register):
    register("Case@bdseeker.io")
    _token, user = register("case@bdseeker.io")
    assert user["email"] == "case@bdseeker.io"


def test_login_errors_do_not_reveal_which_part_failed(client, register):
    register("known@bdseeker.io")
    wrong_pw = client.post("/api/v1/auth/login", json={"email": "known@bdseeker.io", "password": "nope-nope"})
    unknown = client.post("/api/v1/auth/login", json={"email": "ghost@bdseeker.io", "password": "testpass"})
    assert wrong_pw.status_code == unknown.status_code == 401
    assert wrong_pw.json() == unknown.json()


def test_register_validation(client):
    r = client.post(
        "/api/v1/auth/register",
        json={"email": "not-an-email", "password": "123", "full_name": "", "role": "superuser"},
    )
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"] == "Validation failed"
    assert {"email", "password", "full_name", "role"} <= set(body["data"])


def test_me_requires_token(client):
    r = client.get("/api/v1/auth/me")
    assert r.status_code == 401
    assert r.json()["error"] == "Authentication required"


def test_me_rejects_bad_header_format(client):
    r = client.get("/api/v1/auth/me", headers={"Authorization": "Token abc"})
    assert r.status_code == 401
    assert r.json()["error"] == "Invalid authorization header format"


def test_me_with_bearer(client, register, auth):
    token, user = register("me@bdseeker.io", full_name="Me")
    r = client.get("/api/v1/auth/me", headers=auth(token))
    assert r.status_code == 200
    assert r.json()["data"]["id"] == user["id"]
    assert r.json()["data"]["full_name"] == "Me"


def test_me_with_cookie(client, register):
    token, user = register("cookie@bdseeker.io")
    client.cookies.set("auth_token", token)
    r = client.get("/api/v1/auth/me")
    assert r.status_code == 200
    assert r.json()["data"]["id"] == user["id"]


def test_invalid_cookie_token_is_cleared(client):
    client.cookies.set("auth_token", "garbage")
    r = client.get("/api/v1/auth/me")
    assert r.status_code == 401
    assert r.json()["error"] == "Invalid or expired token"
    cleared = [c for c in r.headers.get_list("set-cookie") if c.startswith("auth_token=")]
    assert cleared and "Max-Age=0" in cleared[0]


def test_logout_clears_all_auth_cookies(client):
    r = client.post("/api/v1/auth/logout")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Logged out successfully"}
    names = {c.split("=", 1)[0] for c in r.headers.get_list("set-cookie")}
    assert names == {"auth_token", "refresh_token", "session_id"}


def test_health(client):
    r = client.get("/api/v1/health/")
    assert r.status_code == 200
    assert r.json()["data"] == {"status": "healthy"}
