def test_report_status_stamps_reviewer(client, register, admin_token, auth, ctx):
    dev_token, _dev = register("dev@bdseeker.io")
    _co_token, co = register("co@bdseeker.io", role="company")
    admin_id = ctx.tokens.validate(admin_token).user_id

    r = client.post(
        "/api/v1/reports",
        json={"reported_id": co["id"], "report_type": "spam", "description": "Fake postings"},
        headers=auth(dev_token),
    )
    assert r.status_code == 201, r.text
    report = r.json()["data"]
    assert report["status"] == "pending"
    assert report["reviewed_by"] is None
    assert report["reviewed_at"] is None

    r = client.put(f"/api/v1/admin/reports/{report['id']}/status", json={"status": "resolved"}, headers=auth(admin_token))
    assert r.status_code == 200
    updated = r.json()["data"]
    assert updated["status"] == "resolved"
    assert updated["reviewed_by"] == admin_id
    assert updated["reviewed_at"] is not None


def test_repeat_status_update_overwrites_reviewer(client, register, admin_token, auth, ctx):
    dev_token, _ = register("dev@bdseeker.io")
    _co_token, co = register("co@bdseeker.io", role="company")
    second_admin, _ = register("admin2@bdseeker.io", role="admin")
    report = client.post(
        "/api/v1/reports",
        json={"reported_id": co["id"], "report_type": "harassment", "description": "Rude"},
        headers=auth(dev_token),
    ).json()["data"]

    client.put(f"/api/v1/admin/reports/{report['id']}/status", json={"status": "reviewed"}, headers=auth(admin_token))
    r = client.put(
        f"/api/v1/admin/reports/{report['id']}/status", json={"status": "dismissed"}, headers=auth(second_admin)
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["status"] == "dismissed"
    assert data["reviewed_by"] == ctx.tokens.validate(second_admin).user_id


def test_report_validation(client, register, admin_token, auth):
    dev_token, dev = register("dev@bdseeker.io")
    r = client.post(
        "/api/v1/reports",
        json={"reported_id": dev["id"], "report_type": "spam", "description": "me"},
        headers=auth(dev_token),
    )
    assert r.status_code == 400
    r = client.post(
        "/api/v1/reports",
        json={"reported_id": 9999, "report_type": "spam", "description": "who"},
        headers=auth(dev_token),
    )
    assert r.status_code == 404
    assert client.post("/api/v1/reports", json={"reported_id": 1, "report_type": "x", "description": "y"}).status_code == 401


def test_report_status_must_leave_pending(client, register, admin_token, auth):
    dev_token, _ = register("dev@bdseeker.io")
    _co_token, co = register("co@bdseeker.io", role="company")
    report = client.post(
        "/api/v1/reports",
        json={"reported_id": co["id"], "report_type": "spam", "description": "x"},
        headers=auth(dev_token),
    ).json()["data"]
    r = client.put(f"/api/v1/admin/reports/{report['id']}/status", json={"status": "pending"}, headers=auth(admin_token))
    assert r.status_code == 400
    r = client.put("/api/v1/admin/reports/9999/status", json={"status": "resolved"}, headers=auth(admin_token))
    assert r.status_code == 404


def test_list_reports_filters(client, register, admin_token, auth):
    dev_token, _ = register("dev@bdseeker.io")
    _co_token, co = register("co@bdseeker.io", role="company")
    for kind in ("spam", "spam", "harassment"):
        client.post(
            "/api/v1/reports",
            json={"reported_id": co["id"], "report_type": kind, "description": "x"},
            headers=auth(dev_token),
        )
    data = client.get("/api/v1/admin/reports?type=spam", headers=auth(admin_token)).json()["data"]
    assert data["total_count"] == 2
    data = client.get("/api/v1/admin/reports?status=resolved", headers=auth(admin_token)).json()["data"]
    assert data["total_count"] == 0
    data = client.get("/api/v1/admin/reports", headers=auth(admin_token)).json()["data"]
    assert data["total_count"] == 3
    assert data["data"][0]["report_type"] == "harassment"
