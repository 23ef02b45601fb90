import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from bdseeker.main import create_app
from bdseeker.repositories.jobs import JobRepository
from bdseeker.repositories.users import UserRepository


@pytest.fixture()
def app(ctx):
    return create_app(context=ctx)


def test_unexpected_exception_becomes_generic_500(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    client = TestClient(app, raise_server_exceptions=False)
    r = client.get("/boom")
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Internal server error"}
    assert "secret internals" not in r.text


def test_server_keeps_serving_after_a_crash(app):
    @app.get("/boom")
    def boom():
        raise ValueError("nope")

    client = TestClient(app, raise_server_exceptions=False)
    assert client.get("/boom").status_code == 500
    assert client.get("/api/v1/health/").status_code == 200


def test_database_error_on_read_is_500(app, monkeypatch):
    def broken_list(self, *args, **kwargs):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(JobRepository, "list", broken_list)
    client = TestClient(app, raise_server_exceptions=False)
    r = client.get("/api/v1/jobs")
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Internal server error"}


def test_database_error_on_write_is_500(app, monkeypatch):
    def broken_create(self, user):
        raise OperationalError("INSERT INTO users", {}, Exception("disk full"))

    monkeypatch.setattr(UserRepository, "create", broken_create)
    client = TestClient(app, raise_server_exceptions=False)
    r = client.post(
        "/api/v1/auth/register",
        json={"email": "dev@bdseeker.io", "password": "testpass", "full_name": "Dev", "role": "developer"},
    )
    assert r.status_code == 500
    assert r.json()["error"] == "Internal server error"
    assert "disk full" not in r.text


def test_unknown_route_uses_envelope(client):
    r = client.get("/api/v1/nowhere")
    assert r.status_code == 404
    assert r.json()["success"] is False
