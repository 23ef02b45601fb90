import pytest
from fastapi.testclient import TestClient

from bdseeker.core.config import Settings
from bdseeker.core.context import AppContext
from bdseeker.db.init_db import create_tables
from bdseeker.main import create_app

PASSWORD = "testpass"


@pytest.fixture()
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        seed_on_startup=False,
        log_level="WARNING",
    )


@pytest.fixture()
def ctx(settings):
    context = AppContext.from_settings(settings)
    create_tables(context)
    yield context
    context.close()


@pytest.fixture()
def client(ctx):
    return TestClient(create_app(context=ctx))


@pytest.fixture()
def register(client):
    """Register a user over the API and return (token, user dict).

    The cookie jar is emptied afterwards so each call authenticates explicitly.
    """

    def _register(email: str, role: str = "developer", password: str = PASSWORD, full_name: str = "Test User"):
        r = client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": password, "full_name": full_name, "role": role},
        )
        assert r.status_code == 201, r.text
        client.cookies.clear()
        data = r.json()["data"]
        return data["token"], data["user"]

    return _register


@pytest.fixture()
def admin_token(register):
    token, _user = register("admin@bdseeker.io", role="admin", full_name="Admin")
    return token


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth():
    return bearer
