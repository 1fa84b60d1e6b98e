"""FastAPI endpoint tests.

These use httpx.AsyncClient + ASGITransport so they exercise routing,
serialisation and error mapping without a running server. Lifespan events
do not run, so the AppState is installed on the app directly.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tests.conftest import make_response, web_chunk
from trend_analyzer.constants import ANALYSIS_FAILED_MESSAGE


@pytest.fixture
def api_app(app_state):
    from trend_api.main import app

    app.state.trend_state = app_state
    yield app
    del app.state.trend_state


@pytest_asyncio.fixture
async def client(api_app):
    async with AsyncClient(transport=ASGITransport(app=api_app), base_url="http://test") as ac:
        yield ac


async def _login(client, username, password):
    return await client.post("/api/v1/auth/login", json={"username": username, "password": password})


# -----------------------------------------------------------------------
# Health / auth
# -----------------------------------------------------------------------


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client):
        body = (await client.get("/api/v1/health")).json()
        assert body == {"status": "ok", "surface": "login", "query_status": "idle"}


class TestAuth:

    @pytest.mark.asyncio
    async def test_login_routes_admin(self, client):
        resp = await _login(client, " Admin ", "admin123")
        assert resp.status_code == 200
        assert resp.json() == {"username": "admin", "role": "admin", "surface": "admin"}

    @pytest.mark.asyncio
    async def test_login_routes_standard(self, client):
        body = (await _login(client, "user", "user123")).json()
        assert body["surface"] == "query"

    @pytest.mark.asyncio
    async def test_bad_login(self, client):
        resp = await _login(client, "admin", "wrong")
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid username or password."

    @pytest.mark.asyncio
    async def test_me_requires_login(self, client):
        assert (await client.get("/api/v1/auth/me")).status_code == 401

    @pytest.mark.asyncio
    async def test_logout(self, client):
        await _login(client, "user", "user123")
        body = (await client.post("/api/v1/auth/logout")).json()
        assert body == {"username": None, "role": None, "surface": "login"}
        assert (await client.get("/api/v1/auth/me")).status_code == 401


# -----------------------------------------------------------------------
# Admin
# -----------------------------------------------------------------------


class TestAdmin:

    @pytest.mark.asyncio
    async def test_standard_user_forbidden(self, client):
        await _login(client, "user", "user123")
        assert (await client.get("/api/v1/admin/accounts")).status_code == 403

    @pytest.mark.asyncio
    async def test_list_accounts(self, client):
        await _login(client, "admin", "admin123")
        body = (await client.get("/api/v1/admin/accounts")).json()
        assert body["count"] == 2
        assert body["accounts"][0] == {"username": "admin", "role": "admin"}
        assert "password" not in body["accounts"][0]

    @pytest.mark.asyncio
    async def test_add_account(self, client):
        await _login(client, "admin", "admin123")
        resp = await client.post(
            "/api/v1/admin/accounts",
            json={"username": "editor", "password": "pw", "role": "standard"},
        )
        assert resp.status_code == 201
        assert resp.json() == {"username": "editor", "role": "standard"}

    @pytest.mark.asyncio
    async def test_add_duplicate_conflict(self, client):
        await _login(client, "admin", "admin123")
        resp = await client.post("/api/v1/admin/accounts", json={"username": "USER", "password": "pw"})
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Username already exists."

    @pytest.mark.asyncio
    async def test_add_blank_rejected(self, client):
        await _login(client, "admin", "admin123")
        resp = await client.post("/api/v1/admin/accounts", json={"username": " ", "password": "pw"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_change_password(self, client, app_state):
        await _login(client, "admin", "admin123")
        resp = await client.put("/api/v1/admin/accounts/user/password", json={"new_password": "fresh"})
        assert resp.status_code == 200
        assert resp.json() == {
            "username": "user",
            "message": "Password for user has been updated.",
            "expires_in": 3.0,
        }
        assert app_state.store.find("user").password == "fresh"

    @pytest.mark.asyncio
    async def test_change_password_unknown_user(self, client):
        await _login(client, "admin", "admin123")
        resp = await client.put("/api/v1/admin/accounts/ghost/password", json={"new_password": "x"})
        assert resp.status_code == 200
        assert (await client.get("/api/v1/admin/accounts")).json()["count"] == 2


# -----------------------------------------------------------------------
# Trends
# -----------------------------------------------------------------------


class TestTrends:

    @pytest.mark.asyncio
    async def test_admin_cannot_analyze(self, client):
        await _login(client, "admin", "admin123")
        assert (await client.post("/api/v1/trends/analyze", json={})).status_code == 403

    @pytest.mark.asyncio
    async def test_analyze(self, client, genai_client):
        genai_client.aio.models.generate_content.return_value = make_response(
            "Festival season", [web_chunk("https://x.example", "X"), web_chunk("https://y.example")],
        )
        await _login(client, "user", "user123")

        resp = await client.post(
            "/api/v1/trends/analyze",
            json={"city": "Pune", "state": "MH", "language": "marathi", "category": "entertainment"},
        )

        assert resp.status_code == 200
        assert resp.json() == {
            "text": "Festival season",
            "citations": [
                {"uri": "https://x.example", "title": "X"},
                {"uri": "https://y.example", "title": "https://y.example"},
            ],
            "num_citations": 2,
        }
        prompt = genai_client.aio.models.generate_content.call_args.kwargs["contents"]
        assert "location: Pune, MH." in prompt
        assert "'Lokmat Filmy'" in prompt

    @pytest.mark.asyncio
    async def test_unknown_category_rejected(self, client):
        await _login(client, "user", "user123")
        resp = await client.post("/api/v1/trends/analyze", json={"category": "weather"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_failure_returns_generic_message(self, client, genai_client):
        genai_client.aio.models.generate_content.side_effect = RuntimeError("quota exceeded for key abc")
        await _login(client, "user", "user123")

        resp = await client.post("/api/v1/trends/analyze", json={})

        assert resp.status_code == 502
        assert resp.json()["detail"] == ANALYSIS_FAILED_MESSAGE
        assert (await client.get("/api/v1/auth/me")).status_code == 200

    @pytest.mark.asyncio
    async def test_options(self, client):
        await _login(client, "user", "user123")
        body = (await client.get("/api/v1/trends/options")).json()
        assert list(body["languages"]) == ["english", "hindi", "marathi"]
        assert body["publications"]["devotional"] == "Lokmat Bhakti"
