"""Tests for registration, login, token refresh and profile endpoints."""

import pytest

from tripplanner.core.security import create_access_token, decode_token

REGISTER = {"email": "noa@example.com", "name": "Noa Levi", "password": "s3cret-pass"}


@pytest.fixture
def login(client):
    async def _login(email=REGISTER["email"], password=REGISTER["password"]):
        return await client.post("/auth/login", json={"email": email, "password": password})

    return _login


class TestRegisterAndLogin:
    @pytest.mark.asyncio
    async def test_register_then_login(self, client, login):
        resp = await client.post("/auth/register", json=REGISTER)
        assert resp.status_code == 201
        assert resp.json()["preferred_language"] == "en"
        assert "hashed_password" not in resp.json()

        tokens = (await login()).json()
        assert tokens["token_type"] == "bearer"
        assert decode_token(tokens["access_token"])["type"] == "access"

        me = (await client.get("/auth/me", headers={"Authorization": f"Bearer {tokens['access_token']}"})).json()
        assert me["email"] == REGISTER["email"]

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client):
        await client.post("/auth/register", json=REGISTER)
        resp = await client.post("/auth/register", json=REGISTER)
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_short_password(self, client):
        resp = await client.post("/auth/register", json={**REGISTER, "password": "short"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_bad_credentials(self, client, login):
        await client.post("/auth/register", json=REGISTER)
        assert (await login(password="wrong-password")).status_code == 401
        assert (await login(email="ghost@example.com")).status_code == 401

    @pytest.mark.asyncio
    async def test_me_anonymous(self, client):
        resp = await client.get("/auth/me")
        assert resp.status_code == 200
        assert resp.json() is None


class TestRefreshTokens:
    @pytest.mark.asyncio
    async def test_refresh_and_logout(self, client, login):
        await client.post("/auth/register", json=REGISTER)
        tokens = (await login()).json()

        resp = await client.post("/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert resp.status_code == 200
        assert resp.json()["access_token"]

        await client.post("/auth/logout", json={"refresh_token": tokens["refresh_token"]})
        resp = await client.post("/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_access_token_is_not_a_refresh_token(self, client, login):
        await client.post("/auth/register", json=REGISTER)
        tokens = (await login()).json()
        resp = await client.post("/auth/refresh", json={"refresh_token": tokens["access_token"]})
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_oldest_session_evicted(self, client, login):
        await client.post("/auth/register", json=REGISTER)
        sessions = [(await login()).json() for _ in range(4)]

        resp = await client.post("/auth/refresh", json={"refresh_token": sessions[0]["refresh_token"]})
        assert resp.status_code == 401
        resp = await client.post("/auth/refresh", json={"refresh_token": sessions[-1]["refresh_token"]})
        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_logout_everywhere(self, client, login):
        await client.post("/auth/register", json=REGISTER)
        first = (await login()).json()
        second = (await login()).json()

        await client.post("/auth/logout", json={"refresh_token": first["refresh_token"], "all_sessions": True})
        resp = await client.post("/auth/refresh", json={"refresh_token": second["refresh_token"]})
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_garbage_bearer_token(self, client):
        resp = await client.get("/trips", headers={"Authorization": "Bearer not-a-jwt"})
        assert resp.status_code == 401


class TestProfile:
    @pytest.mark.asyncio
    async def test_language(self, client, owner_headers):
        resp = await client.put("/auth/language", json={"language": "he"}, headers=owner_headers)
        assert resp.json()["preferred_language"] == "he"

        resp = await client.put("/auth/language", json={"language": "fr"}, headers=owner_headers)
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_search_hides_email(self, client, owner_headers, make_user):
        await make_user(name="Gil Cohen")
        await make_user(name="Avigail")
        await make_user(name="Noam")

        hits = (await client.get("/users/search?term=GIL", headers=owner_headers)).json()
        assert sorted(h["name"] for h in hits) == ["Avigail", "Gil Cohen"]
        assert all(set(h) == {"id", "name"} for h in hits)

    @pytest.mark.asyncio
    async def test_unknown_user_token(self, client):
        token = create_access_token({"sub": "9999"})
        resp = await client.get("/trips", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
