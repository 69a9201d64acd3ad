import json

import httpx
import pytest

from gearguard.client import ApiError, GearGuardClient, SessionStore

LOGIN_BODY = {
    "token": "signed.jwt.token",
    "tokenType": "bearer",
    "user": {
        "id": 7,
        "fullName": "Riley Operator",
        "email": "riley@plant.io",
        "role": "manager",
        "teamId": None,
        "isActive": True,
    },
}


def test_populate_and_clear():
    store = SessionStore()
    assert not store.is_authenticated
    assert store.auth_headers() == {}

    store.populate(LOGIN_BODY)
    assert store.is_authenticated
    assert store.user_id == 7
    assert store.role == "manager"
    assert store.full_name == "Riley Operator"
    assert store.auth_headers() == {"Authorization": "Bearer signed.jwt.token"}

    store.clear()
    assert not store.is_authenticated
    assert store.user_id is None
    assert store.email is None


def test_listeners_see_login_and_logout():
    seen = []
    store = SessionStore()
    store.subscribe(lambda s: seen.append(s.is_authenticated))

    store.populate(LOGIN_BODY)
    store.clear()

    assert seen == [True, False]


@pytest.mark.asyncio
async def test_login_populates_session_and_sends_token():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.path == "/api/auth/login":
            assert json.loads(request.content) == {
                "email": "riley@plant.io",
                "password": "correct-horse-battery",
            }
            return httpx.Response(200, json=LOGIN_BODY)
        return httpx.Response(200, json=[])

    session = SessionStore()
    async with GearGuardClient(
        session=session, transport=httpx.MockTransport(handler)
    ) as client:
        await client.login("riley@plant.io", "correct-horse-battery")
        assert session.user_id == 7

        await client.list_requests(equipment_id=3)

        client.logout()
        await client.list_requests()

    assert "authorization" not in calls[0].headers
    assert calls[1].headers["authorization"] == "Bearer signed.jwt.token"
    assert calls[1].url.params["equipmentId"] == "3"
    assert "requesterId" not in calls[1].url.params
    assert "authorization" not in calls[2].headers


@pytest.mark.asyncio
async def test_failed_login_raises_and_leaves_session_empty():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401)

    session = SessionStore()
    async with GearGuardClient(
        session=session, transport=httpx.MockTransport(handler)
    ) as client:
        with pytest.raises(ApiError) as exc_info:
            await client.login("riley@plant.io", "wrong")

    assert exc_info.value.status_code == 401
    assert not session.is_authenticated


@pytest.mark.asyncio
async def test_error_message_taken_from_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400, json={"type": "validation", "message": "subject is required"}
        )

    async with GearGuardClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(ApiError) as exc_info:
            await client.create_request({"teamId": 1})

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "subject is required"
