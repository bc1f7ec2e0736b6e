"""Unit tests for the async Beeswax client, served by httpx.MockTransport."""

import json

import httpx
import pytest

from beeswax.async_client import AsyncBeeswaxClient
from beeswax.errors import BeeswaxAPIError, BeeswaxAuthenticationError
from beeswax.resources import Advertiser, Authenticate, CreateAdvertiser, ReadAdvertiser, ReadViewList

BASE_URL = "https://buzzkey.api.beeswax.com"


class FakeBuzz:
    """Records requests and answers them from a queue of (status, body) pairs."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self.responses.pop(0)
        headers = {}
        if request.url.path.endswith("/authenticate"):
            headers["set-cookie"] = "PHPSESSID=abc123; Path=/"
        return httpx.Response(status_code, json=body, headers=headers)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


def _client(fake: FakeBuzz) -> AsyncBeeswaxClient:
    return AsyncBeeswaxClient(BASE_URL, http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake)))


@pytest.mark.asyncio
async def test_authenticated_keeps_session_cookie():
    fake = FakeBuzz(
        (200, {"success": True, "payload": None}),
        (200, {"success": True, "payload": []}),
    )

    client = await AsyncBeeswaxClient.authenticated(
        BASE_URL,
        Authenticate.simple("user@example.com", "secret"),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake)),
    )
    async with client:
        await client.read(ReadAdvertiser(advertiser_id=1))

    login, read = fake.requests
    assert login.method == "POST"
    assert str(login.url) == f"{BASE_URL}/rest/authenticate"
    assert json.loads(login.content)["email"] == "user@example.com"
    assert read.headers["cookie"] == "PHPSESSID=abc123"


@pytest.mark.asyncio
async def test_authentication_failure():
    fake = FakeBuzz((200, {"success": False, "message": "Invalid credentials"}))

    with pytest.raises(BeeswaxAuthenticationError, match="Invalid credentials"):
        await AsyncBeeswaxClient.authenticated(
            BASE_URL,
            Authenticate.simple("user@example.com", "wrong"),
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake)),
        )


@pytest.mark.asyncio
async def test_crud_round_trip():
    fake = FakeBuzz(
        (200, {"success": True, "payload": {"id": 42}}),
        (200, {"success": True, "payload": [{"advertiser_id": 42, "advertiser_name": "Example", "active": False}]}),
        (200, {"success": True, "payload": {"id": 42}}),
        (200, {"success": True, "payload": {"id": 42}}),
    )
    client = _client(fake)

    created = await client.create(CreateAdvertiser(advertiser_name="Example"))
    assert created.advertiser_id == 42
    assert fake.requests[-1].method == "POST"

    read = (await client.read(Advertiser.read_request(advertiser_id=42, alternative_id="alt-42")))[0]
    assert read.advertiser_name == "Example"
    assert fake.requests[-1].url.params["advertiser_id"] == "42"
    assert fake.requests[-1].url.params["alternative_id"] == "alt-42"

    read.active = True
    updated = await client.update(read)
    assert updated is read
    assert fake.requests[-1].method == "PUT"
    assert fake.last_json["active"] is True

    await client.delete(read)
    assert fake.requests[-1].method == "DELETE"
    assert fake.last_json == {"advertiser_id": 42}

    await client.aclose()


@pytest.mark.asyncio
async def test_view_list_read():
    fake = FakeBuzz((200, {"success": True, "payload": [{"field_name": "currency", "display": "Currency"}]}))
    client = _client(fake)

    rows = await client.read(ReadViewList(view_name="currency"))

    assert fake.requests[0].url.path == "/rest/view_list"
    assert rows[0].get("display") == "Currency"


@pytest.mark.asyncio
async def test_server_error():
    fake = FakeBuzz((503, {"success": False}))
    client = _client(fake)

    with pytest.raises(BeeswaxAPIError) as exc_info:
        await client.read(ReadAdvertiser())

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = AsyncBeeswaxClient(BASE_URL, http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    with pytest.raises(BeeswaxAPIError, match="Request failed") as exc_info:
        await client.read(ReadAdvertiser())

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
