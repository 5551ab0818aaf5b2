# tests/test_auth_reader.py

from __future__ import annotations

import httpx
import pytest

from ramplo.client.api_client import ApiClient
from ramplo.client.auth_reader import (
    AuthContextReader,
    AuthStatus,
    TransientFetchError,
    Unauthenticated,
)
from ramplo.client.query_cache import QueryCache


def user_payload(is_morty_user: bool = False) -> dict:
    return {
        "user": {
            "id": "u1",
            "email": "lo@example.com",
            "is_morty_user": is_morty_user,
        },
        "profile": None,
        "progress": {"user_id": "u1", "current_week": 2, "current_day": 3},
    }


class Responder:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        assert request.url.path == "/api/auth/user"
        if self.error is not None:
            raise self.error
        return self.response


def make_reader(responder: Responder) -> AuthContextReader:
    api = ApiClient(base_url="http://test", transport=httpx.MockTransport(responder))
    return AuthContextReader(api, QueryCache())


@pytest.mark.asyncio
async def test_authenticated_snapshot() -> None:
    reader = make_reader(Responder(httpx.Response(200, json=user_payload())))

    snapshot = await reader.get_auth_snapshot()

    assert snapshot.is_authenticated
    assert snapshot.status is AuthStatus.AUTHENTICATED
    assert snapshot.user.id == "u1"
    assert snapshot.profile is None
    assert snapshot.progress.current_week == 2
    assert snapshot.is_morty_user is False
    assert snapshot.is_loading is False


@pytest.mark.asyncio
async def test_morty_flag_follows_user_record() -> None:
    reader = make_reader(Responder(httpx.Response(200, json=user_payload(True))))

    assert (await reader.get_auth_snapshot()).is_morty_user is True


@pytest.mark.asyncio
async def test_unauthorized_is_unauthenticated_without_retry() -> None:
    responder = Responder(httpx.Response(401, json={"detail": "Not authenticated"}))
    reader = make_reader(responder)

    snapshot = await reader.get_auth_snapshot()

    assert not snapshot.is_authenticated
    assert snapshot.is_morty_user is False
    assert snapshot.status is AuthStatus.UNAUTHENTICATED
    assert isinstance(snapshot.error, Unauthenticated)
    assert responder.calls == 1


@pytest.mark.asyncio
async def test_server_error_is_transient() -> None:
    responder = Responder(httpx.Response(503, text="unavailable"))
    reader = make_reader(responder)

    snapshot = await reader.get_auth_snapshot()

    assert snapshot.user is None
    assert snapshot.status is AuthStatus.ERROR
    assert isinstance(snapshot.error, TransientFetchError)
    assert responder.calls == 1


@pytest.mark.asyncio
async def test_network_error_is_transient() -> None:
    reader = make_reader(Responder(error=httpx.ConnectError("no route")))

    snapshot = await reader.get_auth_snapshot()

    assert snapshot.status is AuthStatus.ERROR
    assert reader.current().status is AuthStatus.ERROR


@pytest.mark.asyncio
async def test_snapshot_is_cached_until_invalidated() -> None:
    responder = Responder(httpx.Response(200, json=user_payload()))
    reader = make_reader(responder)

    await reader.get_auth_snapshot()
    await reader.get_auth_snapshot()
    assert responder.calls == 1
    assert reader.current().is_authenticated

    reader.cache.invalidate("/api/auth/user")
    await reader.get_auth_snapshot()
    assert responder.calls == 2


def test_current_before_any_fetch_is_unauthenticated() -> None:
    reader = make_reader(Responder(httpx.Response(200, json=user_payload())))

    snapshot = reader.current()

    assert snapshot.user is None
    assert snapshot.error is None
    assert snapshot.status is AuthStatus.UNAUTHENTICATED


@pytest.mark.asyncio
async def test_non_json_success_body_is_transient() -> None:
    reader = make_reader(Responder(httpx.Response(200, text="<html></html>")))

    snapshot = await reader.get_auth_snapshot()

    assert snapshot.user is None
    assert snapshot.status is AuthStatus.ERROR
    assert isinstance(snapshot.error, TransientFetchError)


@pytest.mark.asyncio
async def test_signed_out_refetch_replaces_cached_user() -> None:
    responder = Responder(httpx.Response(200, json=user_payload()))
    reader = make_reader(responder)
    assert (await reader.get_auth_snapshot()).is_authenticated

    responder.response = httpx.Response(401, json={"detail": "Not authenticated"})
    reader.cache.invalidate("/api/auth/user")
    snapshot = await reader.get_auth_snapshot()

    assert snapshot.status is AuthStatus.UNAUTHENTICATED
    assert isinstance(snapshot.error, Unauthenticated)
    current = reader.current()
    assert not current.is_authenticated
    assert current.status is AuthStatus.UNAUTHENTICATED
    assert isinstance(current.error, Unauthenticated)

    responder.response = httpx.Response(200, json=user_payload())
    reader.cache.invalidate("/api/auth/user")
    await reader.get_auth_snapshot()
    assert reader.current().is_authenticated
