# tests/test_api_client.py

from __future__ import annotations

import logging

import httpx
import pytest

from ramplo.client.api_client import ApiClient, ApiError


def make_api(handler) -> ApiClient:
    return ApiClient(base_url="http://test", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_json_body_is_decoded() -> None:
    api = make_api(lambda request: httpx.Response(200, json={"ok": True}))

    assert await api.get("/api/tasks") == {"ok": True}


@pytest.mark.asyncio
async def test_empty_body_is_none() -> None:
    api = make_api(lambda request: httpx.Response(204))

    assert await api.patch("/api/tasks/t1/complete") is None


@pytest.mark.asyncio
async def test_non_json_success_body_raises_api_error() -> None:
    api = make_api(lambda request: httpx.Response(200, text="<html></html>"))

    with pytest.raises(ApiError) as exc_info:
        await api.get("/api/auth/user")

    assert exc_info.value.status_code == 200
    assert exc_info.value.retryable is False


@pytest.mark.asyncio
async def test_body_is_ignored_when_not_decoding() -> None:
    api = make_api(lambda request: httpx.Response(200, text="OK"))

    assert await api.patch("/api/tasks/t1/complete", decode=False) is None


@pytest.mark.asyncio
async def test_error_detail_is_in_message() -> None:
    api = make_api(lambda request: httpx.Response(404, json={"detail": "Task not found"}))

    with pytest.raises(ApiError) as exc_info:
        await api.patch("/api/tasks/missing/complete")

    assert str(exc_info.value) == "404: Task not found"
    assert exc_info.value.retryable is False


@pytest.mark.asyncio
async def test_transport_error_is_raised_without_logging(caplog) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    api = make_api(refuse)

    with caplog.at_level(logging.DEBUG, logger="ramplo.client.api_client"):
        with pytest.raises(ApiError) as exc_info:
            await api.get("/api/tasks")

    assert exc_info.value.status_code is None
    assert exc_info.value.retryable is True
    assert [r for r in caplog.records if r.name == "ramplo.client.api_client"] == []


@pytest.mark.asyncio
async def test_identity_header_is_sent() -> None:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    async with ApiClient(
        base_url="http://test",
        email="lo@example.com",
        transport=httpx.MockTransport(record),
    ) as api:
        await api.get("/api/auth/user")

    assert seen[0].headers["X-Auth-Email"] == "lo@example.com"
