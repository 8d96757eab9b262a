import asyncio

import httpx
import pytest

from freight_dashboard.config import Settings
from freight_dashboard.utils.upstream import (
    UpstreamBodyError,
    UpstreamClient,
    UpstreamUnavailableError,
)
from .helpers import API_KEY


def test_get_calls_sends_api_key_and_returns_body(upstream):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("x-api-key")
        return httpx.Response(200, json={"results": []})

    resp = asyncio.run(upstream(handler).get_calls())
    assert seen == {"url": "http://upstream.test/calls", "key": API_KEY}
    assert resp.status_code == 200
    assert resp.ok
    assert resp.body == {"results": []}


def test_search_loads_always_sends_all_filters(upstream):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"results": []})

    asyncio.run(upstream(handler).search_loads(origin="Dallas, TX"))
    assert seen["path"] == "/loads/search"
    assert seen["params"] == {
        "origin": "Dallas, TX",
        "destination": "",
        "equipment_type": "",
    }


def test_error_status_is_returned_not_raised(upstream):
    def handler(request):
        return httpx.Response(403, json={"detail": "Forbidden"})

    resp = asyncio.run(upstream(handler).get_calls())
    assert resp.status_code == 403
    assert not resp.ok
    assert resp.body == {"detail": "Forbidden"}


def test_transport_failure_raises_unavailable(upstream):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamUnavailableError):
        asyncio.run(upstream(handler).get_calls())


def test_non_json_body_raises_body_error(upstream):
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(UpstreamBodyError):
        asyncio.run(upstream(handler).get_calls())


def test_trailing_slash_in_base_url_is_trimmed():
    client = UpstreamClient(Settings(api_base_url="http://upstream.test/v1/"))
    assert client.base_url == "http://upstream.test/v1"


def test_malformed_base_url_raises_unavailable():
    client = UpstreamClient(Settings(api_base_url="http://bad\x00host"))
    with pytest.raises(UpstreamUnavailableError):
        asyncio.run(client.get_calls())
