"""Tests fuer den httpx-Transport der Gist-Erstellung."""

from __future__ import annotations

import json

import httpx
import pytest

from publisher import transport as transport_module
from publisher.transport import mock_post_gist, post_gist, select_transport
from publisher.upload_settings import SUCCESS_STATUS_LINE, UploadSettings
from util.json_escape import encode_gist_payload


def _settings(**overrides: object) -> UploadSettings:
    values: dict[str, object] = {
        "api_url": "https://api.github.com/gists",
        "auth_token": "secret-token",
        "user_agent": "test-agent",
    }
    values.update(overrides)
    return UploadSettings(**values)


@pytest.mark.asyncio
async def test_post_gist_sends_headers_and_payload() -> None:
    captured: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(201, text='{"html_url":"https://gist.github.com/abc123"}')

    payload = encode_gist_payload("desc", "output_log.txt", "log/with/slashes")
    response = await post_gist(payload, _settings(), http_transport=httpx.MockTransport(handler))

    request = captured["request"]
    assert request.method == "POST"
    assert str(request.url) == "https://api.github.com/gists"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["User-Agent"] == "test-agent"
    assert json.loads(request.content)["files"]["output_log.txt"]["content"] == "log/with/slashes"
    assert response.status_line == SUCCESS_STATUS_LINE
    assert "abc123" in response.body


@pytest.mark.asyncio
async def test_post_gist_reports_status_line_of_rejection() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text='{"message":"Not Found"}')

    response = await post_gist("{}", _settings(), http_transport=httpx.MockTransport(handler))

    assert response.status_line == "404 Not Found"


@pytest.mark.asyncio
async def test_post_gist_requires_token() -> None:
    with pytest.raises(RuntimeError):
        await post_gist("{}", _settings(auth_token=""))


@pytest.mark.asyncio
async def test_mock_post_gist_returns_created(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(transport_module, "MOCK_UPLOAD_DELAY", 0)

    response = await mock_post_gist("{}", _settings())

    assert response.status_line == SUCCESS_STATUS_LINE
    assert '"html_url":"https://gist.github.com/' in response.body


def test_select_transport_honours_mock_flag() -> None:
    assert select_transport(_settings(mock_upload=True)) is mock_post_gist
    assert select_transport(_settings(mock_upload=False)) is post_gist


def test_upload_settings_hide_token_in_repr() -> None:
    assert "secret-token" not in repr(_settings())
