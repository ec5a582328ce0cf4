"""Integrationstests fuer die FastAPI-Endpunkte."""

from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient
import pytest

from api import main as api_main
from models.types import GistResponse
from publisher.pipeline import LogPublisher
from publisher.upload_settings import UploadSettings


@pytest.fixture
def publisher(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> LogPublisher:
    log = tmp_path / "output_log.txt"
    log.write_text("engine started\n", encoding="utf-8")

    async def fake_transport(payload: str, settings: UploadSettings) -> GistResponse:
        return GistResponse(status_line="201 Created", body='{"html_url":"https://gist.github.com/abc123"}')

    instance = LogPublisher(
        lambda: str(log),
        lambda: [],
        settings=UploadSettings(auth_token="test-token"),
        transport=fake_transport,
    )
    monkeypatch.setattr(api_main, "_PUBLISHER", instance)
    return instance


def test_status_starts_ready(publisher: LogPublisher) -> None:
    client = TestClient(api_main.app)

    response = client.get("/status")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "error_message": None, "result_url": None}


def test_publish_and_poll_until_done(publisher: LogPublisher) -> None:
    client = TestClient(api_main.app)

    response = client.post("/publish")
    assert response.status_code == 200
    assert response.json()["started"] is True

    assert publisher.wait(5)
    final_status = client.get("/status").json()

    assert final_status["status"] == "done"
    assert final_status["result_url"] == "https://gist.github.com/abc123"


def test_abort_without_upload_is_noop(publisher: LogPublisher) -> None:
    client = TestClient(api_main.app)

    response = client.post("/abort")

    assert response.status_code == 200
    assert response.json()["aborted"] is False
    assert response.json()["status"] == "ready"


def test_get_publisher_builds_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(api_main, "_PUBLISHER", None)

    first = api_main.get_publisher()

    assert isinstance(first, LogPublisher)
    assert api_main.get_publisher() is first
