"""HTTP-Transport fuer die Gist-Erstellung via httpx."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

import httpx

from models.types import GistResponse
from publisher.upload_settings import SUCCESS_STATUS_LINE, UploadSettings

_LOGGER = logging.getLogger(__name__)

MOCK_UPLOAD_DELAY = 1.5

GistTransport = Callable[[str, UploadSettings], Awaitable[GistResponse]]


async def post_gist(
    payload: str,
    settings: UploadSettings,
    *,
    http_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> GistResponse:
    """Sendet den kodierten Payload an den Gist-Endpunkt.

    Args:
        payload: Bereits serialisiertes JSON-Dokument.
        settings: Endpunkt, Header und TLS-Verhalten.
        http_transport: Optionaler httpx-Transport (z. B. `httpx.MockTransport` in Tests).

    Raises:
        RuntimeError: Wenn kein Zugangstoken konfiguriert ist.
        httpx.HTTPError: Bei Transportfehlern.

    Returns:
        Statuszeile (`"201 Created"`) und Body der Antwort.
    """

    if not settings.auth_token:
        raise RuntimeError("GIST_AUTH_TOKEN ist nicht gesetzt")

    if settings.insecure_skip_verify:
        _LOGGER.debug("Zertifikatspruefung fuer %s deaktiviert", settings.api_url)

    async with httpx.AsyncClient(
        timeout=settings.timeout,
        verify=not settings.insecure_skip_verify,
        transport=http_transport,
    ) as client:
        response = await client.post(
            settings.api_url,
            content=payload.encode("utf-8"),
            headers=settings.to_headers(),
        )

    status_line = f"{response.status_code} {response.reason_phrase}".strip()
    return GistResponse(status_line=status_line, body=response.text)


async def mock_post_gist(payload: str, settings: UploadSettings) -> GistResponse:
    """Simuliert einen erfolgreichen Upload, um die UI ohne Netzwerk zu testen."""

    await asyncio.sleep(MOCK_UPLOAD_DELAY)
    gist_id = f"{random.getrandbits(64):x}"
    body = f'{{"html_url":"https://gist.github.com/{gist_id}"}}'
    return GistResponse(status_line=SUCCESS_STATUS_LINE, body=body)


def select_transport(settings: UploadSettings) -> GistTransport:
    return mock_post_gist if settings.mock_upload else post_gist


__all__ = ["GistTransport", "MOCK_UPLOAD_DELAY", "mock_post_gist", "post_gist", "select_transport"]
