"""HTTP-Schnittstelle fuer eine UI, die den Log-Upload startet und pollt."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from collectors.manifest import load_components
from config import COMPONENTS_FILE, INSTALL_DIR, LOG_FILE_PATH
from models.types import ComponentDescriptor
from publisher.pipeline import LogPublisher
from publisher.status import StatusSnapshot

app = FastAPI(title="Log Publisher API")
_PUBLISHER: Optional[LogPublisher] = None

app.add_middleware(
    CORSMiddleware,
    # Erlaubt einem lokalen Frontend den direkten Zugriff auf die API.
    allow_origins=["http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _configured_components() -> list[ComponentDescriptor]:
    if not COMPONENTS_FILE:
        return []
    return load_components(COMPONENTS_FILE)


def get_publisher() -> LogPublisher:
    """Liefert den prozessweiten Publisher und legt ihn bei Bedarf an."""

    global _PUBLISHER
    if _PUBLISHER is None:
        _PUBLISHER = LogPublisher(
            lambda: LOG_FILE_PATH,
            _configured_components,
            install_dir=INSTALL_DIR or None,
        )
    return _PUBLISHER


@app.post("/publish")
def start_publish() -> dict[str, object]:
    """Startet den Upload; waehrend eines laufenden Uploads wirkungslos."""

    publisher = get_publisher()
    started = publisher.publish()
    return {"started": started, **publisher.snapshot().model_dump(mode="json")}


@app.post("/abort")
def abort_publish() -> dict[str, object]:
    """Bricht einen laufenden Upload ab."""

    publisher = get_publisher()
    aborted = publisher.abort()
    return {"aborted": aborted, **publisher.snapshot().model_dump(mode="json")}


@app.get("/status", response_model=StatusSnapshot)
def get_publish_status() -> StatusSnapshot:
    return get_publisher().snapshot()
