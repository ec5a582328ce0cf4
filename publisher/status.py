"""Thread-sicherer Statusspeicher eines Log-Publishers.

Der Zustand wird nur unter Lock veraendert und als unveraenderlicher
`StatusSnapshot` gelesen, damit ein pollender UI-Thread nie einen halb
geschriebenen Zustand sieht."""

from __future__ import annotations

from enum import Enum
import logging
from threading import Lock, RLock
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict

# Fehlermeldungen fuer die UI.
DATA_COLLECTION_FAILED = "Failed to collect data"
RESPONSE_PARSE_FAILED = "Failed to parse response"
USER_ABORTED = "Aborted by user"

_LOGGER = logging.getLogger(__name__)


class PublishStatus(str, Enum):
    READY = "ready"
    UPLOADING = "uploading"
    DONE = "done"
    ERROR = "error"

    @property
    def is_ready_like(self) -> bool:
        return self is not PublishStatus.UPLOADING


class StatusSnapshot(BaseModel):
    """Momentaufnahme von Status, Fehlermeldung und Ergebnis-URL."""

    model_config = ConfigDict(frozen=True)

    status: PublishStatus = PublishStatus.READY
    error_message: Optional[str] = None
    result_url: Optional[str] = None


StatusListener = Callable[[StatusSnapshot], None]


class PublishState:
    """Zustandsautomat `ready -> uploading -> done|error`.

    Jeder Upload-Versuch erhaelt eine Nummer. Endzustaende werden nur fuer den
    aktuellen Versuch und nur aus `uploading` heraus uebernommen.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        # Serialisiert Zustandswechsel samt Benachrichtigung.
        self._notify_lock = RLock()
        self._snapshot = StatusSnapshot()
        self._attempt = 0
        self._cancel: Optional[Callable[[], None]] = None
        self._listeners: List[StatusListener] = []

    def snapshot(self) -> StatusSnapshot:
        with self._lock:
            return self._snapshot

    def subscribe(self, listener: StatusListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def begin(self, cancel: Callable[[], None]) -> Optional[int]:
        """Startet einen neuen Versuch; liefert `None`, falls bereits hochgeladen wird.

        Args:
            cancel: Bricht den Netzwerkteil dieses Versuchs ab (siehe `abort`).
        """

        with self._notify_lock:
            with self._lock:
                if not self._snapshot.status.is_ready_like:
                    return None
                self._attempt += 1
                attempt = self._attempt
                self._cancel = cancel
                self._snapshot = StatusSnapshot(status=PublishStatus.UPLOADING)
                snapshot = self._snapshot
            self._notify(snapshot)
        return attempt

    def abort(self, error_message: str) -> bool:
        """Bricht den aktiven Versuch ab und setzt sofort `error`."""

        with self._notify_lock:
            with self._lock:
                if self._snapshot.status is not PublishStatus.UPLOADING:
                    return False
                if self._cancel is not None:
                    self._cancel()
                self._snapshot = StatusSnapshot(status=PublishStatus.ERROR, error_message=error_message)
                snapshot = self._snapshot
            self._notify(snapshot)
        return True

    def finish(
        self,
        attempt: int,
        status: PublishStatus,
        *,
        error_message: Optional[str] = None,
        result_url: Optional[str] = None,
    ) -> bool:
        """Setzt den Endzustand, sofern `attempt` noch aktiv hochlaedt."""

        with self._notify_lock:
            with self._lock:
                if attempt != self._attempt or self._snapshot.status is not PublishStatus.UPLOADING:
                    return False
                self._snapshot = StatusSnapshot(
                    status=status,
                    error_message=error_message,
                    result_url=result_url,
                )
                snapshot = self._snapshot
            self._notify(snapshot)
        return True

    def _notify(self, snapshot: StatusSnapshot) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:  # pragma: no cover - fehlerhafte Listener duerfen den Upload nicht stoppen
                _LOGGER.exception("Status-Listener fehlgeschlagen")


__all__ = [
    "DATA_COLLECTION_FAILED",
    "RESPONSE_PARSE_FAILED",
    "USER_ABORTED",
    "PublishState",
    "PublishStatus",
    "StatusListener",
    "StatusSnapshot",
]
