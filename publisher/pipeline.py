"""Sammelt, redigiert und veroeffentlicht das Anwendungslog als Gist.

`LogPublisher.publish` laeuft im Thread des Aufrufers: Log lesen, redigieren,
Manifest anhaengen. Der Upload selbst laeuft in einem frisch gestarteten
Worker-Thread mit eigener asyncio-Schleife und ist ueber `abort` abbrechbar."""

from __future__ import annotations

import asyncio
from datetime import datetime
import logging
import os
import platform
from threading import Event, Lock, Thread
from typing import Callable, Iterable, Optional

from collectors.log_file import collect_log_text
from collectors.manifest import build_manifest
from models.types import ComponentDescriptor, GistResponse, LogBundle
from publisher.status import (
    DATA_COLLECTION_FAILED,
    RESPONSE_PARSE_FAILED,
    USER_ABORTED,
    PublishState,
    PublishStatus,
    StatusListener,
    StatusSnapshot,
)
from publisher.transport import GistTransport, select_transport
from publisher.upload_settings import SUCCESS_STATUS_LINE, UploadSettings
from redaction.rules import apply_redactions
from util.gist_response import extract_gist_url
from util.json_escape import encode_gist_payload

_LOGGER = logging.getLogger(__name__)

LogPathProvider = Callable[[], Optional[str]]
ComponentSource = Callable[[], Iterable[ComponentDescriptor]]


class CancellationToken:
    """Kooperativer Abbruch fuer den laufenden Upload-Task.

    Der Worker bindet seinen asyncio-Task; `cancel` bricht ihn thread-sicher
    ueber die Event-Loop des Workers ab.
    """

    def __init__(self) -> None:
        self._event = Event()
        self._lock = Lock()
        self._task: Optional[asyncio.Task] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        with self._lock:
            self._event.set()
            if self._task is not None and self._loop is not None:
                self._loop.call_soon_threadsafe(self._task.cancel)

    def bind(self, task: asyncio.Task) -> None:
        with self._lock:
            self._loop = asyncio.get_running_loop()
            self._task = task
            if self._event.is_set():
                task.cancel()

    def unbind(self) -> None:
        with self._lock:
            self._task = None
            self._loop = None


def make_log_timestamp(now: datetime) -> str:
    return f"Log uploaded on {now:%A, %d %B %Y}, {now:%H:%M:%S}\n"


class LogPublisher:
    """Zustandsautomat fuer die Veroeffentlichung des Logs.

    Args:
        log_path_provider: Liefert den Pfad der aktiven Logdatei oder `None`.
        component_source: Liefert die geladenen Komponenten in Ladereihenfolge.
        install_dir: Installationsverzeichnis, das im Log maskiert wird.
        settings: Upload-Parameter; Standard aus `config`.
        transport: Coroutine fuer den eigentlichen Upload.
        platform_name: Plattformerkennung, z. B. `platform.system`.
        env_reader: Liest Umgebungsvariablen (fuer `HOME`).
        clock: Liefert die aktuelle Zeit fuer den Zeitstempel.
    """

    def __init__(
        self,
        log_path_provider: LogPathProvider,
        component_source: ComponentSource,
        *,
        install_dir: Optional[str] = None,
        settings: Optional[UploadSettings] = None,
        transport: Optional[GistTransport] = None,
        platform_name: Callable[[], str] = platform.system,
        env_reader: Callable[[str], Optional[str]] = os.environ.get,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._log_path_provider = log_path_provider
        self._component_source = component_source
        self._install_dir = install_dir
        if not install_dir:
            _LOGGER.warning("Kein Installationsverzeichnis konfiguriert, Pfade werden nicht maskiert")
        self._settings = settings or UploadSettings()
        self._transport = transport or select_transport(self._settings)
        self._platform_name = platform_name
        self._env_reader = env_reader
        self._clock = clock
        self._state = PublishState()
        self._worker: Optional[Thread] = None

    # --- Lesezugriff fuer die UI ---

    def snapshot(self) -> StatusSnapshot:
        return self._state.snapshot()

    @property
    def status(self) -> PublishStatus:
        return self._state.snapshot().status

    @property
    def error_message(self) -> Optional[str]:
        return self._state.snapshot().error_message

    @property
    def result_url(self) -> Optional[str]:
        return self._state.snapshot().result_url

    def subscribe(self, listener: StatusListener) -> None:
        """Registriert einen Callback fuer jeden Statuswechsel."""

        self._state.subscribe(listener)

    # --- Steuerung ---

    def publish(self) -> bool:
        """Startet einen Upload, sofern der Publisher bereit ist.

        Returns:
            `True`, wenn ein neuer Versuch gestartet wurde; `False`, wenn bereits
            ein Upload laeuft.
        """

        token = CancellationToken()
        attempt = self._state.begin(token.cancel)
        if attempt is None:
            _LOGGER.debug("publish ignoriert: Upload laeuft bereits")
            return False

        try:
            bundle = self.prepare_log_data()
        except Exception:
            _LOGGER.exception("Daten fuer den Log-Upload konnten nicht gesammelt werden")
            self._state.finish(attempt, PublishStatus.ERROR, error_message=DATA_COLLECTION_FAILED)
            return True

        if token.cancelled:
            return True

        payload = encode_gist_payload(self._settings.description, self._settings.filename, bundle.render())
        worker = Thread(
            target=self._run_worker,
            args=(attempt, payload, token),
            name=f"log-publisher-{attempt}",
            daemon=True,
        )
        self._worker = worker
        worker.start()
        return True

    def abort(self) -> bool:
        """Bricht den laufenden Upload ab; ausserhalb von `uploading` wirkungslos."""

        aborted = self._state.abort(USER_ABORTED)
        if aborted:
            _LOGGER.info("Log-Upload durch Benutzer abgebrochen")
        return aborted

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wartet auf den aktuellen Worker; liefert `True`, wenn keiner mehr laeuft."""

        worker = self._worker
        if worker is None:
            return True
        worker.join(timeout)
        return not worker.is_alive()

    # --- Datensammlung ---

    def prepare_log_data(self) -> LogBundle:
        """Liest, redigiert und buendelt Log und Manifest (synchron)."""

        log_section = collect_log_text(self._log_path_provider())
        log_section = apply_redactions(
            log_section,
            install_dir=self._install_dir,
            home=self._env_reader("HOME") or "",
            system=self._platform_name(),
        )
        return LogBundle(
            timestamp=make_log_timestamp(self._clock()),
            active_components=build_manifest(self._component_source()),
            log_body=log_section,
        )

    # --- Worker ---

    def _run_worker(self, attempt: int, payload: str, token: CancellationToken) -> None:
        try:
            response = asyncio.run(self._upload(payload, token))
        except asyncio.CancelledError:
            _LOGGER.debug("Upload-Task nach Abbruch beendet")
            return
        except Exception as error:
            if token.cancelled:
                return
            _LOGGER.warning("Fehler beim Log-Upload (Gist-Erstellung): %s", error, exc_info=True)
            self._state.finish(attempt, PublishStatus.ERROR, error_message=str(error) or type(error).__name__)
            return

        if response.status_line != SUCCESS_STATUS_LINE:
            self._state.finish(attempt, PublishStatus.ERROR, error_message=response.status_line)
            return

        url = extract_gist_url(response.body)
        if url is None:
            _LOGGER.warning("Gist-Antwort ohne html_url: %.200s", response.body)
            self._state.finish(attempt, PublishStatus.ERROR, error_message=RESPONSE_PARSE_FAILED)
            return

        _LOGGER.info("Log veroeffentlicht: %s", url)
        self._state.finish(attempt, PublishStatus.DONE, result_url=url)

    async def _upload(self, payload: str, token: CancellationToken) -> GistResponse:
        task = asyncio.current_task()
        if task is None:
            raise RuntimeError("Upload laeuft ausserhalb eines asyncio-Tasks")
        token.bind(task)
        try:
            return await self._transport(payload, self._settings)
        finally:
            token.unbind()


__all__ = ["CancellationToken", "LogPublisher", "make_log_timestamp"]
