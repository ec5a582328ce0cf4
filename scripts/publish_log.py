"""CLI-Skript zum Veroeffentlichen einer Logdatei als Gist.

Das Skript startet den Upload, pollt den Status bis zu einem Endzustand und
liefert einen passenden Exit-Code. Strg+C bricht einen laufenden Upload ab."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Iterable, Optional

import config
from collectors.manifest import load_components
from models.types import ComponentDescriptor
from publisher.pipeline import LogPublisher
from publisher.status import PublishStatus, StatusSnapshot
from publisher.upload_settings import UploadSettings


def poll_status(publisher: LogPublisher, interval: float, timeout: float) -> StatusSnapshot:
    """Fragt den Status zyklisch ab, bis ein Endzustand erreicht ist."""

    start = time.monotonic()
    seen: set[PublishStatus] = set()

    while True:
        snapshot = publisher.snapshot()
        if snapshot.status not in seen:
            print(f"Status '{snapshot.status.value}' erreicht.")
            seen.add(snapshot.status)

        if snapshot.status is not PublishStatus.UPLOADING:
            return snapshot

        if time.monotonic() - start > timeout:
            publisher.abort()
            raise TimeoutError("Timeout: Upload brauchte zu lange.")

        time.sleep(interval)


def run_publish(
    log_file: str,
    install_dir: Optional[str],
    components_file: Optional[str],
    settings: UploadSettings,
    interval: float,
    timeout: float,
) -> int:
    """Fuehrt den kompletten Upload aus und gibt den Exit-Code zurueck."""

    def component_source() -> list[ComponentDescriptor]:
        return load_components(components_file) if components_file else []

    publisher = LogPublisher(
        lambda: log_file,
        component_source,
        install_dir=install_dir,
        settings=settings,
    )

    print(f"Veroeffentliche Log: {log_file}")
    publisher.publish()
    try:
        snapshot = poll_status(publisher, interval, timeout)
    except KeyboardInterrupt:
        publisher.abort()
        snapshot = publisher.snapshot()

    if snapshot.status is PublishStatus.DONE:
        print(f"Log veroeffentlicht: {snapshot.result_url}")
        return 0
    print(f"Upload fehlgeschlagen: {snapshot.error_message}")
    return 1


def build_arg_parser() -> argparse.ArgumentParser:
    """Erzeugt den CLI-Argumentparser."""

    parser = argparse.ArgumentParser(description="Redigiertes Anwendungslog als Gist veroeffentlichen")
    parser.add_argument("--log-file", default=config.LOG_FILE_PATH, help="Pfad der Logdatei")
    parser.add_argument("--install-dir", default=config.INSTALL_DIR, help="Installationsverzeichnis zum Maskieren")
    parser.add_argument("--components", default=config.COMPONENTS_FILE, help="JSON-Datei mit geladenen Komponenten")
    parser.add_argument("--mock", action="store_true", help="Upload simulieren, kein Netzwerkzugriff")
    parser.add_argument("--interval", type=float, default=0.5, help="Polling-Intervall in Sekunden")
    parser.add_argument("--timeout", type=float, default=120.0, help="Timeout in Sekunden")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI-Einstiegspunkt fuer das Skript."""

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = UploadSettings()
    if args.mock:
        settings = settings.model_copy(update={"mock_upload": True})

    try:
        return run_publish(
            args.log_file,
            args.install_dir or None,
            args.components or None,
            settings,
            args.interval,
            args.timeout,
        )
    except TimeoutError as error:
        print(str(error))
        return 1
    except Exception as error:
        print(f"Fehler beim Veroeffentlichen: {error}")
        return 1


if __name__ == "__main__":  # pragma: no cover - manueller Aufruf
    sys.exit(main())
