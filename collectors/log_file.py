"""Liest eine stabile Kopie der aktuellen Logdatei.

Die Host-Anwendung haelt die Datei waehrend der Laufzeit zum Schreiben offen.
Deshalb wird sie zuerst in eine private temporaere Datei kopiert und erst
diese Kopie gelesen."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from models.errors import LogCollectionError, LogNotFoundError

LOG_HEADER = "Log file contents:\n"
_LOGGER = logging.getLogger(__name__)


def collect_log_text(log_path: Optional[str]) -> str:
    """Liefert den vollstaendigen Loginhalt mit vorangestellter Kopfzeile.

    Args:
        log_path: Pfad der aktiven Logdatei; leer oder `None` bedeutet "kein Log".

    Raises:
        LogNotFoundError: Wenn kein Pfad vorliegt oder die Datei fehlt.
        LogCollectionError: Bei Fehlern beim Kopieren, Lesen oder Loeschen.

    Returns:
        `"Log file contents:\\n"` gefolgt vom Dateiinhalt.
    """

    if not log_path or not Path(log_path).is_file():
        raise LogNotFoundError(f"Log file not found: {log_path or ''}")

    try:
        handle, temp_path = tempfile.mkstemp(prefix="log_publisher_", suffix=".txt")
        os.close(handle)
        try:
            shutil.copyfile(log_path, temp_path)
            contents = Path(temp_path).read_text(encoding="utf-8-sig", errors="replace")
        finally:
            os.remove(temp_path)
    except OSError as error:
        raise LogCollectionError(f"Logdatei konnte nicht gelesen werden: {error}") from error

    _LOGGER.debug("Logdatei %s gelesen (%d Zeichen)", log_path, len(contents))
    return LOG_HEADER + contents


__all__ = ["LOG_HEADER", "collect_log_text"]
