"""Redaktionsregeln, die personenbezogene Angaben aus dem Log entfernen.

Jede Regel ist eine reine Funktion `(text) -> text`. `apply_redactions` wendet
sie in fester Reihenfolge an; eine bereits redigierte Stelle enthaelt nur noch
den Platzhalter, daher ist jede Regel idempotent."""

from __future__ import annotations

import os
import platform
import re
from typing import Optional

INSTALL_DIR_REPLACEMENT = "[Install_dir]"
HOME_DIR_REPLACEMENT = "[Home_dir]"

RENDERER_START = "GfxDevice: "
RENDERER_END = "\nBegin MonoManager"
RENDERER_REPLACEMENT = "[Renderer information redacted]"

PLAYER_CONNECT_START = "PlayerConnection "
PLAYER_CONNECT_END = "\nInitialize engine"
PLAYER_CONNECT_REPLACEMENT = "[PlayerConnect information redacted]"

# `.` endet am Zeilenumbruch; ohne Umbruch laeuft der Treffer bis zum Textende.
HOST_IDENTIFIER_PATTERN = re.compile(r"Steam_SetMinidumpSteamID.+")
HOST_IDENTIFIER_REPLACEMENT = "[Steam Id redacted]"


def normalize_install_dir(install_dir: Optional[str], sep: str = os.sep) -> str:
    """Macht den Pfad absolut und entfernt abschliessende Trenner.

    Relative Pfade werden nur fuer den Trenner der laufenden Plattform aufgeloest.
    """

    if not install_dir:
        return ""
    if sep == os.sep:
        install_dir = os.path.abspath(install_dir)
    stripped = install_dir.rstrip(sep)
    if sep != "/":
        stripped = stripped.rstrip("/")
    # Ein reines Wurzelverzeichnis wuerde jeden Pfad im Log zerstoeren.
    return stripped if stripped and not stripped.endswith(":") else ""


def redact_install_paths(text: str, install_dir: Optional[str], sep: str = os.sep) -> str:
    """Ersetzt das Installationsverzeichnis durch einen festen Platzhalter.

    Args:
        text: Loginhalt.
        install_dir: Pfad des Installationsverzeichnisses, relativ oder mit Trenner am Ende.
        sep: Pfadtrenner der Plattform.

    Returns:
        Text ohne Installationspfad, auch in der Variante mit `/` als Trenner.
    """

    install_dir = normalize_install_dir(install_dir, sep)
    if not install_dir:
        return text
    text = text.replace(install_dir, INSTALL_DIR_REPLACEMENT)
    if sep != "/":
        # Logs mischen Windows- und Unix-Trenner.
        text = text.replace(install_dir.replace(sep, "/"), INSTALL_DIR_REPLACEMENT)
    return text


def redact_home_directory(text: str, home: Optional[str], system: str) -> str:
    """Ersetzt das Home-Verzeichnis; unter Windows nicht noetig."""

    if system == "Windows" or not home:
        return text
    return text.replace(home, HOME_DIR_REPLACEMENT)


def redact_span(text: str, start_marker: str, end_marker: str, replacement: str) -> str:
    """Ersetzt den Inhalt zwischen zwei Markern, die Marker selbst bleiben erhalten.

    Fehlt einer der Marker, wird der Text unveraendert geliefert.
    """

    start_index = text.find(start_marker)
    if start_index < 0:
        return text
    content_start = start_index + len(start_marker)
    end_index = text.find(end_marker, content_start)
    if end_index < 0:
        return text
    return text[:content_start] + replacement + text[end_index:]


def redact_renderer_info(text: str) -> str:
    return redact_span(text, RENDERER_START, RENDERER_END, RENDERER_REPLACEMENT)


def redact_player_connect_info(text: str) -> str:
    return redact_span(text, PLAYER_CONNECT_START, PLAYER_CONNECT_END, PLAYER_CONNECT_REPLACEMENT)


def redact_host_identifier(text: str) -> str:
    """Entfernt die Steam-ID-Zeile (nur in Linux-Logs vorhanden)."""

    return HOST_IDENTIFIER_PATTERN.sub(HOST_IDENTIFIER_REPLACEMENT, text)


def apply_redactions(
    text: str,
    *,
    install_dir: Optional[str],
    home: Optional[str] = None,
    system: Optional[str] = None,
    sep: str = os.sep,
) -> str:
    """Wendet alle Regeln in fester Reihenfolge an.

    Args:
        text: Roher Loginhalt.
        install_dir: Installationsverzeichnis der Host-Anwendung.
        home: Wert von `HOME`; Standard ist die aktuelle Umgebung.
        system: Plattformname wie von `platform.system()`.
        sep: Pfadtrenner der Plattform.

    Returns:
        Redigierter Text.
    """

    if home is None:
        home = os.environ.get("HOME")
    if system is None:
        system = platform.system()

    text = redact_install_paths(text, install_dir, sep)
    text = redact_home_directory(text, home, system)
    text = redact_renderer_info(text)
    text = redact_player_connect_info(text)
    return redact_host_identifier(text)


__all__ = [
    "apply_redactions",
    "normalize_install_dir",
    "redact_home_directory",
    "redact_host_identifier",
    "redact_install_paths",
    "redact_player_connect_info",
    "redact_renderer_info",
    "redact_span",
]
