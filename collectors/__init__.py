"""Datenquellen fuer das Log-Bundle: Logdatei und Komponentenliste."""

from .log_file import LOG_HEADER, collect_log_text
from .manifest import build_manifest, load_components

__all__ = ["LOG_HEADER", "build_manifest", "collect_log_text", "load_components"]
